"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple
import threading
import time
import tracemalloc

from ..core.board import Board
from ..core.validator import validate_solution


class SearchCancelled(RuntimeError):
    """Raised inside a search when its stop event has been set."""


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    solved: bool = False
    solvable: Optional[bool] = None
    moves: int = -1
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search effort: rounds or pops, and boards generated
    iterations: int = 0
    nodes_explored: int = 0

    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "solvable": self.solvable,
            "moves": self.moves,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for N-puzzle solvers.

    A run started with ``solve`` can be stopped from another thread with
    ``cancel``. Subclasses poll ``self.stop_event`` once per step of their
    search and raise ``SearchCancelled`` when it is set.
    """

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)
        self.stop_event = threading.Event()

    def cancel(self) -> None:
        """Ask the running search, or the next one if none is running, to stop at its next step."""
        self.stop_event.set()

    def solve(self, board: Board) -> Tuple[Optional[List[Board]], SolverStats]:
        """
        Solve a board with timing and memory tracking.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (boards from the initial board to the goal or None, stats).
            A cancelled or failed run returns None and records the reason in
            ``stats.extra["error"]``.
        """
        self.stats = SolverStats(algorithm=self.name)

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(board)
            self.stats.solved = solution is not None and validate_solution(board, solution)
            if self.stats.solved:
                self.stats.moves = len(solution) - 1
        except Exception as e:
            self.stats.extra["error"] = str(e)
            solution = None
        finally:
            self.stop_event.clear()

        self.stats.time_seconds = time.perf_counter() - start_time

        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self.stats.memory_bytes = peak

        return solution, self.stats

    @abstractmethod
    def _solve(self, board: Board) -> Optional[List[Board]]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The puzzle to solve. Boards are immutable.

        Returns:
            The boards from ``board`` to the goal in play order, or None if
            no solution was found.
        """
        pass
