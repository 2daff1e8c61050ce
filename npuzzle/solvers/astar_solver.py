"""A* solver with a lock-step twin search for detecting unsolvable boards."""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
import threading
from typing import Deque, List, Optional, Tuple

from .base_solver import BaseSolver, SearchCancelled
from .priority_queue import MinPQ
from ..core.board import Board


class Priority(Enum):
    """Heuristics for ordering the A* frontier. Both are admissible."""
    MANHATTAN = "manhattan"
    HAMMING = "hamming"

    def score(self, board: Board) -> int:
        """Estimated number of moves from ``board`` to the goal."""
        if self is Priority.HAMMING:
            return board.hamming()
        return board.manhattan()


class SearchState(Enum):
    """Outcome of a solver run."""
    RUNNING = "running"
    SOLVED = "solved"
    TWIN_SOLVED = "twin_solved"


@dataclass
class SearchNode:
    """A board reached after ``moves`` slides, linked to the node it was expanded from."""
    board: Board
    parent: Optional[SearchNode]
    moves: int
    priority: int


def by_priority(node: SearchNode) -> int:
    """Frontier ordering key: heuristic score plus moves made so far."""
    return node.priority


class Solver:
    """
    Optimal N-puzzle solver.

    Runs A* on the initial board and, in lock-step, on its twin. Exactly
    one of the two boards is solvable, so whichever search reaches the goal
    first decides whether the initial board can be solved. The whole search
    happens in the constructor; the query methods only read cached results.

    Nodes with equal priority leave the frontier in insertion order, so the
    returned solution is deterministic.
    """

    def __init__(
        self,
        initial: Board,
        priority: Priority = Priority.MANHATTAN,
        stop: Optional[threading.Event] = None
    ):
        """
        Solve a board.

        Args:
            initial: The board to solve.
            priority: Heuristic used to order both frontiers.
            stop: Event checked once per round; when set, the search
                  raises SearchCancelled.
        """
        self.initial = initial
        self.priority = priority
        self._stop = stop
        self.state = SearchState.RUNNING
        self.rounds = 0
        self.enqueued = 0
        self._moves = -1
        self._solution: Optional[Tuple[Board, ...]] = None

        self._search()

    def _node(self, board: Board, parent: Optional[SearchNode]) -> SearchNode:
        moves = 0 if parent is None else parent.moves + 1
        return SearchNode(board, parent, moves, moves + self.priority.score(board))

    def _search(self) -> None:
        pq: MinPQ[SearchNode] = MinPQ(key=by_priority)
        twin_pq: MinPQ[SearchNode] = MinPQ(key=by_priority)

        pq.insert(self._node(self.initial, None))
        twin_pq.insert(self._node(self.initial.twin(), None))
        self.enqueued = 2

        while self.state is SearchState.RUNNING:
            if self._stop is not None and self._stop.is_set():
                raise SearchCancelled(f"Search cancelled after {self.rounds} rounds")

            current = pq.del_min()
            current_twin = twin_pq.del_min()
            self.rounds += 1

            if current.board.is_goal():
                self.state = SearchState.SOLVED
                self._moves = current.moves
                self._solution = self._trace(current)
            elif current_twin.board.is_goal():
                self.state = SearchState.TWIN_SOLVED
            else:
                self._expand(current, pq)
                self._expand(current_twin, twin_pq)

    def _expand(self, node: SearchNode, pq: MinPQ[SearchNode]) -> None:
        """Queue every neighbor of ``node`` except the board it was reached from."""
        previous = node.parent.board if node.parent is not None else None
        for board in node.board.neighbors():
            if board != previous:
                pq.insert(self._node(board, node))
                self.enqueued += 1

    @staticmethod
    def _trace(goal: SearchNode) -> Tuple[Board, ...]:
        """Walk the parent chain from ``goal`` and return the boards in play order."""
        path: Deque[Board] = deque()
        node: Optional[SearchNode] = goal
        while node is not None:
            path.appendleft(node.board)
            node = node.parent
        return tuple(path)

    def is_solvable(self) -> bool:
        """Is the initial board solvable?"""
        return self.state is SearchState.SOLVED

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board, or -1 if unsolvable."""
        return self._moves

    def solution(self) -> Optional[Tuple[Board, ...]]:
        """Boards of a shortest solution from the initial board to the goal, or None if unsolvable."""
        return self._solution


class AStarSolver(BaseSolver):
    """
    A* search with the twin-board unsolvability check.

    Adapts ``Solver`` to the common ``solve(board) -> (solution, stats)``
    interface. ``iterations`` counts lock-step rounds and ``nodes_explored``
    counts nodes pushed onto both frontiers.
    """

    name = "A*"

    def __init__(self, priority: Priority = Priority.MANHATTAN):
        """
        Initialize the A* solver.

        Args:
            priority: Heuristic used to order the frontier.
        """
        self.priority = priority
        self.name = f"A*-{priority.value.capitalize()}"
        super().__init__()

    def _solve(self, board: Board) -> Optional[List[Board]]:
        solver = Solver(board, self.priority, stop=self.stop_event)

        self.stats.solvable = solver.is_solvable()
        self.stats.iterations = solver.rounds
        self.stats.nodes_explored = solver.enqueued

        solution = solver.solution()
        if solution is None:
            return None
        return list(solution)
