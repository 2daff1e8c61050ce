"""Breadth-first search solver used as a brute-force reference."""

from __future__ import annotations
from collections import deque
from typing import Deque, Dict, List, Optional

from .base_solver import BaseSolver, SearchCancelled
from ..core.board import Board


class BFSSolver(BaseSolver):
    """
    Brute-force breadth-first search over board configurations.

    Explores configurations level by level, so the first path to reach the
    goal is a shortest one. An unsolvable board is reported once its whole
    reachable component has been explored, which is only practical up to
    3x3 boards.
    """

    name = "BFS"

    def __init__(self, max_states: Optional[int] = None):
        """
        Initialize the BFS solver.

        Args:
            max_states: Stop and give up after discovering this many
                        configurations. None means no limit.
        """
        super().__init__()
        self.max_states = max_states

    def _solve(self, board: Board) -> Optional[List[Board]]:
        parents: Dict[Board, Optional[Board]] = {board: None}
        queue: Deque[Board] = deque([board])

        while queue:
            if self.stop_event.is_set():
                raise SearchCancelled(f"Search cancelled after {len(parents)} states")

            current = queue.popleft()
            self.stats.iterations += 1

            if current.is_goal():
                self.stats.solvable = True
                return self._trace(current, parents)

            for neighbor in current.neighbors():
                if neighbor not in parents:
                    parents[neighbor] = current
                    queue.append(neighbor)

            self.stats.nodes_explored = len(parents)
            if self.max_states is not None and len(parents) > self.max_states:
                self.stats.extra["limit_reached"] = True
                return None

        # Reachable component exhausted without meeting the goal
        self.stats.solvable = False
        return None

    @staticmethod
    def _trace(goal: Board, parents: Dict[Board, Optional[Board]]) -> List[Board]:
        path: Deque[Board] = deque()
        board: Optional[Board] = goal
        while board is not None:
            path.appendleft(board)
            board = parents[board]
        return list(path)
