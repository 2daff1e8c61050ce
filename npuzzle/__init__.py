"""Optimal N-puzzle solver with twin-board unsolvability detection."""

from .core import Board, InvalidBoardError
from .solvers import Solver, Priority

__all__ = ["Board", "InvalidBoardError", "Solver", "Priority"]
