"""Core module for N-puzzle board representation and validation."""

from .board import Board
from .validator import InvalidBoardError, is_solvable, validate_solution

__all__ = ["Board", "InvalidBoardError", "is_solvable", "validate_solution"]
