"""Generator module for creating N-puzzle boards."""

from .generator import PuzzleGenerator, Difficulty

__all__ = ["PuzzleGenerator", "Difficulty"]
