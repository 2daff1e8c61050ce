"""N-puzzle board generator with configurable difficulty levels."""

from __future__ import annotations
import os
import random
from enum import Enum
from typing import List, Tuple, Optional

from ..core.board import Board


class Difficulty(Enum):
    """Difficulty levels for generated boards."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def scramble_range(self) -> Tuple[int, int]:
        """Get the range of random-walk lengths for this difficulty (min, max)."""
        ranges = {
            Difficulty.EASY: (4, 10),
            Difficulty.MEDIUM: (11, 20),
            Difficulty.HARD: (21, 35),
            Difficulty.EXPERT: (36, 60),
        }
        return ranges[self]


class PuzzleGenerator:
    """
    Generator for N-puzzle boards of various difficulty levels.

    Boards are produced by sliding the blank at random away from the goal,
    never immediately undoing the previous slide. Every generated board is
    therefore solvable, in at most as many moves as the walk took.
    """

    def __init__(self, size: int = 3, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            size: Board dimension N (default 3 for the 8-puzzle).
            seed: Random seed for reproducibility.
        """
        if size < 2:
            raise ValueError(f"Size must be at least 2, got {size}")

        self.size = size
        self.rng = random.Random(seed)

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM) -> Board:
        """
        Generate a solvable board with the specified difficulty.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            A scrambled Board.
        """
        min_depth, max_depth = difficulty.scramble_range
        return self.scramble(self.rng.randint(min_depth, max_depth))

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.MEDIUM) -> List[Board]:
        """
        Generate multiple boards of the same difficulty.

        Args:
            count: Number of boards to generate.
            difficulty: Desired difficulty level.

        Returns:
            List of Boards.
        """
        return [self.generate(difficulty) for _ in range(count)]

    def generate_unsolvable(self, difficulty: Difficulty = Difficulty.MEDIUM) -> Board:
        """Generate a board that cannot be solved: the twin of a solvable one."""
        return self.generate(difficulty).twin()

    def scramble(self, depth: int) -> Board:
        """Walk the blank ``depth`` random slides away from the goal."""
        board = Board.goal(self.size)
        previous = None

        for _ in range(depth):
            candidates = [b for b in board.neighbors() if b != previous]
            previous, board = board, self.rng.choice(candidates)

        return board

    @staticmethod
    def save_to_folder(boards: List[Board], folder_path: str, prefix: str = "puzzle") -> None:
        """
        Save a list of boards to a folder as individual text files.

        Args:
            boards: List of Board objects.
            folder_path: Directory to save the boards.
            prefix: Prefix for the filename (default: "puzzle").
        """
        os.makedirs(folder_path, exist_ok=True)

        for i, board in enumerate(boards, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(board.to_string())
                f.write("\n")
