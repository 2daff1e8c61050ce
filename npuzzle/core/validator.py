"""Validation utilities for N-puzzle boards and solutions."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .board import Board


class InvalidBoardError(ValueError):
    """Raised when a tile grid is not a square permutation of 0..N²-1."""


def validate_blocks(blocks) -> np.ndarray:
    """
    Normalize and validate a tile grid.

    Args:
        blocks: N×N grid in row-major order (nested lists or a 2-D array).
                0 denotes the blank.

    Returns:
        The grid as a 2-D int32 array.

    Raises:
        InvalidBoardError: If the grid is empty, not square, holds anything
            but integers, or its values are not exactly 0..N²-1.
    """
    try:
        grid = np.array(blocks)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidBoardError(f"Board must be a grid of integers: {e}") from e

    if grid.ndim != 2 or grid.size == 0:
        raise InvalidBoardError(f"Board must be a non-empty 2-D grid, got shape {grid.shape}")

    # Floats, bools, strings and ints too large for int64 (object dtype) all land here
    if not np.issubdtype(grid.dtype, np.integer):
        raise InvalidBoardError(f"Board must be a grid of integers, got {grid.dtype}")

    rows, cols = grid.shape
    if rows != cols:
        raise InvalidBoardError(f"Board must be square, got {rows}x{cols}")

    # Checked before narrowing to int32
    if not np.array_equal(np.sort(grid, axis=None), np.arange(rows * cols)):
        raise InvalidBoardError(
            f"Tiles must be a permutation of 0..{rows * cols - 1}"
        )

    return grid.astype(np.int32)


def count_inversions(board: Board) -> int:
    """
    Count pairs of non-blank tiles that appear in the wrong relative order.

    Args:
        board: The board to inspect.

    Returns:
        Number of inversions in the row-major tile sequence, blank excluded.
    """
    tiles = board.tiles[board.tiles != 0]
    inversions = 0
    for i in range(len(tiles) - 1):
        inversions += int(np.sum(tiles[i + 1:] < tiles[i]))
    return inversions


def is_solvable(board: Board) -> bool:
    """
    Decide solvability with the classic permutation parity argument.

    For odd N the inversion count must be even. For even N the inversion
    count plus the blank's row (counted from 1 at the bottom) must be odd.
    The A* solver does not rely on this; it detects unsolvable boards by
    searching the twin board instead.
    """
    n = board.dimension()
    inversions = count_inversions(board)
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = n - board.blank_index // n
    return (inversions + blank_row_from_bottom) % 2 == 1


def is_valid_move(before: Board, after: Board) -> bool:
    """Check that ``after`` is reached from ``before`` by sliding one tile into the blank."""
    if before.dimension() != after.dimension():
        return False

    changed = np.flatnonzero(before.tiles != after.tiles)
    if len(changed) != 2:
        return False

    i, j = before.blank_index, after.blank_index
    if {int(changed[0]), int(changed[1])} != {i, j}:
        return False

    n = before.dimension()
    if abs(i - j) == n:
        return True
    return abs(i - j) == 1 and i // n == j // n


def validate_solution(initial: Board, solution: Sequence[Board]) -> bool:
    """
    Validate that a sequence of boards is a legal solution.

    Args:
        initial: The board the solution should start from.
        solution: Boards in play order, initial board first.

    Returns:
        True if the sequence starts at ``initial``, every step is a single
        slide, and the last board is the goal.
    """
    if not solution:
        return False

    if solution[0] != initial:
        return False

    for before, after in zip(solution, solution[1:]):
        if not is_valid_move(before, after):
            return False

    return solution[-1].is_goal()
