"""N-puzzle board representation."""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Optional

from .validator import InvalidBoardError, validate_blocks


class Board:
    """
    Immutable N×N sliding puzzle board.

    Tiles are kept as a flat, read-only int32 array in row-major order and
    0 represents the blank. In the goal board cell i holds i + 1, except the
    last cell, which holds the blank.

    Hamming and Manhattan scores are computed on first use and cached.
    """

    def __init__(self, blocks):
        """
        Initialize a board from an N×N grid.

        Args:
            blocks: Row-major grid of tiles (nested lists or 2-D array),
                    containing each of 0..N²-1 exactly once.

        Raises:
            InvalidBoardError: If the grid is malformed.
        """
        grid = validate_blocks(blocks)
        tiles = grid.flatten()
        self._setup(grid.shape[0], tiles, int(np.flatnonzero(tiles == 0)[0]))

    def _setup(self, n: int, tiles: np.ndarray, blank: int) -> None:
        tiles.flags.writeable = False
        self._n = n
        self._tiles = tiles
        self._blank = blank
        self._hamming: Optional[int] = None
        self._manhattan: Optional[int] = None

    @classmethod
    def _from_tiles(cls, n: int, tiles: np.ndarray, blank: int) -> Board:
        """Wrap an already valid tile array without re-validating it."""
        board = cls.__new__(cls)
        board._setup(n, tiles, blank)
        return board

    def _swapped(self, i: int, j: int) -> Board:
        """Return a new board with the tiles at cells i and j exchanged."""
        tiles = self._tiles.copy()
        tiles[[i, j]] = tiles[[j, i]]

        blank = self._blank
        if blank == i:
            blank = j
        elif blank == j:
            blank = i
        return Board._from_tiles(self._n, tiles, blank)

    @classmethod
    def goal(cls, n: int) -> Board:
        """Create the solved board of dimension n."""
        if n < 1:
            raise InvalidBoardError(f"Dimension must be positive, got {n}")
        tiles = np.arange(1, n * n + 1, dtype=np.int32) % (n * n)
        return cls(tiles.reshape(n, n))

    @classmethod
    def from_string(cls, s: str) -> Board:
        """
        Create a board from its text form.

        The first integer is the dimension N, followed by N² tiles in
        row-major order, separated by any whitespace::

            3
             0  1  3
             4  2  5
             7  8  6
        """
        tokens = s.split()
        if not tokens:
            raise InvalidBoardError("Empty board description")

        try:
            values = [int(t) for t in tokens]
        except ValueError as e:
            raise InvalidBoardError(f"Board description must contain only integers: {e}") from e

        n = values[0]
        if n < 1:
            raise InvalidBoardError(f"Dimension must be positive, got {n}")
        if len(values) - 1 != n * n:
            raise InvalidBoardError(
                f"Expected {n * n} tiles for a {n}x{n} board, got {len(values) - 1}"
            )

        return cls([values[1 + r * n:1 + (r + 1) * n] for r in range(n)])

    # -- queries ---------------------------------------------------------------

    def dimension(self) -> int:
        """Board dimension N."""
        return self._n

    @property
    def tiles(self) -> np.ndarray:
        """Flat, read-only view of the tiles in row-major order."""
        return self._tiles

    @property
    def blank_index(self) -> int:
        """Flat index of the blank cell."""
        return self._blank

    def get(self, row: int, col: int) -> int:
        """Get the tile at (row, col). 0 is the blank."""
        return int(self._tiles[row * self._n + col])

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        if self._hamming is None:
            goal = np.arange(1, self._n * self._n + 1)
            misplaced = (self._tiles != goal) & (self._tiles != 0)
            self._hamming = int(np.sum(misplaced))
        return self._hamming

    def manhattan(self) -> int:
        """Sum of the row and column distances of each tile from its goal cell."""
        if self._manhattan is None:
            n = self._n
            cells = np.flatnonzero(self._tiles)
            goal_cells = self._tiles[cells] - 1
            distance = np.abs(cells // n - goal_cells // n) + np.abs(cells % n - goal_cells % n)
            self._manhattan = int(np.sum(distance))
        return self._manhattan

    def is_goal(self) -> bool:
        """Check if every tile is in its goal cell."""
        # With every numbered tile in place, the blank can only be in the last cell.
        return self.hamming() == 0

    def twin(self) -> Board:
        """
        Board obtained by exchanging one fixed pair of adjacent non-blank tiles.

        Swaps the first two cells of the top row unless one of them is the
        blank, in which case it swaps the first two cells of the second row.
        Exactly one of a board and its twin is solvable. A 1x1 board has no
        such pair, so its twin is an equal copy.
        """
        n = self._n
        if n < 2:
            return Board._from_tiles(n, self._tiles.copy(), self._blank)
        if self._tiles[0] != 0 and self._tiles[1] != 0:
            return self._swapped(0, 1)
        return self._swapped(n, n + 1)

    def neighbors(self) -> Iterator[Board]:
        """Yield the boards one slide away, moving the blank up, down, left, right."""
        n = self._n
        blank = self._blank
        row, col = divmod(blank, n)

        if row > 0:
            yield self._swapped(blank, blank - n)
        if row < n - 1:
            yield self._swapped(blank, blank + n)
        if col > 0:
            yield self._swapped(blank, blank - 1)
        if col < n - 1:
            yield self._swapped(blank, blank + 1)

    def to_list(self) -> List[List[int]]:
        """Return the tiles as an N×N nested list."""
        return self._tiles.reshape(self._n, self._n).tolist()

    def to_string(self) -> str:
        """
        Render the board as text: the dimension on the first line, then one
        line per row. The output can be read back with ``from_string``.
        """
        lines = [str(self._n)]
        for row in self._tiles.reshape(self._n, self._n):
            lines.append(" ".join(f"{int(v):2d}" for v in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Board({self.to_list()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self._n == other._n and np.array_equal(self._tiles, other._tiles)

    def __hash__(self) -> int:
        return hash((self._n, self._tiles.tobytes()))
