"""Unit tests for the board generator."""

import pytest
from npuzzle.core.board import Board
from npuzzle.core.validator import is_solvable
from npuzzle.generator import PuzzleGenerator, Difficulty


class TestPuzzleGenerator:
    """Tests for PuzzleGenerator class."""

    def test_generate_creates_solvable_board(self):
        """Test that generated boards are solvable."""
        generator = PuzzleGenerator(seed=42)
        board = generator.generate(Difficulty.EASY)

        assert board.dimension() == 3
        assert is_solvable(board)

    def test_scramble_bounds_distance(self):
        """A walk of k slides stays within Manhattan distance k."""
        generator = PuzzleGenerator(size=4, seed=42)
        for depth in (0, 1, 5, 20):
            board = generator.scramble(depth)
            assert board.manhattan() <= depth
            assert is_solvable(board)

    def test_generate_unsolvable(self):
        """Test generating unsolvable boards."""
        generator = PuzzleGenerator(seed=42)
        for _ in range(5):
            assert not is_solvable(generator.generate_unsolvable(Difficulty.MEDIUM))

    def test_generate_batch(self):
        """Test batch generation."""
        generator = PuzzleGenerator(size=4, seed=42)
        boards = generator.generate_batch(3, Difficulty.MEDIUM)

        assert len(boards) == 3
        for board in boards:
            assert board.dimension() == 4
            assert is_solvable(board)

    def test_seed_is_reproducible(self):
        """Equal seeds produce equal boards."""
        first = PuzzleGenerator(seed=123).generate_batch(5, Difficulty.HARD)
        second = PuzzleGenerator(seed=123).generate_batch(5, Difficulty.HARD)
        assert first == second

    def test_rejects_small_size(self):
        """Boards smaller than 2x2 cannot be scrambled."""
        with pytest.raises(ValueError):
            PuzzleGenerator(size=1)

    def test_save_to_folder(self, tmp_path):
        """Saved boards can be read back."""
        boards = PuzzleGenerator(seed=9).generate_batch(2, Difficulty.EASY)
        PuzzleGenerator.save_to_folder(boards, str(tmp_path), prefix="easy")

        for i, board in enumerate(boards, 1):
            text = (tmp_path / f"easy_{i}.txt").read_text()
            assert Board.from_string(text) == board


class TestDifficultyLevels:
    """Test difficulty level scramble ranges."""

    def test_ranges_increase(self):
        """Harder levels scramble further."""
        levels = list(Difficulty)
        for easier, harder in zip(levels, levels[1:]):
            assert easier.scramble_range[1] < harder.scramble_range[0]

    def test_easy_range(self):
        """Easy boards are at most 10 slides from the goal."""
        min_depth, max_depth = Difficulty.EASY.scramble_range
        assert min_depth >= 1
        assert max_depth <= 10


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
