"""Tests for the command-line interface."""

import pytest
from npuzzle.cli import main
from npuzzle.core.board import Board


class TestSolveCommand:
    """Tests for the solve command."""

    def test_solve_inline_board(self, capsys):
        """Test solving a board given on the command line."""
        main(["solve", "--board", "3  0 1 3  4 2 5  7 8 6"])
        out = capsys.readouterr().out

        assert "Minimum number of moves = 4" in out
        assert Board.goal(3).to_string() in out

    def test_solve_file(self, tmp_path, capsys):
        """Test solving a board read from a file."""
        path = tmp_path / "puzzle.txt"
        path.write_text("2\n 1  2\n 0  3\n")

        main(["solve", "--file", str(path), "--quiet"])
        out = capsys.readouterr().out

        assert out.strip() == "Minimum number of moves = 1"

    def test_unsolvable(self, capsys):
        """Test reporting an unsolvable board."""
        main(["solve", "--board", "3 1 2 3 4 5 6 8 7 0"])
        assert "No solution possible" in capsys.readouterr().out

    def test_verbose(self, capsys):
        """Verbose mode prints search statistics."""
        main(["solve", "--board", "2 1 2 0 3", "--priority", "hamming", "--verbose"])
        out = capsys.readouterr().out

        assert "Rounds:" in out
        assert "Nodes enqueued:" in out

    def test_bad_board(self, capsys):
        """Malformed boards exit with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            main(["solve", "--board", "3 1 2 3"])

        assert excinfo.value.code == 1
        assert "Error parsing board" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """A missing file exits with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            main(["solve", "--file", str(tmp_path / "missing.txt")])

        assert excinfo.value.code == 1


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate(self, tmp_path, capsys):
        """Generated boards are printed and saved."""
        main([
            "generate", "--count", "2", "--difficulty", "easy",
            "--seed", "4", "--output", str(tmp_path)
        ])
        out = capsys.readouterr().out

        assert "Total boards generated: 2" in out
        assert (tmp_path / "easy" / "puzzle_easy_1.txt").exists()
        assert (tmp_path / "easy" / "puzzle_easy_2.txt").exists()

    def test_generate_unsolvable(self, capsys):
        """Test generating unsolvable boards for every difficulty."""
        main(["generate", "--count", "1", "--difficulty", "all", "--unsolvable", "--seed", "4"])
        out = capsys.readouterr().out

        assert "Total boards generated: 4" in out
        assert "unsolvable" in out


def test_no_command(capsys):
    """Running without a command prints help and exits."""
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
