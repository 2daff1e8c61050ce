"""Tests for the benchmark framework and charts."""

import json
import os
import threading

import pytest
from npuzzle.benchmark import Benchmark, Visualizer
from npuzzle.generator import Difficulty
from npuzzle.core.board import Board
from npuzzle.solvers import AStarSolver, BFSSolver


@pytest.fixture(scope="module")
def benchmark():
    bench = Benchmark(
        puzzles_per_difficulty=2,
        difficulties=[Difficulty.EASY],
        timeout_seconds=30.0,
        seed=1
    )
    bench.run(show_progress=False)
    return bench


class TestBenchmark:
    """Tests for Benchmark class."""

    def test_default_solvers(self):
        """BFS only joins the default line-up for small boards."""
        assert set(Benchmark(size=3).solvers) == {"A*-Manhattan", "A*-Hamming", "BFS"}
        assert set(Benchmark(size=4).solvers) == {"A*-Manhattan", "A*-Hamming"}

    def test_run(self, benchmark):
        """Every solver runs on every board."""
        assert len(benchmark.results) == 2 * 3
        assert all(r.solved for r in benchmark.results)

    def test_solvers_agree_on_moves(self, benchmark):
        """All solvers are optimal, so move counts match per board."""
        for puzzle_id in range(2):
            moves = {r.moves for r in benchmark.results if r.puzzle_id == puzzle_id}
            assert len(moves) == 1

    def test_summary(self, benchmark):
        """Test summary aggregation."""
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 2
        assert summary["difficulties"] == ["easy"]
        for stats in summary["results_by_algorithm"].values():
            assert stats["accuracy"] == 100.0
            assert stats["total_tested"] == 2

    def test_save_results(self, benchmark, tmp_path):
        """Results, summary and boards are written to disk."""
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "benchmark_results.json") as f:
            assert len(json.load(f)) == 6
        assert (tmp_path / "benchmark_summary.json").exists()
        assert (tmp_path / "puzzles" / "easy" / "puzzle_easy_1.txt").exists()

    def test_custom_solvers(self):
        """A custom solver set replaces the defaults."""
        bench = Benchmark(
            puzzles_per_difficulty=1,
            difficulties=[Difficulty.EASY],
            solvers={"A*": AStarSolver()},
            seed=2
        )
        results = bench.run(show_progress=False)

        assert len(results) == 1
        assert results[0].algorithm == "A*"
        assert results[0].solved

    def test_timeout_stops_worker(self):
        """A timed-out search is cancelled and its worker thread joined."""
        solver = BFSSolver()
        bench = Benchmark(
            puzzles_per_difficulty=1,
            difficulties=[Difficulty.EASY],
            solvers={"BFS": solver},
            timeout_seconds=0.1
        )
        # Unsolvable, so BFS has to walk all 181,440 reachable states
        bench.puzzles = {"easy": [Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]])]}
        threads_before = threading.active_count()

        results = bench.run(show_progress=False)

        assert threading.active_count() == threads_before
        assert results[0].extra["error"] == "Timeout"
        assert not results[0].solved
        assert "cancelled" in solver.stats.extra["error"]

        solution, stats = solver.solve(Board([[1, 2], [0, 3]]))
        assert stats.solved


class TestVisualizer:
    """Tests for chart generation."""

    def test_generate_all(self, benchmark, tmp_path):
        """Every chart file is created."""
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        charts = visualizer.generate_all()

        assert len(charts) == 4
        for chart in charts:
            assert os.path.exists(chart)

    def test_summary_table(self, benchmark, tmp_path):
        """The markdown table lists every algorithm."""
        path = Visualizer(benchmark.results, str(tmp_path)).generate_summary_table()

        with open(path) as f:
            content = f.read()
        for algo in ("A*-Manhattan", "A*-Hamming", "BFS"):
            assert f"| {algo} |" in content


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
