"""Benchmarking framework for comparing N-puzzle solvers."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import json
import os

from tqdm import tqdm

from ..core.board import Board
from ..generator import PuzzleGenerator, Difficulty
from ..solvers import BaseSolver, AStarSolver, BFSSolver, Priority


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    difficulty: str
    algorithm: str
    solved: bool
    moves: int
    time_seconds: float
    memory_bytes: int
    iterations: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "moves": self.moves,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Benchmark framework for comparing N-puzzle solving algorithms.

    Runs multiple solvers on generated boards and collects performance metrics.
    """

    # Breadth-first search exhausts memory beyond the 8-puzzle
    BFS_MAX_SIZE = 3

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        size: int = 3,
        solvers: Optional[Dict[str, BaseSolver]] = None,
        timeout_seconds: float = 60.0,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of boards to generate per difficulty.
            difficulties: List of difficulties to test (default: all).
            size: Board dimension N.
            solvers: Dict of solver_name -> solver_instance (default: both
                     A* priorities, plus BFS for boards up to 3x3).
            timeout_seconds: Maximum time per board per solver.
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.size = size
        self.timeout_seconds = timeout_seconds
        self.seed = seed

        if solvers is None:
            self.solvers: Dict[str, BaseSolver] = {
                "A*-Manhattan": AStarSolver(Priority.MANHATTAN),
                "A*-Hamming": AStarSolver(Priority.HAMMING),
            }
            if size <= self.BFS_MAX_SIZE:
                self.solvers["BFS"] = BFSSolver(max_states=200_000)
        else:
            self.solvers = solvers

        self.puzzles: Dict[str, List[Board]] = {}
        self.results: List[BenchmarkResult] = []

    def generate_puzzles(self) -> None:
        """Generate all boards for benchmarking."""
        generator = PuzzleGenerator(size=self.size, seed=self.seed)

        print("Generating puzzles...")
        for difficulty in tqdm(self.difficulties, desc="Difficulties"):
            self.puzzles[difficulty.value] = generator.generate_batch(
                self.puzzles_per_difficulty,
                difficulty
            )

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        if not self.puzzles:
            self.generate_puzzles()

        self.results = []

        total_tests = (
            len(self.puzzles) *
            self.puzzles_per_difficulty *
            len(self.solvers)
        )

        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for difficulty_name, puzzles in self.puzzles.items():
            for puzzle_id, puzzle in enumerate(puzzles):
                for solver_name, solver in self.solvers.items():
                    result = self._run_single(
                        puzzle, puzzle_id, difficulty_name, solver_name, solver
                    )
                    self.results.append(result)
                    pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: Board,
        puzzle_id: int,
        difficulty: str,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single board."""
        # On timeout the search is cancelled and its worker joined before the next run
        solver.stop_event.clear()
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(solver.solve, puzzle)
            try:
                solution, stats = future.result(timeout=self.timeout_seconds)
            except TimeoutError:
                solver.cancel()
                return self._failed_result(puzzle_id, difficulty, solver_name, "Timeout")
            except Exception as e:
                return self._failed_result(puzzle_id, difficulty, solver_name, str(e))

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            difficulty=difficulty,
            algorithm=solver_name,
            solved=stats.solved,
            moves=stats.moves,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def _failed_result(
        self,
        puzzle_id: int,
        difficulty: str,
        solver_name: str,
        error: str
    ) -> BenchmarkResult:
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            difficulty=difficulty,
            algorithm=solver_name,
            solved=False,
            moves=-1,
            time_seconds=self.timeout_seconds,
            memory_bytes=0,
            iterations=0,
            nodes_explored=0,
            extra={"error": error}
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.results) // len(self.solvers),
            "size": self.size,
            "solvers_tested": list(self.solvers.keys()),
            "difficulties": [d.value for d in self.difficulties],
            "results_by_algorithm": {},
            "results_by_difficulty": {}
        }

        # Group by algorithm
        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]
                nodes = [r.nodes_explored for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                    "avg_nodes_explored": sum(nodes) / len(nodes),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        # Group by difficulty
        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if diff_results:
                summary["results_by_difficulty"][difficulty.value] = {}

                for solver_name in self.solvers:
                    solver_diff_results = [
                        r for r in diff_results if r.algorithm == solver_name
                    ]
                    if solver_diff_results:
                        solved = [r for r in solver_diff_results if r.solved]
                        times = [r.time_seconds for r in solver_diff_results]
                        moves = [r.moves for r in solved]

                        summary["results_by_difficulty"][difficulty.value][solver_name] = {
                            "accuracy": len(solved) / len(solver_diff_results) * 100,
                            "avg_time_seconds": sum(times) / len(times),
                            "avg_moves": sum(moves) / len(moves) if moves else None,
                            "solved": len(solved),
                            "tested": len(solver_diff_results)
                        }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated boards to files."""
        os.makedirs(output_dir, exist_ok=True)

        # Save raw results as JSON
        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        # Save summary
        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        # Save boards by difficulty
        puzzles_dir = os.path.join(output_dir, "puzzles")
        os.makedirs(puzzles_dir, exist_ok=True)

        for difficulty, puzzles in self.puzzles.items():
            diff_dir = os.path.join(puzzles_dir, difficulty)
            PuzzleGenerator.save_to_folder(puzzles, diff_dir, prefix=f"puzzle_{difficulty}")

        print(f"Results and puzzles saved to {output_dir}")
