"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Visualization generator for N-puzzle solver benchmark results.

    Creates charts comparing algorithm performance across various metrics.
    """

    # Color palette for algorithms
    COLORS = {
        "A*-Manhattan": "#2ecc71",  # Green
        "A*-Hamming": "#3498db",    # Blue
        "BFS": "#e74c3c"            # Red
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_time_by_difficulty(),
            self.plot_nodes_by_difficulty(),
            self.plot_memory_comparison(),
        ]

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def _difficulties(self) -> List[str]:
        return sorted(set(r.difficulty for r in self.results))

    def _save(self, filename: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.algorithm == algo])
            for algo in algorithms
        ]
        colors = [self.COLORS.get(algo, "#95a5a6") for algo in algorithms]

        bars = ax.bar(algorithms, avg_times, color=colors, edgecolor='black', linewidth=0.5)

        for bar, avg in zip(bars, avg_times):
            ax.annotate(f'{avg:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_comparison.png")

    def _grouped_bars(self, ax, metric) -> None:
        """Draw one bar per algorithm for each difficulty, using ``metric(results)`` as height."""
        algorithms = self._algorithms()
        difficulties = self._difficulties()

        x = np.arange(len(difficulties))
        width = 0.8 / len(algorithms)

        for i, algo in enumerate(algorithms):
            heights = []
            for diff in difficulties:
                group = [
                    r for r in self.results
                    if r.algorithm == algo and r.difficulty == diff
                ]
                heights.append(metric(group) if group else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, heights, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_xticks(x)
        ax.set_xticklabels([d.capitalize() for d in difficulties])
        ax.legend(title='Algorithm', bbox_to_anchor=(1.05, 1), loc='upper left')

    def plot_time_by_difficulty(self) -> str:
        """Create grouped bar chart of times by difficulty and algorithm."""
        fig, ax = plt.subplots(figsize=(12, 6))

        self._grouped_bars(ax, lambda group: np.mean([r.time_seconds for r in group]))

        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Solve Time by Difficulty and Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_by_difficulty.png")

    def plot_nodes_by_difficulty(self) -> str:
        """Create grouped bar chart comparing boards generated during the search."""
        fig, ax = plt.subplots(figsize=(12, 6))

        self._grouped_bars(ax, lambda group: np.mean([r.nodes_explored for r in group]))

        ax.set_ylabel('Average Nodes Explored (Log Scale)', fontsize=12)
        ax.set_title('Search Effort by Difficulty and Algorithm', fontsize=14, fontweight='bold')

        # Node counts grow exponentially with solution depth
        ax.set_yscale('log')

        return self._save("nodes_by_difficulty.png")

    def plot_memory_comparison(self) -> str:
        """Create bar chart comparing memory usage."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_memory = [
            np.mean([r.memory_bytes / (1024 * 1024) for r in self.results if r.algorithm == algo])
            for algo in algorithms
        ]
        colors = [self.COLORS.get(algo, "#95a5a6") for algo in algorithms]

        bars = ax.bar(algorithms, avg_memory, color=colors, edgecolor='black', linewidth=0.5)

        for bar, mem in zip(bars, avg_memory):
            ax.annotate(f'{mem:.2f} MB',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Memory (MB)', fontsize=12)
        ax.set_title('Memory Usage by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("memory_comparison.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Accuracy | Avg Moves | Avg Time | Avg Memory | Avg Nodes |",
            "|-----------|----------|-----------|----------|------------|-----------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]
            solved = [r for r in algo_results if r.solved]

            accuracy = (len(solved) / len(algo_results)) * 100 if algo_results else 0
            avg_moves = np.mean([r.moves for r in solved]) if solved else float("nan")
            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_nodes = np.mean([r.nodes_explored for r in algo_results])

            lines.append(
                f"| {algo} | {accuracy:.1f}% | {avg_moves:.1f} | {avg_time:.4f}s "
                f"| {avg_memory:.2f} MB | {int(avg_nodes):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
