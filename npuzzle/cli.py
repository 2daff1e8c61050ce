"""Command-line interface for the N-puzzle solver system."""

import argparse
import os
import sys

from .core.board import Board
from .core.validator import InvalidBoardError
from .generator import PuzzleGenerator, Difficulty
from .solvers import AStarSolver, Priority
from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Optimal N-Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a board stored in a file (dimension first, then the tiles)
  python -m npuzzle.cli solve --file puzzle04.txt

  # Solve a board given inline
  python -m npuzzle.cli solve --board "3  0 1 3  4 2 5  7 8 6"

  # Generate 5 hard 4x4 boards
  python -m npuzzle.cli generate --size 4 --count 5 --difficulty hard

  # Run full benchmark
  python -m npuzzle.cli benchmark --puzzles 10 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve an N-puzzle board")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--file", "-f", type=str,
        help="File holding the dimension followed by the tiles"
    )
    source.add_argument(
        "--board", "-b", type=str,
        help="Board text: dimension followed by the tiles, whitespace separated"
    )
    solve_parser.add_argument(
        "--priority", "-p",
        choices=[p.value for p in Priority],
        default=Priority.MANHATTAN.value,
        help="Heuristic ordering the search (default: manhattan)"
    )
    solve_parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Only print the number of moves"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show search statistics"
    )

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate N-puzzle boards")
    gen_parser.add_argument(
        "--size", type=int, default=3,
        help="Board dimension (default: 3)"
    )
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of boards to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "expert", "all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--unsolvable", action="store_true",
        help="Generate unsolvable boards"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for board files"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run solver benchmarks")
    bench_parser.add_argument(
        "--size", type=int, default=3,
        help="Board dimension (default: 3)"
    )
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Boards per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "expert", "all"],
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--timeout", type=float, default=60.0,
        help="Seconds allowed per board per solver (default: 60)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "generate":
        cmd_generate(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _difficulties(name):
    if name == "all":
        return list(Difficulty)
    return [Difficulty(name)]


def cmd_solve(args):
    """Handle the solve command."""
    # Parse board
    try:
        if args.file:
            with open(args.file) as f:
                board = Board.from_string(f.read())
        else:
            board = Board.from_string(args.board)
    except (OSError, InvalidBoardError) as e:
        print(f"Error parsing board: {e}")
        sys.exit(1)

    solver = AStarSolver(Priority(args.priority))
    solution, stats = solver.solve(board)

    if "error" in stats.extra:
        print(f"Error solving board: {stats.extra['error']}")
        sys.exit(1)

    if not stats.solvable:
        print("No solution possible")
    else:
        print(f"Minimum number of moves = {stats.moves}")
        if not args.quiet:
            for step in solution:
                print(step)
                print()

    if args.verbose:
        print(f"  Time: {stats.time_seconds:.4f}s")
        print(f"  Rounds: {stats.iterations:,}")
        print(f"  Nodes enqueued: {stats.nodes_explored:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")


def cmd_generate(args):
    """Handle the generate command."""
    try:
        generator = PuzzleGenerator(size=args.size, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    total = 0
    for difficulty in _difficulties(args.difficulty):
        kind = "unsolvable" if args.unsolvable else difficulty.value
        print(f"\nGenerating {args.count} {kind} {args.size}x{args.size} boards...")

        if args.unsolvable:
            boards = [generator.generate_unsolvable(difficulty) for _ in range(args.count)]
        else:
            boards = generator.generate_batch(args.count, difficulty)

        for i, board in enumerate(boards, 1):
            print(f"\n--- {difficulty.value.capitalize()} Board {i} (manhattan {board.manhattan()}) ---")
            print(board)

        if args.output:
            prefix = f"puzzle_{difficulty.value}"
            if args.unsolvable:
                prefix += "_unsolvable"
            PuzzleGenerator.save_to_folder(boards, os.path.join(args.output, difficulty.value), prefix=prefix)

        total += len(boards)

    if args.output:
        print(f"\nBoards saved in the '{args.output}/' directory")

    print(f"\nTotal boards generated: {total}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    difficulties = _difficulties(args.difficulty)

    print("=" * 60)
    print("N-PUZZLE SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Board size: {args.size}x{args.size}")
    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Difficulties: {[d.value for d in difficulties]}")

    benchmark = Benchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=difficulties,
        size=args.size,
        timeout_seconds=args.timeout,
        seed=args.seed
    )

    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    print("\nBy Algorithm:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Nodes: {stats['avg_nodes_explored']:,.0f}")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
