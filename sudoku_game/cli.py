"""Command-line interface for the Sudoku game."""

import argparse
import json
import sys

from .core.board import SIZE
from .generator import SudokuGenerator, Difficulty
from .game import Game


PLAY_HELP = """Commands:
  set ROW COL VALUE   enter VALUE at ROW, COL (1-9; 0 or - to clear)
  check               check the grid and mark wrong cells
  new [DIFFICULTY]    start a new game (easy, medium, hard)
  show                print the grid
  help                show this help
  quit                leave the game"""


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator & Terminal Game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  python -m sudoku_game.cli generate --count 5 --difficulty medium

  # Play a hard game in the terminal
  python -m sudoku_game.cli play --difficulty hard

  # Measure generation cost
  python -m sudoku_game.cli benchmark --games 20 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--with-solution", action="store_true",
        help="Print and save each puzzle's solution too"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Play Sudoku in the terminal")
    play_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard"],
        default="easy",
        help="Difficulty level (default: easy)"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--games", "-n", type=int, default=10,
        help="Games per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "all"],
        default="all",
        help="Difficulty to benchmark (default: all)"
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
        "--unique", action="store_true",
        help="Also report how many puzzles have a unique solution"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _difficulties(name):
    if name == "all":
        return list(Difficulty)
    return [Difficulty(name)]


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    all_puzzles = []

    for difficulty in _difficulties(args.difficulty):
        print(f"\nGenerating {args.count} {difficulty.value} puzzles...")

        for i in range(1, args.count + 1):
            puzzle, solution = generator.generate_with_solution(difficulty)
            puzzle_data = {
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "clues": puzzle.count_filled()
            }
            if args.with_solution:
                puzzle_data["solution"] = solution.to_string()
            all_puzzles.append(puzzle_data)

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            print(puzzle)
            if args.with_solution:
                print("Solution:")
                print(solution)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def render_game(game):
    """Render the player grid; givens in brackets, wrong cells marked with !."""
    session = game.session
    horizontal_sep = '+' + ('-' * 11 + '+') * 3
    lines = ['    ' + ''.join(f' {c + 1}  ' + (' ' if (c + 1) % 3 == 0 else '') for c in range(SIZE))]

    for r in range(SIZE):
        if r % 3 == 0:
            lines.append('   ' + horizontal_sep)
        row_str = f' {r + 1} |'
        for c in range(SIZE):
            value = session.user_grid.get(r, c)
            if game.is_given(r, c):
                cell = f'[{value}]'
            elif value == 0:
                cell = ' . '
            elif game.is_wrong(r, c):
                cell = f' {value}!'
            else:
                cell = f' {value} '
            row_str += cell + ' '
            if (c + 1) % 3 == 0:
                row_str = row_str[:-1] + '|'
        lines.append(row_str)

    lines.append('   ' + horizontal_sep)
    return '\n'.join(lines)


def run_play_command(game, line):
    """
    Apply one line of play input to game.

    Returns the text to show the player, or None when the player quits.
    """
    parts = line.split()
    if not parts:
        return ""

    command = parts[0].lower()

    if command in ("quit", "exit", "q"):
        return None

    if command == "help":
        return PLAY_HELP

    if command == "show":
        return render_game(game)

    if command == "new":
        if len(parts) > 1:
            try:
                game.set_difficulty(Difficulty(parts[1].lower()))
            except ValueError:
                return f"Unknown difficulty: {parts[1]}"
        else:
            game.start()
        return f"New {game.difficulty.value} game.\n" + render_game(game)

    if command == "check":
        result = game.check()
        return render_game(game) + "\n" + result.message

    if command == "set":
        if len(parts) < 3:
            return "Usage: set ROW COL VALUE"
        try:
            row, col = int(parts[1]) - 1, int(parts[2]) - 1
        except ValueError:
            return "ROW and COL must be numbers 1-9"
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return "ROW and COL must be numbers 1-9"
        if game.is_given(row, col):
            return f"Cell {row + 1},{col + 1} is a given and cannot be changed"
        raw = parts[3] if len(parts) > 3 else ""
        game.edit(row, col, raw)
        return render_game(game)

    return f"Unknown command: {command} (type 'help')"


def cmd_play(args):
    """Handle the play command."""
    game = Game(Difficulty(args.difficulty), SudokuGenerator(seed=args.seed))
    game.start()

    print(f"Sudoku - {game.difficulty.value}")
    print(PLAY_HELP)
    print(render_game(game))

    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        output = run_play_command(game, line)
        if output is None:
            break
        if output:
            print(output)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark

    difficulties = _difficulties(args.difficulty)

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Games per difficulty: {args.games}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        games_per_difficulty=args.games,
        difficulties=difficulties,
        seed=args.seed,
        check_uniqueness=args.unique
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for difficulty, stats in summary["results_by_difficulty"].items():
        print(f"\n{difficulty}:")
        print(f"  Clues: {stats['clues']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s (max {stats['max_time_seconds']:.4f}s)")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f}")
        if "unique_percent" in stats:
            print(f"  Unique Solution: {stats['unique_percent']:.1f}%")

    benchmark.save_results(args.output)

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
