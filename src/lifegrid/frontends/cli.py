"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
import numpy as np
from typing import Optional

from ..core.universe import Universe, DEFAULT_WIDTH, DEFAULT_HEIGHT
from ..core.patterns import PatternLibrary


class CLILife:
    """Command-line interface for running a universe and printing its frames."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def create_universe(
        self,
        width: int,
        height: int,
        pattern: Optional[str] = None,
        row: Optional[int] = None,
        col: Optional[int] = None,
        randomize: bool = False,
        verbose: bool = False,
    ) -> Universe:
        """Create and seed a universe.

        Args:
            width: Universe width
            height: Universe height
            pattern: Optional pattern name to seed
            row: Row offset for the pattern (centered when None)
            col: Column offset for the pattern (centered when None)
            randomize: Fill the universe at random instead of (or under) a pattern
            verbose: Print progress updates

        Returns:
            The seeded universe

        Raises:
            ValueError: If the pattern name is unknown
        """
        universe = Universe(width, height)

        if verbose:
            print(f"Initializing {width}x{height} toroidal universe")

        if randomize:
            if verbose:
                print("Generating random population")
            universe.randomize()

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise ValueError(f"Pattern '{pattern}' not found")

            pattern_height, pattern_width = loaded_pattern.get_size()
            if row is None:
                row = max(0, (height - pattern_height) // 2)
            if col is None:
                col = max(0, (width - pattern_width) // 2)

            if verbose:
                print(f"Loading pattern '{pattern}' at ({row}, {col})")
            loaded_pattern.apply_to_universe(universe, row, col, clear=not randomize)

        return universe

    def run(self, universe: Universe, generations: int, quiet: bool = False, verbose: bool = False) -> Universe:
        """Advance a universe, printing each frame.

        Args:
            universe: Universe to advance
            generations: Number of ticks to run
            quiet: Only print the final frame
            verbose: Print population and timing information

        Returns:
            The same universe, advanced
        """
        if not quiet:
            self._print_frame(universe, verbose)

        start_time = time.time()
        for _ in range(generations):
            universe.tick()
            if not quiet:
                self._print_frame(universe, verbose)
        duration = time.time() - start_time

        if quiet:
            self._print_frame(universe, verbose)

        if verbose:
            rate = generations / duration if duration > 0 else 0
            print(f"Ran {generations} generations in {duration:.3f}s ({rate:.1f} gen/s)")

        return universe

    def _print_frame(self, universe: Universe, verbose: bool) -> None:
        header = f"Generation {universe.generation}"
        if verbose:
            header += f" (population {universe.population})"
        print(header + ":")
        print(universe.render())

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    height, width = pattern.get_size()
                    print(f"  {pattern_name}: {width}x{height}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a toroidal universe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 40x40 universe for 10 generations
  lifegrid-cli --random

  # Glider on a 10x10 universe, watching it wrap around the edges
  lifegrid-cli -W 10 -H 10 --pattern Glider -g 40

  # Blinker at a fixed position, final frame only
  lifegrid-cli -W 5 -H 5 --pattern Blinker --row 1 --col 1 -g 3 --quiet

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Universe width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Universe height (default: {DEFAULT_HEIGHT})"
    )

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to run (default: 10)",
    )

    parser.add_argument("--pattern", type=str, help="Seed a named pattern")

    parser.add_argument("--row", type=int, help="Row offset for the pattern (default: centered)")

    parser.add_argument("--col", type=int, help="Column offset for the pattern (default: centered)")

    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="Fill the universe at random (50%% alive)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print the final frame",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.row is not None and args.row < 0:
        errors.append("Row offset must be non-negative")

    if args.col is not None and args.col < 0:
        errors.append("Column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLILife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.seed is not None:
        np.random.seed(args.seed)

    try:
        universe = cli.create_universe(
            width=args.width,
            height=args.height,
            pattern=args.pattern,
            row=args.row,
            col=args.col,
            randomize=args.random,
            verbose=args.verbose,
        )
        cli.run(universe, args.generations, quiet=args.quiet, verbose=args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (IndexError, ValueError) as e:
        print(f"Error: {e}")
        if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
            print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
