"""Command-line interface: print the next generation of a grid file."""

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..core.errors import GridError, NotFoundError
from ..core.game import step
from ..core.loader import load_grid
from ..core.render import render


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifestep",
        description="Print the next Conway's Game of Life generation of a grid file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Grid files hold one or more lines of equal length made of '0' (dead)
and '1' (alive). Cells beyond the edges count as dead; nothing wraps.

Examples:
  # Print the generation after blinker.txt
  lifestep blinker.txt

  # Same, logging file and population details to stderr
  lifestep --verbose blinker.txt
        """,
    )

    parser.add_argument("file", help="Path to the input grid file")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log loading and stepping details to stderr",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def validate_path(path: str) -> None:
    """Check that path names an existing regular file.

    Raises:
        NotFoundError: If it does not
    """
    if not Path(path).is_file():
        raise NotFoundError(path)


def run(path: str) -> str:
    """Load a grid file and return its next generation rendered as text."""
    validate_path(path)
    grid = load_grid(path)
    return render(step(grid))


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        output = run(args.file)
    except GridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
