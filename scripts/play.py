#!/usr/bin/env python3
"""
Bacon Game CLI - Explore how actors connect to the center of the acting universe.

Usage:
    python scripts/play.py
    python scripts/play.py --center "Diane Keaton"
    python scripts/play.py --data-dir path/to/inputs --verbose

Commands (once running):
    c <#>     - top (positive) or bottom (negative) <#> centers by average separation
    d <#>     - top (positive) or bottom (negative) <#> actors by degree
    i         - actors with infinite separation from the current center
    p <name>  - path from <name> to the current center
    s         - average separation of the current center
    u <name>  - make <name> the center of the universe
    h         - help
    q         - quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bacon.config import (  # noqa: E402
    DATA_DIR,
    DEFAULT_CENTER,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    get_missing_data_files,
)
from bacon.data import BaconData  # noqa: E402
from bacon.game import BaconConsole, BaconGame  # noqa: E402
from bacon.graph import VertexNotFoundError  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play the Kevin Bacon game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help=f"Directory with actors.txt, movies.txt, movie-actors.txt (default: {DATA_DIR})",
    )
    parser.add_argument(
        "--center",
        type=str,
        default=DEFAULT_CENTER,
        help=f"Initial center of the universe (default: {DEFAULT_CENTER})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    missing = get_missing_data_files(args.data_dir)
    if missing:
        print(f"Error: missing data files in {args.data_dir}: {', '.join(missing)}", file=sys.stderr)
        return 1

    try:
        graph = BaconData.from_dir(args.data_dir).build_graph()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        game = BaconGame(graph, center=args.center)
    except VertexNotFoundError:
        print(f"Error: '{args.center}' is not in the data set", file=sys.stderr)
        return 1

    try:
        BaconConsole(game).run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())
