"""
Pitch Board - Main

Command-line entry point for the board application.

Usage:
    pitch-board [board.json] [--width W] [--height H] [--side home|away]
                [--compact | --no-compact] [--log-level LEVEL]
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from board.application import BoardApplication
from board.core.constants import DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH
from lineup.formats.roster_data import SIDES

LOG_LEVEL_ENV = "PITCH_BOARD_LOG_LEVEL"


def configure_logging(level_name: str = "WARNING"):
    """Configure root logging once, at the requested level."""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pitch-board", description="Drag players around a pitch and sketch movement arrows."
    )
    parser.add_argument("board", nargs="?", help="Board JSON file to open on startup")
    parser.add_argument("--width", type=int, default=DEFAULT_SCREEN_WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=DEFAULT_SCREEN_HEIGHT, help="Window height")
    parser.add_argument("--side", choices=SIDES, default="home", help="Team shown first")
    parser.add_argument(
        "--compact",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force compact markers on or off (default: follow window width)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the board."""
    args = parse_arguments(argv)
    configure_logging(args.log_level)

    if args.board and not Path(args.board).is_file():
        print(f"Error: Board file not found: {args.board}")
        sys.exit(1)

    app = BoardApplication(args.width, args.height, side=args.side, compact=args.compact)

    if args.board:
        app.load_board(args.board)

    app.run()


if __name__ == "__main__":
    main()
