#!/usr/bin/env python3
"""
Terminal Minesweeper - Main entry point.

Usage:
    python main.py [--difficulty {easy,medium,hard}] [--strict-flags]
                   [--seed N] [--log-file PATH] [--log-level LEVEL]

Controls: arrow keys move, 'f' flags, space opens, Ctrl+C quits.
"""
import argparse
import logging
import random
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tui import DIFFICULTY_NAMES, Minesweeper


def configure_logging(args: argparse.Namespace) -> None:
    """Send logs at the chosen level to a file, or to stderr."""
    logging.basicConfig(
        filename=args.log_file,
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def play(args: argparse.Namespace) -> None:
    """Play one game."""
    game = Minesweeper(
        difficulty=DIFFICULTY_NAMES.get(args.difficulty),
        strict_flags=args.strict_flags,
        rng=random.Random(args.seed) if args.seed is not None else None,
    )
    try:
        state = game.start()
    except (KeyboardInterrupt, EOFError):
        logging.getLogger(__name__).info("Interrupted")
        return
    logging.getLogger(__name__).info("Finished with %s", state.name)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(description="Terminal Minesweeper")
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTY_NAMES),
        help="Preset to play (prompts when omitted)",
    )
    parser.add_argument(
        "--strict-flags",
        action="store_true",
        help="Only win when every flag sits on a mine",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--log-file", default=None, help="Write logs to this file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level for the log file, or for stderr without --log-file",
    )
    return parser


def main() -> None:
    """Parse arguments and run the game."""
    args = build_parser().parse_args()
    configure_logging(args)
    play(args)


if __name__ == "__main__":
    main()
