"""
Main script for console TicTacToe.

Run this script to play TicTacToe against the computer!
"""

import argparse
import logging
import random
import sys

from logic.ai_player import Strategy
from console.config import GameConfig
from console.session import GameSession


# Handler installed by setup_logging(), replaced on the next call
_log_handler = None


def setup_logging(level: str):
    """
    Send log records to stderr so they never mix with the board.

    Raises:
        ValueError: If the level name is not a logging level.
    """
    global _log_handler

    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level {level!r}")

    root = logging.getLogger()
    if _log_handler is not None:
        root.removeHandler(_log_handler)
    root.setLevel(level)

    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter(GameConfig.LOG_FORMAT))
    root.addHandler(_log_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play TicTacToe against the computer")
    parser.add_argument(
        "--strategy",
        default=GameConfig.DEFAULT_STRATEGY,
        help="Computer strategy: random, smart or best (default: %(default)s)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the coin flip and random moves"
    )

    first = parser.add_mutually_exclusive_group()
    first.add_argument(
        "--human-first",
        dest="human_first",
        action="store_const",
        const=True,
        help="You move first"
    )
    first.add_argument(
        "--computer-first",
        dest="human_first",
        action="store_const",
        const=False,
        help="The computer moves first"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log AI decisions to stderr"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging("DEBUG" if args.verbose else GameConfig.LOG_LEVEL)
    except ValueError as e:
        parser.error(str(e))

    try:
        strategy = Strategy.from_name(args.strategy)
    except ValueError as e:
        parser.error(str(e))

    session = GameSession(
        strategy=strategy,
        rng=random.Random(args.seed),
        human_first=args.human_first
    )

    try:
        session.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        print("Goodbye!")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
