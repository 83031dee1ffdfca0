"""
AI player for console TicTacToe.
Picks the automaton's move with one of three fixed strategies.
"""

import logging
import random
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Move, Player, CENTER, CORNERS
from .threats import ThreatAnalyzer

logger = logging.getLogger(__name__)


class NoMovesAvailableError(RuntimeError):
    """Raised when a move is requested from a board with no empty cell."""


class Strategy(Enum):
    """AI strategies, weakest first."""
    RANDOM = "random"   # Uniform over empty cells
    SMART = "smart"     # Center, then corners, then random
    BEST = "best"       # Center, win, block, then smart

    @classmethod
    def from_name(cls, name: str) -> "Strategy":
        """
        Look up a strategy by name.

        Accepts the strategy values plus the difficulty aliases
        easy/medium/hard and "genius".
        """
        key = name.strip().lower()
        aliases = {
            "easy": cls.RANDOM,
            "medium": cls.SMART,
            "hard": cls.BEST,
            "genius": cls.BEST,
        }
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown strategy {name!r}. Choose one of: {choices}") from None


_default_rng = random.Random()

_threats = ThreatAnalyzer()


def select_move(
    board: Board,
    strategy: Strategy = Strategy.BEST,
    rng: Optional[random.Random] = None
) -> Move:
    """
    Choose the automaton's next move.

    Args:
        board: Current board. Not modified.
        strategy: Which strategy to apply.
        rng: Random generator for the random fallback (module default if None).

    Returns:
        A legal Move.

    Raises:
        NoMovesAvailableError: If the board has no empty cell.
    """
    move, _ = choose_move(board, strategy, rng)
    return move


def choose_move(
    board: Board,
    strategy: Strategy = Strategy.BEST,
    rng: Optional[random.Random] = None
) -> Tuple[Move, str]:
    """Like select_move(), also returning the rule that picked the move."""
    if not board.empty_cells():
        raise NoMovesAvailableError("No empty cell left to play")

    rng = rng or _default_rng

    if strategy == Strategy.RANDOM:
        return _random_move(board, rng), "random"
    elif strategy == Strategy.SMART:
        return _smart_move(board, rng)
    elif strategy == Strategy.BEST:
        return _best_move(board, rng)

    raise ValueError(f"Unsupported strategy: {strategy!r}")


def _random_move(board: Board, rng: random.Random) -> Move:
    return rng.choice(board.empty_cells())


def _smart_move(board: Board, rng: random.Random) -> Tuple[Move, str]:
    # Prefer the center
    if board.is_empty(CENTER):
        return CENTER, "center"

    # Then the corners, in fixed order
    for corner in CORNERS:
        if board.is_empty(corner):
            return corner, "corner"

    return _random_move(board, rng), "random"


def _best_move(board: Board, rng: random.Random) -> Tuple[Move, str]:
    if board.is_empty(CENTER):
        return CENTER, "center"

    # Win now if we can
    move = _threats.find_winning_move(board, Player.AUTOMATON)
    if move is not None:
        return move, "win"

    # Otherwise block the human's next win
    move = _threats.find_winning_move(board, Player.HUMAN)
    if move is not None:
        return move, "block"

    return _smart_move(board, rng)


class AIPlayer:
    """
    The automated opponent.

    Wraps select_move() with a fixed strategy and random generator. The
    board is passed in on every call and never stored.
    """

    def __init__(
        self,
        strategy: Strategy = Strategy.BEST,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            strategy: Strategy to play with (default: BEST)
            rng: Random generator; pass a seeded one for reproducible games
        """
        self.strategy = strategy
        self.rng = rng or random.Random()

        # Which rule picked the last move (for debugging)
        self.last_reason: Optional[str] = None

    def select_move(self, board: Board) -> Move:
        """
        Get the move for the current position.

        Args:
            board: Current board.

        Returns:
            (row, col) Move to play.

        Raises:
            NoMovesAvailableError: If the board is full.
        """
        move, self.last_reason = choose_move(board, self.strategy, self.rng)
        logger.debug("%s strategy picked %s (%s)", self.strategy.value, move, self.last_reason)
        return move
