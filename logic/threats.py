"""
Threat analyzer for console TicTacToe.
Finds the cell that completes three in a row for a player.
"""

import logging
from typing import Optional

from .board import Board, Move, Player
from .win_checker import WINNING_LINES

logger = logging.getLogger(__name__)


class ThreatAnalyzer:
    """
    Looks one move ahead for a player.

    A threat is a line with two cells owned by the player and the third
    empty. The same scan answers "can I win now" and "can my opponent win
    next" by changing the player argument.
    """

    def find_winning_move(self, board: Board, player: Player) -> Optional[Move]:
        """
        Find a cell that wins immediately for a player.

        Lines are scanned rows top-to-bottom, then columns left-to-right,
        then the main diagonal and the anti-diagonal. The first qualifying
        line wins the tie.

        Args:
            board: The board to inspect.
            player: Player to look for a winning cell for.

        Returns:
            The empty cell of the first threatening line, or None.
        """
        for line in WINNING_LINES:
            owned = 0
            empty = []
            for cell in line:
                owner = board.get(cell)
                if owner == player:
                    owned += 1
                elif owner is None:
                    empty.append(cell)

            if owned == 2 and len(empty) == 1:
                logger.debug("%s threatens %s via line %s", player.value, empty[0], line)
                return empty[0]

        return None
