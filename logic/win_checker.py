"""
Win checker for console TicTacToe.
Reports whether a player has won, the game is drawn, or play continues.
"""

from enum import Enum
from typing import Optional, Set, Tuple
from .board import Board, Move, Player


class Outcome(Enum):
    """Status of a game, computed from the board on demand."""
    IN_PROGRESS = "in_progress"
    HUMAN_WON = "human_won"
    AUTOMATON_WON = "automaton_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        """Every outcome except IN_PROGRESS ends the game."""
        return self != Outcome.IN_PROGRESS

    @staticmethod
    def won_by(player: Player) -> "Outcome":
        """The winning outcome for a player."""
        return Outcome.HUMAN_WON if player == Player.HUMAN else Outcome.AUTOMATON_WON


Line = Tuple[Move, Move, Move]

# All possible winning lines, in scan order
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (Move(0, 0), Move(0, 1), Move(0, 2)),
    (Move(1, 0), Move(1, 1), Move(1, 2)),
    (Move(2, 0), Move(2, 1), Move(2, 2)),
    # Columns
    (Move(0, 0), Move(1, 0), Move(2, 0)),
    (Move(0, 1), Move(1, 1), Move(2, 1)),
    (Move(0, 2), Move(1, 2), Move(2, 2)),
    # Diagonals
    (Move(0, 0), Move(1, 1), Move(2, 2)),
    (Move(0, 2), Move(1, 1), Move(2, 0)),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells owned by the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # Human is checked first. Under alternating legal play only the player
    # who just moved can have a line, so the order never decides anything.
    PLAYER_ORDER = (Player.HUMAN, Player.AUTOMATON)

    def evaluate(self, board: Board) -> Outcome:
        """
        Compute the status of the game.

        Args:
            board: The board to inspect.

        Returns:
            HUMAN_WON / AUTOMATON_WON if that player owns a full line,
            otherwise IN_PROGRESS while an empty cell remains, else DRAW.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.won_by(winner)

        if board.is_full():
            return Outcome.DRAW

        return Outcome.IN_PROGRESS

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in self.PLAYER_ORDER:
            if self.has_won(board, player):
                return player
        return None

    def has_won(self, board: Board, player: Player) -> bool:
        """True if the player owns all three cells of any line."""
        return any(self._owns_line(board, line, player) for line in WINNING_LINES)

    def winners(self, board: Board) -> Set[Player]:
        """
        Every player owning a full line.

        Holds two players only for boards that cannot arise from
        alternating legal play.
        """
        return {player for player in self.PLAYER_ORDER if self.has_won(board, player)}

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to inspect.

        Returns:
            The first full line in scan order, or None.
        """
        for line in WINNING_LINES:
            owner = board.get(line[0])
            if owner is not None and self._owns_line(board, line, owner):
                return line
        return None

    def _owns_line(self, board: Board, line: Line, player: Player) -> bool:
        return all(board.get(cell) == player for cell in line)
