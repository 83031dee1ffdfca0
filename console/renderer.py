"""
Board renderer for console TicTacToe.
Turns a board into text for the terminal.
"""

from typing import Optional

from logic.board import Board, Player, BOARD_SIZE
from logic.win_checker import Outcome, Line
from .config import GameConfig


class BoardRenderer:
    """
    Draws the board with column letters on top and row numbers on the left:

            A   B   C
          +---+---+---+
        0 | x |   | o |
          +---+---+---+
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def render(self, board: Board) -> str:
        """
        Render the board as a multi-line string.

        Args:
            board: Board to draw.

        Returns:
            Text ready to print.
        """
        separator = "  " + "+---" * BOARD_SIZE + "+"
        header = "    " + "   ".join(self.config.COLUMN_LABELS)

        lines = [header, separator]
        for row in range(BOARD_SIZE):
            row_str = f"{self.config.ROW_LABELS[row]} "
            for col in range(BOARD_SIZE):
                row_str += f"| {self._mark(board.cells[row][col])} "
            lines.append(row_str + "|")
            lines.append(separator)

        return "\n".join(lines)

    def format_cell(self, row: int, col: int) -> str:
        """Cell name as the player types it, e.g. 'A 1'."""
        return f"{self.config.COLUMN_LABELS[col]} {self.config.ROW_LABELS[row]}"

    def describe_line(self, line: Line) -> str:
        return ", ".join(self.format_cell(cell.row, cell.col) for cell in line)

    def result_message(self, outcome: Outcome) -> str:
        """
        Get the final message for a finished game.

        Args:
            outcome: A terminal outcome.

        Returns:
            Message to show the player.
        """
        if outcome == Outcome.HUMAN_WON:
            return self.config.HUMAN_WON_MESSAGE
        if outcome == Outcome.AUTOMATON_WON:
            return self.config.AUTOMATON_WON_MESSAGE
        if outcome == Outcome.DRAW:
            return self.config.DRAW_MESSAGE
        raise ValueError(f"Game is not over: {outcome}")

    def _mark(self, cell) -> str:
        if cell == Player.HUMAN:
            return self.config.HUMAN_MARK
        if cell == Player.AUTOMATON:
            return self.config.AUTOMATON_MARK
        return self.config.EMPTY_MARK
