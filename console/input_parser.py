"""
Input parser for console TicTacToe.
Converts typed text like "A 1" into a Move.
"""

from typing import List, Optional

from logic.board import Move
from .config import GameConfig


class InputError(ValueError):
    """Raised when typed input does not name a cell. Carries every problem found."""

    def __init__(self, messages: List[str]):
        super().__init__("\n".join(messages))
        self.messages = messages


def parse_move(text: str, config: Optional[GameConfig] = None) -> Move:
    """
    Parse a move typed by the human.

    The column letter comes first, then the row number, separated by
    whitespace ("A 1"). The compact form "A1" is accepted too. Letters
    are case-insensitive.

    Args:
        text: Raw input line.
        config: Labels to accept (default GameConfig).

    Returns:
        The Move for the named cell. Occupancy is not checked here.

    Raises:
        InputError: If the column or row is not valid.
    """
    config = config or GameConfig()
    columns = [label.upper() for label in config.COLUMN_LABELS]
    rows = config.ROW_LABELS

    tokens = text.split()
    if len(tokens) == 1 and len(tokens[0]) == 2:
        tokens = [tokens[0][0], tokens[0][1]]
    if len(tokens) != 2:
        raise InputError([config.INPUT_HINT])

    col_text, row_text = tokens[0].upper(), tokens[1]
    errors = []

    if col_text not in columns:
        errors.append(f"! Invalid column value entered. Your choices are: [{', '.join(columns)}]")
    if row_text not in rows:
        errors.append(f"! Invalid row value entered. Your choices are: [{', '.join(rows)}]")
    if errors:
        raise InputError(errors)

    return Move(rows.index(row_text), columns.index(col_text))
