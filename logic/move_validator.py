"""
Move validator for console TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass
from .board import Board, Move


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells

    Turn order is not checked here; the game loop alternates turns.
    """

    def validate_move(self, board: Board, move: Move) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            move: Target cell.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if row/col are in valid range
        if not move.in_range():
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {move}. Must be 0-2."
            )

        # Check if cell is empty
        if not board.is_empty(move):
            return ValidationResult(
                is_valid=False,
                error_message="That cell is not empty. Please try a different cell"
            )

        return ValidationResult(is_valid=True)
