"""
Board model for console TicTacToe.
Holds the 3x3 grid and answers questions about single cells.
"""

from enum import Enum
from typing import Optional, List, Iterable
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    HUMAN = "human"
    AUTOMATON = "automaton"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.AUTOMATON if self == Player.HUMAN else Player.HUMAN


# A cell is either empty (None) or owned by one player
Cell = Optional[Player]

BOARD_SIZE = 3

# Characters accepted by Board.from_rows()
_ROW_CHARS = {
    "x": Player.HUMAN,
    "o": Player.AUTOMATON,
    " ": None,
    ".": None,
}


class IllegalMoveError(ValueError):
    """Raised when a move is applied to an occupied or out-of-range cell."""


@dataclass(frozen=True)
class Move:
    """
    A single target cell on the board.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)

    def in_range(self) -> bool:
        """True if both coordinates are on the board."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


CENTER = Move(1, 1)

# Corner preference order: top-left, top-right, bottom-left, bottom-right
CORNERS = (Move(0, 0), Move(0, 2), Move(2, 0), Move(2, 2))


@dataclass
class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are indexed cells[row][col]. The board does not know whose turn
    it is; the game loop owns the board and alternates turns.
    """

    # None means empty, otherwise the owning Player
    cells: List[List[Cell]] = field(
        default_factory=lambda: [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
    )

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from three 3-character strings.

        Args:
            rows: Strings using 'x' for the human, 'o' for the automaton
                and ' ' or '.' for an empty cell.

        Returns:
            A new Board.
        """
        rows = list(rows)
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} characters, got {rows!r}")

        cells = []
        for row in rows:
            try:
                cells.append([_ROW_CHARS[ch.lower()] for ch in row])
            except KeyError as e:
                raise ValueError(f"Unknown cell character {e.args[0]!r} in row {row!r}") from None
        return cls(cells=cells)

    def get(self, move: Move) -> Cell:
        """Get the owner of a cell (None if empty)."""
        return self.cells[move.row][move.col]

    def is_empty(self, move: Move) -> bool:
        return self.get(move) is None

    def is_legal_move(self, move: Move) -> bool:
        """
        Check whether a move can be played.

        Args:
            move: The target cell.

        Returns:
            True if the cell is on the board and empty.
        """
        return move.in_range() and self.is_empty(move)

    def apply_move(self, move: Move, owner: Player) -> "Board":
        """
        Place a mark for a player.

        The caller must have checked legality first; an illegal move is a
        programming error and is never silently corrected.

        Args:
            move: The target cell.
            owner: The player claiming the cell.

        Returns:
            This board, updated in place.

        Raises:
            IllegalMoveError: If the cell is out of range or occupied.
        """
        if not move.in_range():
            raise IllegalMoveError(f"Move {move} is off the board")
        if not self.is_empty(move):
            raise IllegalMoveError(f"Cell {move} is already owned by {self.get(move).value}")

        self.cells[move.row][move.col] = owner
        return self

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells on the board.

        Returns:
            List of Moves in row-major order.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.cells[row][col] is None:
                    empty.append(Move(row, col))
        return empty

    def is_full(self) -> bool:
        return not self.empty_cells()

    def count(self, player: Player) -> int:
        """Number of cells owned by a player."""
        return sum(1 for row in self.cells for cell in row if cell == player)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(cells=[[cell for cell in row] for row in self.cells])

    def to_rows(self) -> List[str]:
        """Inverse of from_rows(), using '.' for empty cells."""
        marks = {Player.HUMAN: "x", Player.AUTOMATON: "o", None: "."}
        return ["".join(marks[cell] for cell in row) for row in self.cells]
