"""
Logic module for console TicTacToe.
Handles the board, rules, outcome and AI opponent.
"""

from .board import Board, Move, Player, IllegalMoveError
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome, WINNING_LINES
from .threats import ThreatAnalyzer
from .ai_player import AIPlayer, Strategy, NoMovesAvailableError, select_move

__version__ = "1.0.0"
