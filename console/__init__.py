"""
Console module for TicTacToe.
Handles board rendering, input parsing and the game loop.
"""

from .config import GameConfig
from .renderer import BoardRenderer
from .input_parser import parse_move, InputError
from .session import GameSession
