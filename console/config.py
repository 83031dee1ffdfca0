"""
Console configuration for TicTacToe.
All the settings for marks, prompts and logging.
"""

import os


class GameConfig:
    """
    Configuration class for the console game.
    Change these values to customize the game!
    """

    # ==================== BOARD DISPLAY ====================
    HUMAN_MARK = "x"
    AUTOMATON_MARK = "o"
    EMPTY_MARK = " "

    # Column labels shown above the board and accepted as input
    COLUMN_LABELS = ["A", "B", "C"]
    ROW_LABELS = ["0", "1", "2"]

    # ==================== AI SETTINGS ====================
    # One of: random, smart, best
    DEFAULT_STRATEGY = os.getenv("TICTACTOE_STRATEGY", "best")

    # ==================== PROMPTS ====================
    TURN_PROMPT = "Your turn. Where would you like to move next?"
    INPUT_HINT = "Type your move as two characters separated by a space (ex: A 1)"
    INPUT_PROMPT = "> "

    # ==================== RESULT MESSAGES ====================
    HUMAN_WON_MESSAGE = "^.^ Congratulations! ^.^ You win! ^.^"
    AUTOMATON_WON_MESSAGE = "~.~ Sorry! ~.~ You lose! ~.~"
    DRAW_MESSAGE = "O.o Whoa, that was close! O.o You tied! O.o"

    # ==================== LOGGING ====================
    LOG_LEVEL = (os.getenv("TICTACTOE_LOG_LEVEL", "WARNING") or "WARNING").upper()
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
