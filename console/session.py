"""
Game session for console TicTacToe.

Ties together:
- Logic (board, move validation, outcome, AI)
- Console (rendering, input parsing)

The session owns the board and passes it to the logic on every turn.
"""

import logging
import random
from typing import Callable, Optional

from logic.board import Board, Move, Player
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, Outcome
from logic.ai_player import AIPlayer, Strategy

from .config import GameConfig
from .input_parser import InputError, parse_move
from .renderer import BoardRenderer

logger = logging.getLogger(__name__)


class GameSession:
    """
    One game between the human and the automaton.

    Game flow:
    1. Decide who moves first (coin flip unless told)
    2. Show the board
    3. Human types a move, or the AI picks one
    4. Check for a winner or a draw
    5. Swap turns and repeat until the game is over
    """

    def __init__(
        self,
        strategy: Strategy = Strategy.BEST,
        rng: Optional[random.Random] = None,
        human_first: Optional[bool] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the session.

        Args:
            strategy: Strategy for the automaton.
            rng: Random generator for the coin flip and the AI.
            human_first: Who moves first; None flips a coin.
            input_func: Reads one line of input given a prompt (default: input).
            output_func: Writes one block of text (default: print).
            config: Console configuration.
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        self.board = Board()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(strategy, self.rng)
        self.renderer = BoardRenderer(self.config)

        self._input = input_func or input
        self._output = output_func or print

        if human_first is None:
            human_first = self.rng.random() < 0.5
        self.current_player = Player.HUMAN if human_first else Player.AUTOMATON

        self.outcome = Outcome.IN_PROGRESS

    def play(self) -> Outcome:
        """
        Run the game loop until the game ends.

        Returns:
            The terminal Outcome.

        Raises:
            EOFError: If input runs out mid-game.
        """
        logger.info(
            "New game: strategy=%s, first=%s",
            self.ai.strategy.value, self.current_player.value
        )

        while not self.outcome.is_terminal:
            self._output(self.renderer.render(self.board))

            if self.current_player == Player.HUMAN:
                move = self._human_move()
            else:
                move = self._automaton_move()

            self.board.apply_move(move, self.current_player)
            self.outcome = self.win_checker.evaluate(self.board)
            self.current_player = self.current_player.opposite()

        self._show_game_result()
        return self.outcome

    def _human_move(self) -> Move:
        """Prompt until the human names a legal cell."""
        self._output(self.config.TURN_PROMPT)
        self._output(self.config.INPUT_HINT)

        while True:
            text = self._input(self.config.INPUT_PROMPT)
            try:
                move = parse_move(text, self.config)
            except InputError as e:
                for message in e.messages:
                    self._output(message)
                continue

            result = self.validator.validate_move(self.board, move)
            if result.is_valid:
                return move
            self._output(f"! {result.error_message}")

    def _automaton_move(self) -> Move:
        move = self.ai.select_move(self.board)
        self._output(f"Computer plays {self.renderer.format_cell(move.row, move.col)}")
        return move

    def _show_game_result(self):
        """Show the final board and result."""
        self._output("Game over! Here's what the final board looked like:")
        self._output("")
        self._output(self.renderer.render(self.board))
        self._output("")

        line = self.win_checker.get_winning_line(self.board)
        if line is not None:
            self._output(f"Winning line: {self.renderer.describe_line(line)}")

        self._output(self.renderer.result_message(self.outcome))
        logger.info("Game finished: %s", self.outcome.value)
