"""
Tests for the TicTacToe console modules.
Covers input parsing, rendering and full scripted games.
"""

import logging
import random
import sys

import pytest

from logic.board import Board, Move, Player
from logic.win_checker import Outcome
from logic.ai_player import Strategy
from console.config import GameConfig
from console.input_parser import parse_move, InputError
from console.renderer import BoardRenderer
from console.session import GameSession
import main


def scripted(lines):
    """Input function that replays lines, then signals end of input."""
    lines = list(lines)

    def _input(prompt):
        if not lines:
            raise EOFError
        return lines.pop(0)

    return _input


class Transcript:
    """Output function that records everything the game prints."""

    def __init__(self):
        self.lines = []

    def __call__(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)


# ==================== INPUT PARSER ====================

@pytest.mark.parametrize("text, expected", [
    ("A 1", Move(1, 0)),
    ("c 2", Move(2, 2)),
    ("b0", Move(0, 1)),
    ("  B   2 ", Move(2, 1)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


def test_parse_bad_column():
    with pytest.raises(InputError) as exc:
        parse_move("D 1")
    assert exc.value.messages == [
        "! Invalid column value entered. Your choices are: [A, B, C]"
    ]


def test_parse_bad_row():
    with pytest.raises(InputError) as exc:
        parse_move("A 3")
    assert exc.value.messages == [
        "! Invalid row value entered. Your choices are: [0, 1, 2]"
    ]


def test_parse_reports_both_problems():
    with pytest.raises(InputError) as exc:
        parse_move("z 9")
    assert len(exc.value.messages) == 2


@pytest.mark.parametrize("text", ["", "A", "A 1 2", "abc"])
def test_parse_wrong_shape(text):
    with pytest.raises(InputError) as exc:
        parse_move(text)
    assert exc.value.messages == [GameConfig.INPUT_HINT]


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_move("Q 7")


# ==================== RENDERER ====================

def test_render_board():
    board = Board.from_rows(["x.o", "...", ".x."])
    expected = "\n".join([
        "    A   B   C",
        "  +---+---+---+",
        "0 | x |   | o |",
        "  +---+---+---+",
        "1 |   |   |   |",
        "  +---+---+---+",
        "2 |   | x |   |",
        "  +---+---+---+",
    ])
    assert BoardRenderer().render(board) == expected


def test_result_messages():
    renderer = BoardRenderer()
    assert "You win" in renderer.result_message(Outcome.HUMAN_WON)
    assert "You lose" in renderer.result_message(Outcome.AUTOMATON_WON)
    assert "You tied" in renderer.result_message(Outcome.DRAW)
    with pytest.raises(ValueError):
        renderer.result_message(Outcome.IN_PROGRESS)


def test_format_cell_matches_parser():
    renderer = BoardRenderer()
    for move in Board().empty_cells():
        assert parse_move(renderer.format_cell(move.row, move.col)) == move


# ==================== SESSION ====================

def test_human_wins_scripted_game():
    out = Transcript()
    session = GameSession(
        strategy=Strategy.BEST,
        rng=random.Random(0),
        human_first=True,
        input_func=scripted(["A 0", "z 9", "b 1", "C 2", "A 2", "A 1"]),
        output_func=out,
    )

    assert session.play() == Outcome.HUMAN_WON
    assert session.board.to_rows() == ["x.o", "xo.", "xox"]

    assert "Invalid column value" in out.text
    assert "Invalid row value" in out.text
    assert "That cell is not empty" in out.text
    assert "Computer plays B 1" in out.text
    assert "Computer plays C 0" in out.text
    assert "Computer plays B 2" in out.text
    assert "Winning line: A 0, A 1, A 2" in out.text
    assert out.lines[-1] == GameConfig.HUMAN_WON_MESSAGE


def test_computer_wins_scripted_game():
    out = Transcript()
    session = GameSession(
        strategy=Strategy.BEST,
        human_first=False,
        input_func=scripted(["A 0", "B 0"]),
        output_func=out,
    )

    assert session.play() == Outcome.AUTOMATON_WON
    assert session.board.to_rows() == ["xxo", ".o.", "o.."]
    assert out.lines[-1] == GameConfig.AUTOMATON_WON_MESSAGE


def test_session_without_winner_ends_in_draw():
    # Human blocks every threat; the board fills without a line
    out = Transcript()
    session = GameSession(
        strategy=Strategy.BEST,
        human_first=False,
        input_func=scripted(["A 0", "A 2", "C 1", "B 0"]),
        output_func=out,
    )

    assert session.play() == Outcome.DRAW
    assert session.board.to_rows() == ["xxo", "oox", "xoo"]
    assert "Winning line" not in out.text
    assert out.lines[-1] == GameConfig.DRAW_MESSAGE


def test_session_coin_flip_is_seeded():
    first = GameSession(rng=random.Random(5), output_func=Transcript()).current_player
    again = GameSession(rng=random.Random(5), output_func=Transcript()).current_player
    assert first == again
    assert first in (Player.HUMAN, Player.AUTOMATON)


def test_session_propagates_end_of_input():
    session = GameSession(
        human_first=True,
        input_func=scripted([]),
        output_func=Transcript(),
    )
    with pytest.raises(EOFError):
        session.play()
    assert session.outcome == Outcome.IN_PROGRESS


# ==================== MAIN ====================

def test_main_rejects_unknown_strategy(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--strategy", "minimax"])
    assert exc.value.code == 2
    assert "Unknown strategy" in capsys.readouterr().err


def test_main_exits_on_closed_input(monkeypatch, capsys):
    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main.main(["--human-first", "--seed", "3"]) == 130
    assert "Goodbye!" in capsys.readouterr().out


def test_main_rejects_conflicting_first_player():
    with pytest.raises(SystemExit):
        main.main(["--human-first", "--computer-first"])


def test_main_rejects_unknown_log_level(monkeypatch, capsys):
    monkeypatch.setattr(GameConfig, "LOG_LEVEL", "loud")
    with pytest.raises(SystemExit) as exc:
        main.main(["--human-first"])
    assert exc.value.code == 2
    assert "Unknown log level 'LOUD'" in capsys.readouterr().err


def test_setup_logging_keeps_other_handlers():
    root = logging.getLogger()
    level = root.level
    other = logging.NullHandler()
    root.addHandler(other)
    try:
        main.setup_logging("info")
        first = main._log_handler
        main.setup_logging("debug")

        assert other in root.handlers
        assert first not in root.handlers
        assert main._log_handler in root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(other)
        root.removeHandler(main._log_handler)
        main._log_handler = None
        root.setLevel(level)


def run_all_tests():
    """Run this module under pytest (the session tests need its fixtures)."""
    print("=" * 60)
    print("   TicTacToe Console - Tests")
    print("=" * 60)
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
