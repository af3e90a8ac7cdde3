"""Unit tests for /senku/solitaire/game.py"""

import pytest

from senku.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    InvalidColumnError,
    InvalidLengthError,
    InvalidRowError,
    InvalidTemplateError,
)
from senku.solitaire.board import Board
from senku.solitaire.game import Game, Status, is_quit_command
from senku.solitaire.moves import Direction, Move
from senku.solitaire.templates import BIG_CROSS, ENGLISH


@pytest.fixture
def game() -> Game:
    return Game.new_game(ENGLISH)


def test_new_game(game: Game) -> None:
    assert game.board == Board.from_template(ENGLISH)
    assert game.score == 0
    assert game.moves == []
    assert game.status == Status.IN_PROGRESS
    assert game.legal_moves() == ["D1D", "B3R", "F3L", "D5U"]


@pytest.mark.parametrize(
    "template",
    [
        ("o" * 30 + "x",),  # wider than the column letters
        ("ox",) * 11,  # more rows than digits
        ("ooo",),  # nowhere to jump to
    ],
)
def test_new_game_refuses_unplayable_board(template: tuple[str, ...]) -> None:
    with pytest.raises(InvalidTemplateError):
        Game.new_game(template)


def test_make_move(game: Game) -> None:
    move = game.make_move("F3L")
    assert move == Move(5, 3, Direction.LEFT)
    assert game.score == 1
    assert game.moves == ["F3L"]
    assert "F3L" not in game.legal_moves()


@pytest.mark.parametrize(
    "move_text, error",
    [
        ("f3L", InvalidColumnError),
        ("F3", InvalidLengthError),
        ("F7L", InvalidRowError),
        ("A0R", IllegalMoveError),  # off the board
        ("D0D", IllegalMoveError),  # lands on a peg
    ],
)
def test_invalid_moves_leave_board_untouched(
    game: Game, move_text: str, error: type[Exception]
) -> None:
    with pytest.raises(error):
        game.make_move(move_text)
    assert game.board == Board.from_template(ENGLISH)


def test_row_limit_follows_board() -> None:
    """Rows 7 and 8 exist on the big cross"""
    game = Game.new_game(BIG_CROSS)
    game.make_move("E6U")
    assert game.moves == ["E6U"]
    with pytest.raises(IllegalMoveError):
        game.make_move("E8D")


def test_undo_last(game: Game) -> None:
    game.make_move("D1D")
    undone = game.undo_last()
    assert undone == Move(3, 1, Direction.DOWN)
    assert game.board == Board.from_template(ENGLISH)


def test_undo_without_moves(game: Game) -> None:
    with pytest.raises(GameStateError):
        game.undo_last()


def test_game_finishes_when_stuck() -> None:
    game = Game.new_game(("oox",))
    assert game.status == Status.IN_PROGRESS
    game.make_move("A0R")
    assert game.status == Status.FINISHED
    assert game.legal_moves() == []


def test_restart(game: Game) -> None:
    game.make_move("D1D")
    game.make_move("B2R")
    game.restart()
    assert game.board == Board.from_template(ENGLISH)


@pytest.mark.parametrize(
    "text, expected",
    [("q", True), ("quit", True), ("q\n", True), ("Q", False), ("C4U", False), ("", False)],
)
def test_is_quit_command(text: str, expected: bool) -> None:
    assert is_quit_command(text) == expected
