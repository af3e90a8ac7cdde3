"""Unit tests for /senku/solitaire/search.py"""

import logging
from typing import Callable
from unittest.mock import patch

import pytest

from senku.solitaire.board import Board
from senku.solitaire.search import SearchContext, backtrack, solve
from senku.solitaire.templates import ENGLISH

# The first solution found on the English board (the search order is deterministic)
ENGLISH_SOLUTION = [
    "D1D", "B2R", "C0D", "E0L", "D2L", "A2R", "E2U", "G2L", "C3U", "C0D",
    "A3R", "C3U", "E3U", "E0D", "G3L", "E3U", "C5U", "A4R", "C4U", "C1D",
    "C3R", "E4U", "E1D", "G4L", "D4R", "E6U", "E3D", "C6R", "E6U", "F4L",
    "D4D",
]  # fmt: skip

# With 29 jumps the search needs to backtrack a few times, but stays small enough to run in every test session
ENGLISH_29_JUMPS = [
    "D1D", "B2R", "C0D", "E0L", "D2L", "A2R", "E2U", "G2L", "C3U", "C0D",
    "A3R", "C3U", "E3U", "E0D", "G3L", "D3R", "F4U", "E2R", "D4R", "B4R",
    "G4L", "D4R", "C6U", "D6U", "D4L", "A4R", "E6U", "F4L", "C4R",
]  # fmt: skip


def test_target_reached_immediately(english_board: Board) -> None:
    """Nothing to do: the starting position already satisfies the target"""
    context = SearchContext(target_score=0)
    assert backtrack(english_board, context)
    assert english_board.history == []
    assert context.positions_visited == 1


def test_greedy_path_without_backtracking(english_board: Board) -> None:
    """Small targets are reached by always playing the first legal move"""
    context = SearchContext(target_score=5)
    assert backtrack(english_board, context)
    assert [move.to_text() for move in english_board.history] == ENGLISH_SOLUTION[:5]
    assert context.positions_visited == 6


def test_solution_with_backtracking(english_board: Board) -> None:
    """Solution stays applied on the board; dead-end moves get undone"""
    original_undo = Board.undo
    with patch.object(
        Board, "undo", autospec=True, side_effect=original_undo
    ) as mock_undo:
        context = SearchContext(target_score=29)
        assert backtrack(english_board, context)

    assert [move.to_text() for move in english_board.history] == ENGLISH_29_JUMPS
    assert english_board.score == 29
    assert context.positions_visited == 45
    # every visited position (but the root) was reached by a move, and all moves not in the solution were taken back
    assert mock_undo.call_count == 45 - 1 - 29


def test_failed_search_restores_board(board_from_rows: Callable[..., Board]) -> None:
    """A single jump possible, so a target of 2 cannot be reached. Board gets handed back untouched."""
    board = board_from_rows("oox")
    context = SearchContext(target_score=2)
    assert not backtrack(board, context)
    assert board == Board.from_template(["oox"])
    assert context.positions_visited == 2


def test_dead_end_without_moves(board_from_rows: Callable[..., Board]) -> None:
    board = board_from_rows("oxo")
    context = SearchContext(target_score=1)
    assert not backtrack(board, context)
    assert context.positions_visited == 1


def test_counters_are_per_search(english_board: Board) -> None:
    """No global state: every search counts its own positions"""
    first = SearchContext(target_score=5)
    second = SearchContext(target_score=5)
    backtrack(english_board, first)
    backtrack(Board.from_template(ENGLISH), second)
    assert first.positions_visited == second.positions_visited == 6


def test_progress_reports(
    english_board: Board, caplog: pytest.LogCaptureFixture
) -> None:
    """Positions 0, 10, 20, 30 and 40 get reported"""
    caplog.set_level(logging.INFO, logger="senku.solitaire.search")
    context = SearchContext(target_score=29, progress_interval=10)
    backtrack(english_board, context)

    reports = [
        record for record in caplog.records if "positions searched!" in record.getMessage()
    ]
    assert len(reports) == 5
    assert reports[0].getMessage().startswith("0 positions searched!")
    assert reports[-1].getMessage().startswith("40 positions searched!")


def test_progress_reports_switched_off(
    english_board: Board, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="senku.solitaire.search")
    backtrack(english_board, SearchContext(target_score=29, progress_interval=0))
    assert not [
        record for record in caplog.records if "positions searched!" in record.getMessage()
    ]


# -- SOLVE ---
def test_solve_summary(english_board: Board) -> None:
    result = solve(english_board, target_score=29, progress_interval=0)
    assert result.solved
    assert result.score == 29
    assert result.target_score == 29
    assert result.moves == ENGLISH_29_JUMPS
    assert result.positions_visited == 45
    assert result.final_board == english_board.render()


def test_solve_unsolvable(board_from_rows: Callable[..., Board]) -> None:
    """Not finding a solution is a normal outcome"""
    result = solve(board_from_rows("oox"), target_score=2)
    assert not result.solved
    assert result.score == 0
    assert result.moves == []
    assert result.positions_visited == 2


@pytest.mark.slow
def test_solve_english_board(english_board: Board) -> None:
    """Clear all pegs but one. Exhaustive enough to take minutes."""
    result = solve(english_board, target_score=31, progress_interval=0)
    assert result.solved
    assert result.moves == ENGLISH_SOLUTION
    assert result.positions_visited == 7_667_770
    assert english_board.peg_count() == 1
    # the last peg ends up at the bottom of the cross, not in the centre
    assert english_board.render().splitlines()[-1] == "6|  ·O·  "
