"""
Randomized search: play many games by picking random legal moves, and keep the best one.

No backtracking, and no guarantee of ever reaching the target.
The benefit is that a single round is cheap, so a lot of them can be played in the time a backtracking search takes.
"""

import logging
import random
from typing import Optional

from senku.core.models import SolveResult
from senku.solitaire.board import Board
from senku.solitaire.templates import BoardTemplate

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 100_000
DEFAULT_REPORT_EVERY = 10_000


def play_random_round(template: BoardTemplate, rng: random.Random) -> Board:
    """Play a single game on a fresh board until no move is left"""
    board = Board.from_template(template)
    while True:
        legal_moves = board.legal_moves()
        if not legal_moves:
            break
        board.apply(rng.choice(legal_moves))
    return board


def random_search(
    template: BoardTemplate,
    rounds: int = DEFAULT_ROUNDS,
    rng: Optional[random.Random] = None,
    report_every: int = DEFAULT_REPORT_EVERY,
) -> Board:
    """Independent rounds of random play. Returns the (first found) board with the highest score."""
    if rounds < 1:
        raise ValueError(f"Need to play at least one round, got {rounds=}")
    rng = rng or random.Random()

    best_board: Optional[Board] = None
    for round_idx in range(rounds):
        board = play_random_round(template, rng)
        if best_board is None or board.score > best_board.score:
            logger.info(
                "Found a new best solution at round %d with score %d!",
                round_idx,
                board.score,
            )
            best_board = board
        if report_every > 0 and round_idx % report_every == 0:
            logger.debug("%d rounds!", round_idx)

    # for the type checker: at least one round was played
    assert best_board is not None
    return best_board


def playout_result(board: Board, target_score: int, rounds: int) -> SolveResult:
    """Summarize the best board of a random search. Every round counts as a single position."""
    return SolveResult(
        solved=board.score >= target_score,
        score=board.score,
        target_score=target_score,
        moves=[move.to_text() for move in board.history],
        final_board=board.render(),
        positions_visited=rounds,
    )
