"""
Backtracking search
-----

Depth-first exploration of the move tree of a single Board:
apply a move, recurse, and undo it again when the branch turns out to be a dead end.

---
The board is never copied. Whoever calls backtrack() hands over the board for the duration of the call,
and gets it back either in the solved state (the solution is the board's history) or exactly as it was given.
"""

import logging
from dataclasses import dataclass

from senku.core.models import SolveResult
from senku.solitaire.board import Board

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_INTERVAL = 200_000


@dataclass
class SearchContext:
    """State shared by all frames of one search: the goal and a counter for progress reports"""

    target_score: int
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    positions_visited: int = 0

    def visit(self, board: Board) -> None:
        """Count the position, and report every `progress_interval` positions"""
        if self.progress_interval > 0 and self.positions_visited % self.progress_interval == 0:
            logger.info(
                "%d positions searched!\n%s", self.positions_visited, board.render()
            )
        self.positions_visited += 1


def backtrack(board: Board, context: SearchContext) -> bool:
    """
    Returns whether the search was successful.
    ----

    1. Reached the target score? done, and leave the board as it is.
    2. Otherwise try every legal move (in the order legal_moves() gives them) and recurse.
    3. A move that does not lead to a solution gets undone before trying the next one.

    NOTE no legal moves means the loop is skipped: a dead end.
    """
    context.visit(board)

    if board.score >= context.target_score:
        return True

    for move in board.legal_moves():
        board.apply(move)
        if backtrack(board, context):
            return True
        board.undo(move)
    return False


def solve(
    board: Board,
    target_score: int,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> SolveResult:
    """Run the backtracking search on the board and summarize the outcome"""
    context = SearchContext(
        target_score=target_score, progress_interval=progress_interval
    )
    solved = backtrack(board, context)
    if solved:
        logger.info(
            "Found a solution with %d moves after %d positions",
            board.score,
            context.positions_visited,
        )
    else:
        logger.info(
            "No solution reaching score %d (%d positions searched)",
            target_score,
            context.positions_visited,
        )

    return SolveResult(
        solved=solved,
        score=board.score,
        target_score=target_score,
        moves=[move.to_text() for move in board.history],
        final_board=board.render(),
        positions_visited=context.positions_visited,
    )
