"""Orchestration of communication from the command line to the game and search logic (and the reverse direction)."""

import random
from typing import Optional

from senku.api.models import (
    GameResponse,
    MoveRequest,
    NewGameRequest,
    RandomSearchRequest,
    SolveRequest,
    SolveResponse,
)
from senku.core.exceptions import GameStateError
from senku.core.models import SolveResult
from senku.solitaire.board import Board
from senku.solitaire.game import Game
from senku.solitaire.playout import playout_result, random_search
from senku.solitaire.search import solve


class SolitaireService:
    """Orchestration of layers for peg solitaire. Holds (at most) one interactive game at a time."""

    def __init__(self) -> None:
        self.game: Optional[Game] = None

    # -- Interactive play ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Start a fresh game, replacing any game in progress."""
        self.game = Game.new_game(request.template)
        return self._create_game_response(self.game)

    def get_game_state(self) -> GameResponse:
        game = self._fetch_game()
        return self._create_game_response(game)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. Errors propagate, and leave the game untouched."""
        game = self._fetch_game()
        game.make_move(request.move)
        return self._create_game_response(game)

    def undo_move(self) -> GameResponse:
        game = self._fetch_game()
        game.undo_last()
        return self._create_game_response(game)

    # -- Solvers ---
    def solve(self, request: SolveRequest) -> SolveResponse:
        """Backtracking search on a fresh board."""
        board = Board.from_template(request.template)
        result = solve(
            board,
            target_score=request.target_score,
            progress_interval=request.progress_interval,
        )
        return self._create_solve_response(result)

    def random_search(self, request: RandomSearchRequest) -> SolveResponse:
        """Best of many random games."""
        rng = random.Random(request.seed)
        best_board = random_search(request.template, rounds=request.rounds, rng=rng)
        result = playout_result(
            best_board, target_score=request.target_score, rounds=request.rounds
        )
        return self._create_solve_response(result)

    # -- Internal helpers --
    def _create_game_response(self, game: Game) -> GameResponse:
        return GameResponse(
            board=game.board.render(),
            score=game.score,
            status=game.status.name.lower(),
            legal_moves=game.legal_moves(),
            move_history=game.moves,
        )

    def _create_solve_response(self, result: SolveResult) -> SolveResponse:
        return SolveResponse(
            solved=result.solved,
            score=result.score,
            target_score=result.target_score,
            moves=result.moves,
            final_board=result.final_board,
            positions_visited=result.positions_visited,
        )

    def _fetch_game(self) -> Game:
        """Raise an error if no game was started."""
        if self.game is None:
            raise GameStateError("No game in progress. Start a new game first.")
        return self.game
