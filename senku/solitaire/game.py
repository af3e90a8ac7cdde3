"""
The Game class is the entrypoint into the domain layer for interactive play.
It turns text typed by a player into moves on the Board, and refuses anything that is not a legal move
(without touching the board), so the player can simply try again.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from senku.core.exceptions import GameStateError, InvalidTemplateError
from senku.solitaire.board import Board
from senku.solitaire.moves import Move
from senku.solitaire.templates import BoardTemplate, is_valid_template

QUIT_COMMAND = "q"


class Status(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


def is_quit_command(text: str) -> bool:
    """Anything starting with a 'q' ends the session"""
    return text.startswith(QUIT_COMMAND)


@dataclass
class Game:
    template: BoardTemplate
    board: Board

    @classmethod
    def new_game(cls, template: BoardTemplate) -> Self:
        """Moves are typed in text notation, so the board must fit it (see is_valid_template)"""
        if not is_valid_template(template):
            raise InvalidTemplateError(
                f"Cannot play on this board: {template!r}. Needs 1-10 rows of 1-26 columns, a peg and an empty hole."
            )
        return cls(template=template, board=Board.from_template(template))

    @property
    def status(self) -> Status:
        """The game is over once no jump can be made anymore"""
        return Status.FINISHED if self.board.is_terminal() else Status.IN_PROGRESS

    @property
    def score(self) -> int:
        return self.board.score

    @property
    def moves(self) -> list[str]:
        """Moves played so far, in text notation"""
        return [move.to_text() for move in self.board.history]

    def legal_moves(self) -> list[str]:
        """Can be shown to the player as a hint"""
        return [move.to_text() for move in self.board.legal_moves()]

    def make_move(self, move_text: str) -> Move:
        """
        Attempt to make a move
        -----

        1. decode the text (raises a MoveParseError when the notation is wrong)
        2. check it is legal on the current board (raises IllegalMoveError otherwise)
        3. update the board
        """
        move = Move.from_text(move_text, board_size=self.board.height)
        self.board.apply_if_legal(move)
        return move

    def undo_last(self) -> Move:
        """Take back the last move played"""
        if not self.board.history:
            raise GameStateError("No moves have been played yet. Nothing to undo.")
        last_move = self.board.history[-1]
        self.board.undo(last_move)
        return last_move

    def restart(self) -> None:
        self.board = Board.from_template(self.template)
