"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from senku.core.validators import (
    check_progress_interval,
    check_rounds,
    check_target_score,
    check_template,
)
from senku.solitaire.search import DEFAULT_PROGRESS_INTERVAL
from senku.solitaire.templates import ENGLISH, BoardTemplate

MoveText = str


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    template: BoardTemplate = ENGLISH

    @field_validator("template")
    @classmethod
    def validate_template(cls, value: BoardTemplate) -> BoardTemplate:
        return check_template(value)


class MoveRequest(BaseModel):
    move: MoveText

    @field_validator("move")
    @classmethod
    def strip_line_ending(cls, value: str) -> str:
        """Lines read from a terminal come with a newline (and sometimes stray spaces)"""
        return value.strip()


class SolveRequest(BaseModel):
    template: BoardTemplate = ENGLISH
    target_score: int
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    @field_validator("template")
    @classmethod
    def validate_template(cls, value: BoardTemplate) -> BoardTemplate:
        return check_template(value)

    @field_validator("target_score")
    @classmethod
    def validate_target_score(cls, value: int) -> int:
        return check_target_score(value)

    @field_validator("progress_interval")
    @classmethod
    def validate_progress_interval(cls, value: int) -> int:
        return check_progress_interval(value)


class RandomSearchRequest(BaseModel):
    template: BoardTemplate = ENGLISH
    target_score: int
    rounds: int
    seed: Optional[int] = None

    @field_validator("template")
    @classmethod
    def validate_template(cls, value: BoardTemplate) -> BoardTemplate:
        return check_template(value)

    @field_validator("target_score")
    @classmethod
    def validate_target_score(cls, value: int) -> int:
        return check_target_score(value)

    @field_validator("rounds")
    @classmethod
    def validate_rounds(cls, value: int) -> int:
        return check_rounds(value)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: str
    score: int
    status: str
    legal_moves: list[MoveText]
    move_history: list[MoveText]


class SolveResponse(BaseModel):
    solved: bool
    score: int
    target_score: int
    moves: list[MoveText]
    final_board: str
    positions_visited: int
