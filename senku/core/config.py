"""
Run configuration.

Everything that used to be a compile-time constant (board shape, target score, how often to report progress, ...)
is collected here, and filled in from the command line.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from senku.core.validators import (
    check_progress_interval,
    check_rounds,
    check_target_score,
    check_template_name,
)
from senku.solitaire.playout import DEFAULT_ROUNDS
from senku.solitaire.search import DEFAULT_PROGRESS_INTERVAL
from senku.solitaire.templates import (
    DEFAULT_TEMPLATE_NAME,
    TEMPLATES,
    BoardTemplate,
    max_score,
)


class SenkuConfig(BaseModel):
    board: str = DEFAULT_TEMPLATE_NAME
    # None: clear the board down to a single peg
    target_score: Optional[int] = None
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    rounds: int = DEFAULT_ROUNDS
    seed: Optional[int] = None

    @field_validator("board")
    @classmethod
    def validate_board(cls, value: str) -> str:
        return check_template_name(value)

    @field_validator("target_score")
    @classmethod
    def validate_target_score(cls, value: Optional[int]) -> Optional[int]:
        return value if value is None else check_target_score(value)

    @field_validator("progress_interval")
    @classmethod
    def validate_progress_interval(cls, value: int) -> int:
        return check_progress_interval(value)

    @field_validator("rounds")
    @classmethod
    def validate_rounds(cls, value: int) -> int:
        return check_rounds(value)

    @property
    def template(self) -> BoardTemplate:
        return TEMPLATES[self.board]

    @property
    def resolved_target_score(self) -> int:
        """Explicit target, or else: every peg but one removed"""
        if self.target_score is not None:
            return self.target_score
        return max_score(self.template)
