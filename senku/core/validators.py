"""Checks shared by the run configuration and the request models. Each returns the value or raises."""

from senku.core.exceptions import InvalidRequestError, InvalidTemplateError
from senku.solitaire.templates import TEMPLATES, BoardTemplate, is_valid_template


def check_template(value: BoardTemplate) -> BoardTemplate:
    if not is_valid_template(value):
        raise InvalidTemplateError(
            "Board template needs 1-10 rows of equal length (at most 26 columns), with at least one peg ('o') and one empty hole ('x')."
        )
    return value


def check_template_name(value: str) -> str:
    if value not in TEMPLATES:
        raise InvalidRequestError(
            f"Unknown board {value!r}. Pick one from {', '.join(TEMPLATES)}"
        )
    return value


def check_target_score(value: int) -> int:
    if value < 0:
        raise InvalidRequestError(f"Target score cannot be negative, got {value}.")
    return value


def check_progress_interval(value: int) -> int:
    """0 switches progress reports off"""
    if value < 0:
        raise InvalidRequestError(f"Progress interval cannot be negative, got {value}.")
    return value


def check_rounds(value: int) -> int:
    if value < 1:
        raise InvalidRequestError(f"Need to play at least one round, got {value}.")
    return value
