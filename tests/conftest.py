"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from senku.solitaire.board import Board
from senku.solitaire.templates import ENGLISH


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Also run the exhaustive searches marked as slow.",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Slow tests are skipped unless asked for explicitly"""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --run-slow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def english_board() -> Board:
    """The standard 33-hole cross, centre hole empty."""
    return Board.from_template(ENGLISH)


@pytest.fixture
def board_from_rows() -> Callable[..., Board]:
    """Call the inner function with the template rows of a (small) custom board"""

    def _create_board(*rows: str) -> Board:
        return Board.from_template(rows)

    return _create_board
