"""Defines the states a single cell (hole) of the board can be in"""

from enum import Enum, auto


class CellState(Enum):
    EMPTY = auto()
    INVALID = auto()
    OCCUPIED = auto()


# Markers used in board templates. Any other character denotes a cell that is not part of the board.
OCCUPIED_MARKER = "o"
EMPTY_MARKER = "x"
INVALID_MARKER = " "

MARKER_TO_CELL: dict[str, CellState] = {
    OCCUPIED_MARKER: CellState.OCCUPIED,
    EMPTY_MARKER: CellState.EMPTY,
}

CELL_TO_MARKER: dict[CellState, str] = {
    CellState.OCCUPIED: OCCUPIED_MARKER,
    CellState.EMPTY: EMPTY_MARKER,
    CellState.INVALID: INVALID_MARKER,
}

# Glyphs used when rendering the board for a human
CELL_TO_GLYPH: dict[CellState, str] = {
    CellState.EMPTY: "·",
    CellState.INVALID: " ",
    CellState.OCCUPIED: "O",
}


def cell_from_marker(marker: str) -> CellState:
    """Unknown markers never fail: they simply fall off the board."""
    return MARKER_TO_CELL.get(marker, CellState.INVALID)
