"""
Jump moves and their text notation.

A move is identified by the cell the jumping peg starts from and the direction it jumps in.
The peg jumps over its neighbour in that direction and lands two cells away.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import ascii_uppercase, digits

from senku.core.exceptions import (
    InvalidColumnError,
    InvalidDirectionError,
    InvalidLengthError,
    InvalidRowError,
)

# Standard (English / European) boards are 7x7
DEFAULT_BOARD_SIZE = 7

# Columns are written as letters, so a board is never wider than the alphabet
COLUMN_ALPHABET = ascii_uppercase

Vector = tuple[int, int]
Coordinate = tuple[int, int]


class Direction(Enum):
    """Values are the letters used in the text notation of a move."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


# Order in which directions are tried when enumerating moves. Search results depend on it.
DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

# y grows downwards: row 0 is the top row of the board
DIRECTION_OFFSETS: dict[Direction, Vector] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    direction: Direction

    @classmethod
    def from_text(cls, text: str, board_size: int = DEFAULT_BOARD_SIZE) -> Move:
        """
        Decode the 3-character notation <column letter><row digit><direction letter>
        ---

        examples:
        * "C4U": the peg in column C (index 2), row 4 jumps upwards.
        * "A3R": the peg on the left edge of row 3 jumps to the right.

        Checks are done in order (length, column, row, direction), and the first one that fails is raised.
        """
        if len(text) != 3:
            raise InvalidLengthError(
                f"A move has exactly 3 characters, got {len(text)}: {text!r}"
            )

        column_char, row_char, direction_char = text
        x = COLUMN_ALPHABET.find(column_char)
        if x == -1:
            raise InvalidColumnError(
                f"The first character {column_char!r} is not a valid column letter."
            )

        # ASCII only: other scripts have decimal digits too
        if row_char not in digits:
            raise InvalidRowError(
                f"The second character {row_char!r} is not a valid digit."
            )
        y = int(row_char)
        if y >= board_size:
            raise InvalidRowError(
                f"Row {y} exceeds the board size ({board_size} rows)."
            )

        try:
            direction = Direction(direction_char)
        except ValueError as exc:
            raise InvalidDirectionError(
                f"Direction must be one of U, D, L or R, got {direction_char!r}."
            ) from exc

        return cls(x, y, direction)

    def to_text(self) -> str:
        """Reverse operation: encode into the notation accepted by from_text"""
        if not (0 <= self.x < len(COLUMN_ALPHABET) and 0 <= self.y < len(digits)):
            raise ValueError(f"{self} cannot be written in move notation")
        return f"{COLUMN_ALPHABET[self.x]}{self.y}{self.direction.value}"

    @property
    def offset(self) -> Vector:
        return DIRECTION_OFFSETS[self.direction]

    @property
    def origin(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def jumped(self) -> Coordinate:
        """The cell holding the peg that gets removed"""
        dx, dy = self.offset
        return (self.x + dx, self.y + dy)

    @property
    def landing(self) -> Coordinate:
        dx, dy = self.offset
        return (self.x + 2 * dx, self.y + 2 * dy)
