"""The Board holds all mutable game state: the cells, the score and the history of moves played"""

from dataclasses import dataclass, field
from typing import Iterable, Self

from senku.core.exceptions import IllegalMoveError
from senku.solitaire.cells import (
    CELL_TO_GLYPH,
    CELL_TO_MARKER,
    CellState,
    cell_from_marker,
)
from senku.solitaire.moves import (
    COLUMN_ALPHABET,
    DIRECTION_OFFSETS,
    DIRECTION_ORDER,
    Move,
)


@dataclass
class Board:
    cells: list[list[CellState]]
    history: list[Move] = field(default_factory=list)

    @classmethod
    def from_template(cls, rows: Iterable[str]) -> Self:
        """Construct a board from rows of markers, top row first.

        ex. the English board:
          ooo
          ooo
        ooooooo
        oooxooo
        ooooooo
          ooo
          ooo
        * 'o' is a hole with a peg in it
        * 'x' is an empty hole
        * anything else (a space by convention) is not part of the board

        Short rows are padded with invalid cells, so construction never fails.
        NOTE any size is accepted here, but only boards of at most 10 rows and 26 columns can be written in move notation
        (render() labels at most 26 columns). Templates coming from outside are checked with is_valid_template first.
        """
        rows = list(rows)
        width = max((len(row) for row in rows), default=0)
        cells = [
            [cell_from_marker(marker) for marker in row.ljust(width)] for row in rows
        ]
        return cls(cells)

    def to_template(self) -> tuple[str, ...]:
        """Reverse operation: write the current cells back as template rows"""
        return tuple(
            "".join(CELL_TO_MARKER[cell] for cell in row) for row in self.cells
        )

    @property
    def score(self) -> int:
        """Number of jumps made so far"""
        return len(self.history)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell(self, x: int, y: int) -> CellState:
        return self.cells[y][x]

    def is_within_bounds(self, x: int, y: int) -> bool:
        return (0 <= x < self.width) and (0 <= y < self.height)

    def peg_count(self) -> int:
        return sum(row.count(CellState.OCCUPIED) for row in self.cells)

    # --- RULES ---
    def is_legal(self, move: Move) -> bool:
        """
        A peg can jump if the peg next to it (in the direction of the jump) is present and the hole behind that one is empty.
        Coordinates falling off the board simply make the move illegal.
        """
        dx, dy = DIRECTION_OFFSETS[move.direction]
        return self._can_jump(move.x, move.y, dx, dy)

    def legal_moves(self) -> list[Move]:
        """
        All legal moves on the current board.
        ----

        NOTE the order is part of the contract: origins row by row (top to bottom, left to right) and per origin the directions
        in DIRECTION_ORDER. The backtracking search explores moves in exactly this order.
        """
        moves: list[Move] = []
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                # only pegs can jump, so skip the rest early
                if cell != CellState.OCCUPIED:
                    continue
                for direction in DIRECTION_ORDER:
                    dx, dy = DIRECTION_OFFSETS[direction]
                    if self._can_jump(x, y, dx, dy):
                        moves.append(Move(x, y, direction))
        return moves

    def is_terminal(self) -> bool:
        """No jump is possible anymore"""
        return not self.legal_moves()

    # --- MUTATIONS ---
    def apply(self, move: Move) -> None:
        """
        Make the jump: the peg lands two cells away and the jumped peg is removed.
        The caller must have checked the move is legal (that is what legal_moves() is for). Anything else is a bug.
        """
        assert self.is_legal(move), f"Applying an illegal move: {move}"
        self._write_jump(move, vacated=CellState.EMPTY, landed=CellState.OCCUPIED)
        self.history.append(move)

    def undo(self, move: Move) -> None:
        """Exact inverse of apply(). Only the most recently applied move can be undone."""
        assert self.history and self.history[-1] == move, (
            f"Can only undo the last move played. Got {move}, last move: {self.history[-1] if self.history else None}"
        )
        self._write_jump(move, vacated=CellState.OCCUPIED, landed=CellState.EMPTY)
        self.history.pop()

    def apply_if_legal(self, move: Move) -> None:
        """Slower, but safe version of apply() for moves coming from a user"""
        if not self.is_legal(move):
            raise IllegalMoveError(f"That move is illegal: {move.to_text()}")
        self.apply(move)

    def render(self) -> str:
        """Human readable grid, with a header for the column letters and the row number in front of every row"""
        lines = ["  " + COLUMN_ALPHABET[: self.width]]
        for y, row in enumerate(self.cells):
            lines.append(f"{y}|" + "".join(CELL_TO_GLYPH[cell] for cell in row))
        return "\n".join(lines) + "\n"

    # -- PRIVATE HELPERS ---
    def _can_jump(self, x: int, y: int, dx: int, dy: int) -> bool:
        """Peg on (x, y), a peg next to it along (dx, dy) and an empty hole right behind that one"""
        return (
            self._cell_is(x, y, CellState.OCCUPIED)
            and self._cell_is(x + dx, y + dy, CellState.OCCUPIED)
            and self._cell_is(x + 2 * dx, y + 2 * dy, CellState.EMPTY)
        )

    def _cell_is(self, x: int, y: int, state: CellState) -> bool:
        """False when (x, y) is off the board"""
        return self.is_within_bounds(x, y) and self.cells[y][x] == state

    def _write_jump(self, move: Move, vacated: CellState, landed: CellState) -> None:
        """
        Write the three cells involved in a jump.

        * origin and jumped cell get the `vacated` state (empty when applying, occupied when undoing)
        * landing cell gets the `landed` state
        """
        dx, dy = DIRECTION_OFFSETS[move.direction]
        self.cells[move.y][move.x] = vacated
        self.cells[move.y + dy][move.x + dx] = vacated
        self.cells[move.y + 2 * dy][move.x + 2 * dx] = landed
