"""
Board templates: the shapes of board senku knows about.

A template is a tuple of equal-length rows (see Board.from_template for the markers).
"""

from senku.solitaire.cells import EMPTY_MARKER, OCCUPIED_MARKER
from senku.solitaire.moves import COLUMN_ALPHABET

BoardTemplate = tuple[str, ...]

# 33 holes, only the centre hole starts empty. Solved by leaving a single peg (31 jumps).
ENGLISH: BoardTemplate = (
    "  ooo  ",
    "  ooo  ",
    "ooooooo",
    "oooxooo",
    "ooooooo",
    "  ooo  ",
    "  ooo  ",
)

# French / European board: the English board plus one extra hole in each inner corner (37 holes).
EUROPEAN: BoardTemplate = (
    "  ooo  ",
    " ooooo ",
    "ooooooo",
    "oooxooo",
    "ooooooo",
    " ooooo ",
    "  ooo  ",
)

# 45 holes on a 9x9 grid, with arms 3 holes wide and 3 holes long.
BIG_CROSS: BoardTemplate = (
    "   ooo   ",
    "   ooo   ",
    "   ooo   ",
    "ooooooooo",
    "ooooxoooo",
    "ooooooooo",
    "   ooo   ",
    "   ooo   ",
    "   ooo   ",
)

TEMPLATES: dict[str, BoardTemplate] = {
    "english": ENGLISH,
    "european": EUROPEAN,
    "big_cross": BIG_CROSS,
}

DEFAULT_TEMPLATE_NAME = "english"


def playable_cells(template: BoardTemplate) -> int:
    """Number of holes that are part of the board (with or without peg)"""
    return sum(
        row.count(OCCUPIED_MARKER) + row.count(EMPTY_MARKER) for row in template
    )


def max_score(template: BoardTemplate) -> int:
    """Every jump removes one peg, and the last peg can never be removed."""
    pegs = sum(row.count(OCCUPIED_MARKER) for row in template)
    return max(pegs - 1, 0)


def is_valid_template(rows: BoardTemplate) -> bool:
    """
    Check if the rows describe a board that can be played (and written down in move notation).

    * at least one row, all rows of the same length
    * no wider than the column alphabet
    * at most 10 rows, as rows are written with a single digit
    * at least one peg and one empty hole, otherwise no jump can ever be made
    """
    if len(rows) == 0 or len(rows) > 10:
        return False

    width = len(rows[0])
    if width == 0 or width > len(COLUMN_ALPHABET):
        return False

    if any(len(row) != width for row in rows):
        return False

    has_peg = any(OCCUPIED_MARKER in row for row in rows)
    has_hole = any(EMPTY_MARKER in row for row in rows)
    return has_peg and has_hole
