"""
Boundary layer data model(s).

The domain layer (search engines) hands its results to the Service in this shape, and the Service turns it into a
response model. Keeps the Board itself (mutable, shared during a search) from leaking out of the domain layer.
"""

from dataclasses import dataclass

# Type aliases to make SolveResult easier to read
MoveText = str
RenderedBoard = str


@dataclass
class SolveResult:
    """Transport-safe summary of a finished search."""

    solved: bool
    score: int
    target_score: int
    moves: list[MoveText]
    final_board: RenderedBoard
    positions_visited: int
