"""Moore neighborhood geometry.

Neighbors are clipped at the board edges; there is no toroidal wrapping. The
result depends only on the board dimensions, never on cell contents, which
is why it can be memoized per ``(row, col, rows, cols)``.
"""

from functools import lru_cache

from pyrsistent import pset
from pyrsistent.typing import PSet

from life_duel.types import Position

MOORE_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    return 0 <= row < rows and 0 <= col < cols


@lru_cache(maxsize=4096)
def neighbors(row: int, col: int, rows: int, cols: int) -> PSet[Position]:
    """Return the in-bounds Moore neighbors of ``(row, col)``.

    A corner has 3 neighbors, a non-corner edge cell 5 and an interior cell 8
    (for boards of at least 3x3).
    """
    origin = Position(row, col)
    return pset(
        origin.offset(dr, dc)
        for dr, dc in MOORE_OFFSETS
        if in_bounds(row + dr, col + dc, rows, cols)
    )
