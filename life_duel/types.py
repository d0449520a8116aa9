"""Common types and enumerations.

``Cell`` is the only per-position state of the board. Its values double as
the wire tokens used by the match engine, so ``Cell(".")`` decodes a token
and ``cell.value`` encodes it again.
"""

from dataclasses import dataclass
from enum import StrEnum


class Cell(StrEnum):
    """Occupancy of a single board position.

    Members:
        EMPTY: No living cell.
        PLAYER1: Living cell owned by the first player (token ``0``).
        PLAYER2: Living cell owned by the second player (token ``1``).
    """

    EMPTY = "."
    PLAYER1 = "0"
    PLAYER2 = "1"


PLAYERS = (Cell.PLAYER1, Cell.PLAYER2)


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)
