"""Per-cell transition rule.

Classic B3/S23 Game of Life with player attribution: a surviving cell keeps
its owner, and a newborn cell goes to the player holding the majority of its
three living neighbors. Every function here reads only the *previous* grid.
"""

from dataclasses import dataclass
from typing import assert_never

from life_duel.grid import Grid
from life_duel.neighborhood import neighbors
from life_duel.types import Cell, Position

SURVIVE_COUNTS = frozenset({2, 3})
BIRTH_COUNT = 3


@dataclass(frozen=True)
class Census:
    """Living neighbors of one position, split by owner.

    Attributes:
        p1 (int): Neighbors owned by player 1.
        p2 (int): Neighbors owned by player 2.
    """

    p1: int = 0
    p2: int = 0

    @property
    def total(self) -> int:
        return self.p1 + self.p2


def neighbor_census(grid: Grid, pos: Position) -> Census:
    """Count living neighbors of ``pos`` in ``grid`` per player."""
    p1 = p2 = 0
    for n in neighbors(pos.row, pos.col, grid.rows, grid.cols):
        cell = grid.at(n)
        if cell == Cell.PLAYER1:
            p1 += 1
        elif cell == Cell.PLAYER2:
            p2 += 1
    return Census(p1, p2)


def next_cell(current: Cell, census: Census) -> Cell:
    """Return the state of a cell in the next round.

    Occupied cells survive with 2 or 3 living neighbors and die otherwise,
    whichever player owns them. An empty cell with exactly 3 living
    neighbors is born to the majority owner.
    """
    match current:
        case Cell.PLAYER1 | Cell.PLAYER2:
            if census.total in SURVIVE_COUNTS:
                return current
            return Cell.EMPTY
        case Cell.EMPTY:
            if census.total != BIRTH_COUNT:
                return Cell.EMPTY
            # p1 == p2 is impossible with three neighbors; PLAYER2 is only the fallback
            return Cell.PLAYER1 if census.p1 > census.p2 else Cell.PLAYER2
        case _:
            assert_never(current)
