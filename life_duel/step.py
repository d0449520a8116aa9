"""Full-board round transition.

:func:`step` is the only way the simulator advances time. It reads the
input :class:`~life_duel.grid.Grid` as a frozen snapshot and writes every
successor cell into a freshly allocated buffer, so evaluation order does not
affect the result and positions could be evaluated in parallel.
"""

from typing import Iterator

from life_duel.grid import Grid
from life_duel.rules import neighbor_census, next_cell


def step(grid: Grid) -> Grid:
    """Advance ``grid`` by one round.

    Args:
        grid (Grid): Previous round; never modified.

    Returns:
        Grid: New grid of identical dimensions.
    """
    successor = [
        next_cell(cell, neighbor_census(grid, pos))
        for pos, cell in zip(grid.positions(), grid.cells)
    ]
    return Grid.from_cells(successor, grid.rows, grid.cols)


def simulate(grid: Grid, rounds: int) -> Grid:
    """Return ``grid`` advanced by ``rounds`` rounds.

    Raises:
        ValueError: If ``rounds`` is negative.
    """
    if rounds < 0:
        raise ValueError(f"rounds must be non-negative, got {rounds}")
    for _ in range(rounds):
        grid = step(grid)
    return grid


def iter_steps(grid: Grid) -> Iterator[Grid]:
    """Yield successive rounds after ``grid``, without end."""
    while True:
        grid = step(grid)
        yield grid
