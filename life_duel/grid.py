"""Immutable board snapshot.

A :class:`Grid` is a value object: it never changes after construction and
every simulated round produces a new one. Cells live in a persistent vector
in row-major order, so a Grid can be read by several consumers (validator,
logging, the next step) without copying.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from life_duel.types import Cell, Position


class DimensionMismatch(ValueError):
    """Cell count does not match ``rows * cols``."""

    def __init__(self, length: int, rows: int, cols: int) -> None:
        super().__init__(
            f"incompatible parameters: state length {length}, rows {rows}, cols {cols}"
        )
        self.length = length
        self.rows = rows
        self.cols = cols


@dataclass(frozen=True)
class Grid:
    """Rectangular board of cells.

    Use :meth:`from_cells` rather than the raw constructor; it validates the
    dimensions.

    Attributes:
        rows (int): Number of rows (board height).
        cols (int): Number of columns (board width).
        cells (PVector[Cell]): Row-major cell states, ``rows * cols`` long.
    """

    rows: int
    cols: int
    cells: PVector[Cell]

    def __post_init__(self) -> None:
        # normalize tokens to Cell; unknown values raise ValueError here
        object.__setattr__(self, "cells", pvector(Cell(c) for c in self.cells))
        if self.rows < 0 or self.cols < 0 or len(self.cells) != self.rows * self.cols:
            raise DimensionMismatch(len(self.cells), self.rows, self.cols)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], rows: int, cols: int) -> "Grid":
        """Build a grid from a flat row-major sequence.

        Raises:
            DimensionMismatch: If the number of cells is not ``rows * cols``.
            ValueError: If a value is not a ``Cell`` or a cell token.
        """
        return cls(rows, cols, pvector(cells))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Grid":
        """Build a grid from a list of equally long rows."""
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        flat = [cell for row in rows for cell in row]
        if any(len(row) != n_cols for row in rows):
            raise DimensionMismatch(len(flat), n_rows, n_cols)
        return cls.from_cells(flat, n_rows, n_cols)

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        return cls.from_cells([Cell.EMPTY] * (rows * cols), rows, cols)

    def get(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at ``(row, col)`` or ``None`` when out of range."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return None
        return self.cells[row * self.cols + col]

    def at(self, pos: Position) -> Optional[Cell]:
        return self.get(pos.row, pos.col)

    def to_sequence(self) -> List[Cell]:
        return list(self.cells)

    def to_rows(self) -> List[List[Cell]]:
        return [
            list(self.cells[r * self.cols : (r + 1) * self.cols])
            for r in range(self.rows)
        ]

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row, col)

    def living_cells(self, player: Cell) -> int:
        """Number of cells owned by ``player``."""
        return sum(1 for cell in self.cells if cell == player)

    def render(self) -> str:
        """One line of tokens per row, for logs and debugging."""
        return "\n".join("".join(row) for row in self.to_rows())
