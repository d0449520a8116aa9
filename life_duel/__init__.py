"""Predictive simulator for two-player Game of Life matches.

The public surface is small: build a :class:`Grid` from an engine snapshot,
advance it with :func:`step` and check the result with :func:`agrees` or
:func:`compare`.
"""

from life_duel.grid import DimensionMismatch, Grid
from life_duel.neighborhood import neighbors
from life_duel.rules import Census, neighbor_census, next_cell
from life_duel.step import iter_steps, simulate, step
from life_duel.types import Cell, Position
from life_duel.validate import PredictionReport, agrees, compare
