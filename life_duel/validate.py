"""Prediction checks against authoritative snapshots.

Detection only: these functions report whether a simulated grid matches the
one the match engine sent, and where it differs. Deciding what to do about a
mismatch is left to the caller.
"""

from dataclasses import dataclass, field

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from life_duel.grid import Grid
from life_duel.types import PLAYERS, Cell, Position


@dataclass(frozen=True)
class PredictionReport:
    """Outcome of comparing a predicted grid with an authoritative one.

    Attributes:
        agrees (bool): True iff both grids have the same dimensions and cells.
        dimensions_match (bool): False when rows or cols differ.
        mismatches (PVector[Position]): Positions whose cells differ, in
            row-major order. Empty when the dimensions differ.
        living_delta (PMap[Cell, int]): Authoritative minus predicted living
            cell count for each player.
    """

    agrees: bool
    dimensions_match: bool
    mismatches: PVector[Position] = field(default_factory=pvector)
    living_delta: PMap[Cell, int] = field(default_factory=pmap)


def compare(predicted: Grid, authoritative: Grid) -> PredictionReport:
    living_delta = pmap(
        {
            player: authoritative.living_cells(player) - predicted.living_cells(player)
            for player in PLAYERS
        }
    )
    if (predicted.rows, predicted.cols) != (authoritative.rows, authoritative.cols):
        return PredictionReport(
            agrees=False, dimensions_match=False, living_delta=living_delta
        )

    mismatches = pvector(
        pos
        for pos, mine, theirs in zip(
            predicted.positions(), predicted.cells, authoritative.cells
        )
        if mine != theirs
    )
    return PredictionReport(
        agrees=len(mismatches) == 0,
        dimensions_match=True,
        mismatches=mismatches,
        living_delta=living_delta,
    )


def agrees(predicted: Grid, authoritative: Grid) -> bool:
    """Return True iff the prediction matches the authoritative grid exactly."""
    return (
        predicted.rows == authoritative.rows
        and predicted.cols == authoritative.cols
        and predicted.to_sequence() == authoritative.to_sequence()
    )
