# tests/unit/test_validate.py

from life_duel.grid import Grid
from life_duel.types import Position
from life_duel.validate import agrees, compare
from tests.test_utils import A, B, E, make_grid


def test_identical_grids_agree() -> None:
    grid = make_grid("0.1", ".0.")
    report = compare(grid, make_grid("0.1", ".0."))
    assert agrees(grid, make_grid("0.1", ".0."))
    assert report.agrees
    assert report.dimensions_match
    assert len(report.mismatches) == 0
    assert report.living_delta == {A: 0, B: 0}


def test_different_cells_disagree() -> None:
    predicted = make_grid("0.1", ".0.")
    authoritative = make_grid("0.1", "10.")
    report = compare(predicted, authoritative)
    assert not agrees(predicted, authoritative)
    assert not report.agrees
    assert list(report.mismatches) == [Position(1, 0)]
    assert report.living_delta == {A: 0, B: 1}


def test_dimension_mismatch_disagrees() -> None:
    predicted = Grid.empty(2, 3)
    authoritative = Grid.empty(3, 2)
    report = compare(predicted, authoritative)
    assert not agrees(predicted, authoritative)
    assert not report.agrees
    assert not report.dimensions_match
    assert len(report.mismatches) == 0


def test_compare_does_not_modify_inputs() -> None:
    predicted = make_grid("00", "..")
    authoritative = make_grid("..", "11")
    before = (predicted.to_sequence(), authoritative.to_sequence())
    compare(predicted, authoritative)
    assert (predicted.to_sequence(), authoritative.to_sequence()) == before


def test_token_built_grid_agrees_with_cell_built_grid() -> None:
    predicted = Grid.from_cells([E, A, A, E], 2, 2)
    authoritative = Grid.from_cells([".", "0", "0", "."], 2, 2)
    report = compare(predicted, authoritative)
    assert agrees(predicted, authoritative)
    assert report.agrees == agrees(predicted, authoritative)
    assert len(report.mismatches) == 0
