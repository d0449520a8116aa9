# tests/integration/test_step_integration.py

import pytest

from life_duel.grid import Grid
from life_duel.step import iter_steps, simulate, step
from tests.test_utils import A, B, E, make_grid


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 2), (3, 5), (16, 18)])
def test_all_empty_stays_empty(rows: int, cols: int) -> None:
    assert step(Grid.empty(rows, cols)) == Grid.empty(rows, cols)


def test_underpopulation() -> None:
    grid = Grid.from_cells([E, A, B, E], 2, 2)
    assert step(grid).to_sequence() == [E, E, E, E]


def test_block_survives() -> None:
    grid = Grid.from_cells(
        [E, E, E, E, E, A, A, E, E, A, A, E, E, E, E, E],
        4,
        4,
    )
    assert step(grid) == grid


def test_birth_majority_player1() -> None:
    grid = make_grid(
        "001",
        "...",
        "...",
    )
    # the center sees two PLAYER1 and one PLAYER2 neighbor
    assert step(grid).get(1, 1) == A


def test_birth_majority_player2() -> None:
    grid = make_grid(
        "110",
        "...",
        "...",
    )
    assert step(grid) == make_grid(
        ".1.",
        ".1.",
        "...",
    )


def test_mixed_blinker_is_born_to_majority() -> None:
    grid = make_grid(
        ".....",
        ".....",
        ".001.",
        ".....",
        ".....",
    )
    assert step(grid) == make_grid(
        ".....",
        "..0..",
        "..0..",
        "..0..",
        ".....",
    )


def test_survivor_keeps_owner_among_opponents() -> None:
    grid = make_grid("010")
    assert step(grid) == make_grid(".1.")


def test_overpopulation() -> None:
    grid = make_grid("000", "000", "000")
    assert step(grid) == make_grid("0.0", "...", "0.0")


def test_edges_do_not_wrap() -> None:
    grid = make_grid(
        "0..",
        "0..",
        "0..",
    )
    # with wraparound the right column would see three neighbors and come alive
    assert step(grid) == make_grid(
        "...",
        "00.",
        "...",
    )


def test_step_is_deterministic_and_pure() -> None:
    grid = make_grid(".0..", "1001", "..1.", "0..0")
    before = grid.to_sequence()
    first = step(grid)
    second = step(grid)
    assert first == second
    assert grid.to_sequence() == before
    assert first is not grid
    assert (first.rows, first.cols) == (grid.rows, grid.cols)


def test_simulate_blinker_period() -> None:
    grid = make_grid(".....", "..1..", "..1..", "..1..", ".....")
    assert simulate(grid, 0) is grid
    assert simulate(grid, 1) == make_grid(".....", ".....", ".111.", ".....", ".....")
    assert simulate(grid, 2) == grid


def test_simulate_rejects_negative_rounds() -> None:
    with pytest.raises(ValueError):
        simulate(Grid.empty(2, 2), -1)


def test_iter_steps() -> None:
    grid = make_grid("....", ".00.", ".0..", "....")
    rounds = iter_steps(grid)
    first = next(rounds)
    assert first == step(grid)
    assert next(rounds) == step(first)


def test_block_from_tokens_survives() -> None:
    tokens = list(".....") + list(".00..") + list(".00..") + list(".....") * 2
    grid = Grid.from_cells(tokens, 5, 5)
    assert step(grid) == grid
    assert step(grid).living_cells(A) == 4
