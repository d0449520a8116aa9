"""Codec for the comma separated ``update game field`` payload."""

from typing import Iterable, List

from life_duel.types import Cell


def parse_field(text: str) -> List[Cell]:
    """Decode ``".,0,1,..."`` into cells.

    Raises:
        ValueError: If a token is not one of ``.``, ``0`` or ``1``.
    """
    return [Cell(token) for token in text.split(",")]


def format_field(cells: Iterable[Cell]) -> str:
    return ",".join(cell.value for cell in cells)
