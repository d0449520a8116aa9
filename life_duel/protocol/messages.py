"""Structured messages exchanged with the match engine.

Each input line decodes to exactly one of the dataclasses below. Moves are
carried as plain data; the simulator never applies them to a grid.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Tuple, Union

from life_duel.types import Cell


class SettingName(StrEnum):
    TIMEBANK = auto()
    TIME_PER_MOVE = auto()
    PLAYER_NAMES = auto()
    YOUR_BOT = auto()
    YOUR_BOTID = auto()
    FIELD_WIDTH = auto()
    FIELD_HEIGHT = auto()
    MAX_ROUNDS = auto()


@dataclass(frozen=True)
class Coordinate:
    """Board coordinate as written on the wire (``x`` is the column)."""

    x: int
    y: int


@dataclass(frozen=True)
class NullMove:
    pass


@dataclass(frozen=True)
class PassMove:
    pass


@dataclass(frozen=True)
class KillMove:
    target: Coordinate


@dataclass(frozen=True)
class BirthMove:
    target: Coordinate
    sacrifices: Tuple[Coordinate, Coordinate]


Move = Union[NullMove, PassMove, KillMove, BirthMove]


@dataclass(frozen=True)
class Setting:
    name: SettingName
    value: Union[int, str, Tuple[str, ...]]


@dataclass(frozen=True)
class GameRound:
    round: int


@dataclass(frozen=True)
class GameField:
    cells: Tuple[Cell, ...]


@dataclass(frozen=True)
class LivingCells:
    player: str
    cells: int


@dataclass(frozen=True)
class PlayerMove:
    player: str
    move: Move


@dataclass(frozen=True)
class ActionRequest:
    """``action move <time>``: the engine asks for our move."""

    time: int


Message = Union[Setting, GameRound, GameField, LivingCells, PlayerMove, ActionRequest]
