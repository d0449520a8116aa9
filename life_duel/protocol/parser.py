"""Line tokenizer for the match engine protocol.

:func:`parse_line` turns one line into a message from
:mod:`life_duel.protocol.messages`; :func:`iter_messages` walks a stream,
logging and skipping malformed lines so one bad line never stops the agent.
"""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from life_duel.protocol.field import parse_field
from life_duel.protocol.messages import (
    ActionRequest,
    BirthMove,
    Coordinate,
    GameField,
    GameRound,
    KillMove,
    LivingCells,
    Message,
    Move,
    NullMove,
    PassMove,
    PlayerMove,
    Setting,
    SettingName,
)

logger = logging.getLogger(__name__)


class ProtocolError(ValueError):
    """A line that cannot be decoded."""

    def __init__(self, reason: str, line: str, line_no: int) -> None:
        super().__init__(f"{reason} on line {line_no} ({line.strip()})")
        self.reason = reason
        self.line = line.strip()
        self.line_no = line_no


def parse_count(token: str) -> int:
    """Decode a non-negative integer.

    Raises:
        ValueError: If the token is not a decimal integer or is negative.
    """
    value = int(token)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {token}")
    return value


SettingValue = Union[int, str, Tuple[str, ...]]

SETTING_PARSERS: Dict[SettingName, Callable[[str], SettingValue]] = {
    SettingName.TIMEBANK: parse_count,
    SettingName.TIME_PER_MOVE: parse_count,
    SettingName.PLAYER_NAMES: lambda v: tuple(v.split(",")),
    SettingName.YOUR_BOT: str,
    SettingName.YOUR_BOTID: parse_count,
    SettingName.FIELD_WIDTH: parse_count,
    SettingName.FIELD_HEIGHT: parse_count,
    SettingName.MAX_ROUNDS: parse_count,
}


def parse_coordinate(token: str) -> Coordinate:
    """Decode ``"x,y"``.

    Raises:
        ValueError: If the token is not two comma separated non-negative integers.
    """
    x, y = token.split(",")
    return Coordinate(parse_count(x), parse_count(y))


def parse_move(token: str) -> Move:
    """Decode ``null``, ``pass``, ``kill_x,y`` or ``birth_x,y_x,y_x,y``.

    Raises:
        ValueError: On an unknown move kind or a wrong number of coordinates.
    """
    kind, *rest = token.split("_")
    coords = [parse_coordinate(c) for c in rest]
    if kind == "kill":
        if len(coords) != 1:
            raise ValueError("expected one coordinate")
        return KillMove(coords[0])
    if kind == "birth":
        if len(coords) != 3:
            raise ValueError("expected three coordinates")
        return BirthMove(coords[0], (coords[1], coords[2]))
    if coords:
        raise ValueError(f"unexpected coordinates for {kind}")
    if kind == "pass":
        return PassMove()
    if kind == "null":
        return NullMove()
    raise ValueError(f"unknown move {kind}")


def _parse_settings(tokens: List[str]) -> Setting:
    if len(tokens) < 2:
        raise ValueError("invalid settings")
    name, value = tokens[0], tokens[1]
    try:
        setting = SettingName(name)
    except ValueError:
        raise ValueError(f"unknown option {name}") from None
    return Setting(setting, SETTING_PARSERS[setting](value))


def _parse_update(tokens: List[str]) -> Message:
    if len(tokens) < 3:
        raise ValueError("invalid update")
    first, second, third = tokens[0], tokens[1], tokens[2]
    if first == "game" and second == "round":
        return GameRound(parse_count(third))
    if first == "game" and second == "field":
        return GameField(tuple(parse_field(third)))
    if second == "living_cells":
        return LivingCells(first, parse_count(third))
    if second == "move":
        return PlayerMove(first, parse_move(third))
    raise ValueError(f"unknown option {first} {second}")


def _parse_action(tokens: List[str]) -> ActionRequest:
    if len(tokens) < 2:
        raise ValueError("invalid action")
    if tokens[0] != "move":
        raise ValueError(f"unknown option {tokens[0]}")
    return ActionRequest(parse_count(tokens[1]))


def parse_line(line: str, line_no: int = 0) -> Optional[Message]:
    """Decode a single protocol line.

    Args:
        line (str): Raw input line, trailing newline allowed.
        line_no (int): 1-based line number used in error messages.

    Returns:
        Message | None: The decoded message, or ``None`` for a blank line.

    Raises:
        ProtocolError: If the line is malformed.
    """
    tokens = line.split()
    if not tokens:
        return None
    kind, rest = tokens[0], tokens[1:]
    try:
        if kind == "settings":
            return _parse_settings(rest)
        if kind == "update":
            return _parse_update(rest)
        if kind == "action":
            return _parse_action(rest)
    except ValueError as e:
        raise ProtocolError(str(e), line, line_no) from e
    raise ProtocolError(f"unknown option {kind}", line, line_no)


def iter_messages(lines: Iterable[str]) -> Iterator[Message]:
    """Yield decoded messages, skipping blank and malformed lines."""
    for line_no, line in enumerate(lines, start=1):
        try:
            message = parse_line(line, line_no)
        except ProtocolError as e:
            logger.error("Skipping malformed input: %s", e)
            continue
        if message is not None:
            yield message
