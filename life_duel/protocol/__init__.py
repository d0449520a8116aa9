"""Text protocol spoken by the match engine.

Re-exports the message dataclasses, the field codec and the line parser.
"""

from .field import format_field, parse_field
from .messages import (
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
from .parser import ProtocolError, iter_messages, parse_count, parse_line, parse_move
