"""Match configuration assembled from ``settings`` lines.

The engine sends settings one line at a time before the first round. Each
:class:`~life_duel.protocol.Setting` produces a new :class:`MatchSettings`.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from life_duel.protocol import Setting

DEFAULT_ROWS = 16
DEFAULT_COLS = 18


@dataclass(frozen=True)
class MatchSettings:
    """Immutable match configuration.

    Attributes:
        timebank (int): Maximum time bank in milliseconds.
        time_per_move (int): Time added to the bank each move, in milliseconds.
        player_names (tuple[str, ...]): Names of all bots in the match.
        your_bot (str): Name of this bot.
        your_botid (int): Id of this bot; ``0`` plays the ``0`` cells.
        field_width (int): Number of columns, ``0`` until announced.
        field_height (int): Number of rows, ``0`` until announced.
        max_rounds (int): Round limit of the match.
    """

    timebank: int = 0
    time_per_move: int = 0
    player_names: Tuple[str, ...] = ()
    your_bot: str = ""
    your_botid: int = 0
    field_width: int = 0
    field_height: int = 0
    max_rounds: int = 0

    def apply(self, setting: Setting) -> "MatchSettings":
        return replace(self, **{setting.name.value: setting.value})

    def dimensions(
        self, fallback: Optional[Tuple[int, int]] = None
    ) -> Tuple[int, int]:
        """Return ``(rows, cols)`` as announced, or ``fallback`` until both are known."""
        if self.field_height > 0 and self.field_width > 0:
            return self.field_height, self.field_width
        return fallback if fallback is not None else (DEFAULT_ROWS, DEFAULT_COLS)
