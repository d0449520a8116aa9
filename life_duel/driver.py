"""Prediction tracker.

:class:`Predictor` sits between the protocol stream and the simulator. It
keeps one predicted grid, checks it against every authoritative field the
engine sends and then advances the *prediction* by one round. A mismatch is
logged and reported but never repaired; the prediction keeps evolving on its
own.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, TextIO, Tuple

from life_duel.grid import DimensionMismatch, Grid
from life_duel.protocol import (
    ActionRequest,
    GameField,
    GameRound,
    Message,
    Setting,
    iter_messages,
)
from life_duel.settings import DEFAULT_COLS, DEFAULT_ROWS, MatchSettings
from life_duel.step import step
from life_duel.validate import PredictionReport, compare

logger = logging.getLogger(__name__)

PASS = "pass"


@dataclass
class Predictor:
    """Holds the current prediction for the surrounding game loop.

    Attributes:
        fallback_dimensions: ``(rows, cols)`` used until the engine announces
            ``field_height`` and ``field_width``.
        settings: Settings received so far.
        prediction: Grid expected for the next authoritative field.
        last_report: Result of the most recent comparison.
    """

    fallback_dimensions: Tuple[int, int] = (DEFAULT_ROWS, DEFAULT_COLS)
    settings: MatchSettings = field(default_factory=MatchSettings)
    prediction: Optional[Grid] = None
    last_report: Optional[PredictionReport] = None

    def handle(self, message: Message) -> Optional[str]:
        """Process one message; return the line to send back, if any."""
        if isinstance(message, Setting):
            self.settings = self.settings.apply(message)
        elif isinstance(message, GameRound):
            logger.info("round: %d", message.round)
        elif isinstance(message, GameField):
            self.observe(message)
        elif isinstance(message, ActionRequest):
            return PASS
        return None

    def observe(self, update: GameField) -> Optional[PredictionReport]:
        """Check the prediction against an authoritative field, then advance it.

        Returns:
            PredictionReport | None: ``None`` for the first field (nothing was
                predicted yet) or when the field has the wrong size.
        """
        rows, cols = self.settings.dimensions(self.fallback_dimensions)
        try:
            authoritative = Grid.from_cells(update.cells, rows, cols)
        except DimensionMismatch as e:
            logger.error("Ignoring game field: %s", e)
            return None

        if self.prediction is None:
            self.prediction = step(authoritative)
            return None

        report = compare(self.prediction, authoritative)
        logger.debug("game grid:\n%s", authoritative.render())
        logger.debug("sim grid:\n%s", self.prediction.render())
        logger.info(
            "predicted state matches engine state: %s (%d cells differ, living delta %s)",
            report.agrees,
            len(report.mismatches),
            {player.name: delta for player, delta in report.living_delta.items()},
        )
        self.last_report = report
        self.prediction = step(self.prediction)
        return report

    def run(self, lines: Iterable[str], out: TextIO) -> None:
        """Drive the predictor from ``lines``, writing replies to ``out``."""
        for message in iter_messages(lines):
            reply = self.handle(message)
            if reply is not None:
                out.write(reply + "\n")
                out.flush()
