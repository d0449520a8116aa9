import logging
import sys

import typer

from life_duel.driver import Predictor
from life_duel.settings import DEFAULT_COLS, DEFAULT_ROWS

app = typer.Typer(
    help="Track a two-player Game of Life match read from stdin and predict each round."
)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return level


@app.command()
def play(
    rows: int = typer.Option(
        DEFAULT_ROWS, "--rows", min=1, help="Board rows until field_height is received."
    ),
    cols: int = typer.Option(
        DEFAULT_COLS, "--cols", min=1, help="Board columns until field_width is received."
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level", callback=_check_log_level, help="Logging level."
    ),
):
    """
    Read engine messages from stdin, answer every move request with 'pass' and
    log whether each simulated round matches the engine's field.
    """
    # stdout carries the protocol; diagnostics go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Predictor(fallback_dimensions=(rows, cols)).run(sys.stdin, sys.stdout)


def main():
    app()


if __name__ == "__main__":
    main()
