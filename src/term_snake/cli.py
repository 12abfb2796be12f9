"""Command-line entry point for term-snake."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from term_snake.config import GameConfig
from term_snake.display import CursesDisplay, Display, DisplayError
from term_snake.engine import GameEngine
from term_snake.loop import GameLoop, InputError

logger = logging.getLogger(__name__)

LOG_ENV_VAR = "TERM_SNAKE_LOG"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="term-snake",
        description=(
            "Snake in the terminal. Steer with the arrow keys, eat every "
            "heart to clear a level, press ESC to quit."
        ),
    )


def _configure_logging() -> None:
    # Anything written to stderr would land on top of the curses screen.
    log_file = os.environ.get(LOG_ENV_VAR)
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


def run_game(
    display: Display,
    config: GameConfig | None = None,
) -> int:
    """Play one game on *display* and return the process exit status."""
    engine = GameEngine(config)
    try:
        display.init()
        try:
            outcome = GameLoop(engine, display).run()
        finally:
            display.close()
    except DisplayError as exc:
        print(f"term-snake: {exc}", file=sys.stderr)  # noqa: T201
        return 1
    except InputError:
        logger.exception("Game aborted.")
        print("term-snake: keyboard input failed.", file=sys.stderr)  # noqa: T201
        return 1

    logger.info(
        "Game ended (%s) at level %d with score %d.",
        outcome.value if outcome is not None else "quit",
        engine.level, engine.score,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` command."""
    _build_parser().parse_args(argv)
    _configure_logging()
    return run_game(CursesDisplay())


if __name__ == "__main__":
    sys.exit(main())
