"""Console logging through rich."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

ROOT_LOGGER = "snakes_ladders"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Route the package's loggers to a RichHandler.

    INFO shows the activity log (ladders, snakes, wins); DEBUG adds every
    state-machine transition.
    """
    handler = RichHandler(markup=False, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
