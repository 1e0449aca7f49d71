"""Logging setup for calligraphy."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "calligraphy"


def setup_logging(
    level: str | int = "WARNING", console: Console | None = None
) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling this again replaces the previous handler instead of stacking a new one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
