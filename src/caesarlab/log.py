from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "caesarlab"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a Rich stderr handler to the package logger (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    # Prevent duplicate handlers when the CLI is invoked repeatedly in-process
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=False,
    )
    logger.addHandler(handler)
    return logger
