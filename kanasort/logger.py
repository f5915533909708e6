from __future__ import annotations
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the ``kanasort`` logger and return it.

    The level defaults to ``KANASORT_LOG_LEVEL`` or ``INFO``. Calling this
    twice does not add a second handler.
    """
    if level is None:
        level = os.getenv("KANASORT_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = logging.getLogger("kanasort")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
