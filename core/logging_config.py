"""Console logging setup for the ``eventful`` logger tree."""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "eventful"


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so repeated setup reuses one handler."""


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single console handler to the ``eventful`` logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        levels = logging.getLevelNamesMapping()
        if level.upper() not in levels:
            raise ValueError(f"Unknown log level: {level}")
        level = levels[level.upper()]
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, _ConsoleHandler):
            handler.stream = sys.stderr
            return logger
    handler = _ConsoleHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
