"""Logging helpers for flatlex.

Library modules only obtain loggers; handlers are installed solely by
``configure_logging``, which the CLI calls once at startup.

Example:
    >>> from flatlex.log import get_logger
    >>> logger = get_logger("lexer")
    >>> logger.name
    'flatlex.lexer'
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with "flatlex."."""
    if not (name == "flatlex" or name.startswith("flatlex.")):
        name = f"flatlex.{name}"
    return logging.getLogger(name)


def parse_level(name: str) -> int:
    """Map a level name (case-insensitive) to its logging constant."""
    try:
        return LEVELS[name.lower()]
    except KeyError:
        raise ValueError(
            f"unknown log level {name!r} (expected one of: {', '.join(LEVELS)})"
        ) from None


def configure_logging(level: int | str = logging.WARNING, stream: TextIO | None = None) -> None:
    """Attach a single stderr handler to the "flatlex" logger."""
    if isinstance(level, str):
        level = parse_level(level)
    root = get_logger("flatlex")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
