"""Logging configuration helpers for the quiz application."""

from __future__ import annotations

import logging
from logging import Logger


def resolve_log_level(level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: int | str = logging.INFO) -> Logger:
    """Configure basic logging for the application and return the app logger."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("quiz_app")
