"""Logging utilities tailored for crossword generation."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LEVEL_ENV = "CROSSGEN_LOG_LEVEL"


def resolve_level(level: Union[int, str, None]) -> int:
    """Accept a logging level as int or name; fall back to ``CROSSGEN_LOG_LEVEL`` then INFO."""

    if level is None:
        level = os.environ.get(LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def configure_logging(level: Union[int, str, None] = None) -> None:
    """Configure root logging with a sensible formatter.

    The search explores many branches, so it only logs run-level events at
    INFO; new best results are reported at DEBUG.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossgen")
