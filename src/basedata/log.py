"""Logging setup for applications embedding basedata."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from basedata.config.defaults import DEFAULT_LOG_LEVEL

LOG_LEVEL_ENV = "BASEDATA_LOG_LEVEL"

error_console = Console(stderr=True)


def resolve_level(verbosity: int = 0) -> int:
    """Map a verbosity count to a level; 0 defers to ``BASEDATA_LOG_LEVEL``."""
    if verbosity == 1:
        return logging.INFO
    if verbosity >= 2:
        return logging.DEBUG

    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def setup_logging(verbosity: int = 0) -> None:
    """Route the ``basedata`` loggers through a rich handler on stderr."""
    logger = logging.getLogger("basedata")
    logger.setLevel(resolve_level(verbosity))
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=error_console, show_time=False, show_path=False))
