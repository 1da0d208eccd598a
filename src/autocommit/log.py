"""Logging helpers — one project logger with a Rich handler on stderr."""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "autocommit"

LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logger(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Configure and return the project logger.

    Handlers are attached once; later calls only change the level.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the project logger, or a child of it for a module *name*."""
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(LOGGER_NAME).getChild(name)
