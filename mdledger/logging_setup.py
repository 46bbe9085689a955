"""Logging configuration for the ``mdledger`` package.

- ``configure_logging(...)``: attach a single ``RichHandler`` to the package
  logger (``"mdledger"``). Called once by the CLI at startup.
- ``get_logger(name)``: acquire a logger, making sure the package logger has
  a ``NullHandler`` when nothing has been configured yet.

Library modules never attach their own handlers.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_PKG_LOGGER_NAME = "mdledger"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.WARNING
    env_val = os.getenv("MDLEDGER_LOG_LEVEL")
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(level: int | str | None = None) -> None:
    """Configure the package logger.

    Args:
        level: Logging level as int or level name. If None, falls back to the
            MDLEDGER_LOG_LEVEL environment variable, then WARNING.

    Calling again after the first time only updates the level.
    """
    global _CONFIGURED

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    numeric = _parse_level(level)
    logger.setLevel(numeric)

    if _CONFIGURED:
        for handler in logger.handlers:
            handler.setLevel(numeric)
        return

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until configure_logging runs."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
