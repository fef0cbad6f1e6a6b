"""Logging helpers for the Elo list engine.

Verbosity is controlled either programmatically through :func:`set_log_level`
or via the ``ELO_LIST_LOG_LEVEL`` environment variable.  A "silent" level
suppresses all output.
"""

import logging
import os
from typing import Union

LOG_LEVELS = {
    "silent": logging.CRITICAL + 1,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

ROOT_LOGGER_NAME = "elo_list"


def _parse_level(level: Union[str, int, None]) -> int:
    """Translate a human friendly level to ``logging`` constants."""
    if isinstance(level, str):
        return LOG_LEVELS.get(level.lower(), logging.WARNING)
    if isinstance(level, int):
        return level
    return logging.WARNING


def set_log_level(level: Union[str, int]) -> None:
    """Set the level of every logger in the ``elo_list`` namespace."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(_parse_level(level))


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger below the ``elo_list`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A configured ``logging.Logger``
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
set_log_level(os.getenv("ELO_LIST_LOG_LEVEL", "warning"))
