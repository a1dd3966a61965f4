"""Logging utilities for qukit.

Every qukit module logs through a logger under the ``qukit.`` namespace so the
whole package can be silenced or made verbose in one place.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, Union

from .config import get_config

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: Dict[str, logging.Logger] = {}
_level: Optional[int] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _current_level() -> int:
    global _level
    if _level is None:
        _level = _resolve_level(get_config().log_level)
    return _level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the qukit logger for ``name`` (typically ``__name__``).

    Example:
        >>> from qukit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Writing gate bindings")
    """
    if name is None:
        name = "qukit"
    logger_name = name if name == "qukit" or name.startswith("qukit.") else f"qukit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        level = _current_level()
        logger.setLevel(level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every qukit logger, including ones created later."""
    global _level
    _level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)
