"""Logging utilities for graphwalk.

All package loggers live under the ``graphwalk`` namespace, write to one
stream each (stderr unless configured otherwise) and do not propagate to the
root logger, so an application's own logging setup is left alone.

Traversals log discoveries and revisions at DEBUG; the text reader logs a
one-line summary at INFO.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_PACKAGE = "graphwalk"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Settings applied to loggers created from now on
_settings: dict = {
    "level": logging.WARNING,
    "format": _DEFAULT_FORMAT,
    "stream": None,
}

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualify(name: Optional[str]) -> str:
    if not name or name == _PACKAGE:
        return _PACKAGE
    if name.startswith(_PACKAGE + "."):
        return name
    return f"{_PACKAGE}.{name}"


def _attach_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(_settings["stream"] or sys.stderr)
    handler.setLevel(_settings["level"])
    handler.setFormatter(logging.Formatter(_settings["format"]))

    logger.setLevel(_settings["level"])
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Args:
        name: Module name, typically ``__name__``. Names outside the package
            are prefixed with ``graphwalk.``; None gives the package logger.

    Returns:
        Cached, configured logger instance.

    Example:
        >>> from graphwalk.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("visit 2 from 0")
    """
    logger_name = _qualify(name)

    if logger_name not in _loggers:
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            _attach_handler(logger)
        _loggers[logger_name] = logger

    return _loggers[logger_name]


def set_log_level(level: int | str) -> None:
    """Set the logging level for all graphwalk loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or its name
            in any case ('debug', 'INFO', ...).
    """
    level = _coerce_level(level)
    _settings["level"] = level

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for graphwalk.

    Replaces the handler of every existing package logger and records the
    settings for loggers created later.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses
            ``[LEVEL] name: message``.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> import logging, sys
        >>> from graphwalk.logging import configure_logging
        >>> configure_logging(level=logging.INFO, stream=sys.stdout)
    """
    _settings["level"] = _coerce_level(level)
    _settings["format"] = format_string or _DEFAULT_FORMAT
    _settings["stream"] = stream

    for logger in _loggers.values():
        _attach_handler(logger)
