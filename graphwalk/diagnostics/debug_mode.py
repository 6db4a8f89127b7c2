"""Debug-mode switch for graphwalk.

While debug mode is on, every traversal query verifies its own result state
at the end of construction. The switch starts from the GRAPHWALK_DEBUG
environment variable and can be flipped at runtime.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

DEBUG_ENV_VAR = "GRAPHWALK_DEBUG"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def debug_flag_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Read the debug flag from an environment mapping.

    Parameters
    ----------
    environ:
        Mapping to read from; defaults to os.environ.

    Returns
    -------
    bool
        True if GRAPHWALK_DEBUG is one of 1/true/yes/on (any case).
    """
    if environ is None:
        environ = os.environ
    return environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUE_VALUES


_enabled: bool = debug_flag_from_env()


def is_debug_enabled() -> bool:
    """Return whether traversal queries currently self-check."""
    return _enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Turn debug mode on or off.

    Returns
    -------
    bool
        The previous setting.
    """
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set debug mode, restoring the previous setting on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     pass  # queries built here verify themselves
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
