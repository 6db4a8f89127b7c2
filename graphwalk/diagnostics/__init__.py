"""Diagnostics and debugging utilities for graphwalk."""

from .core import (
    assert_symmetric_adjacency,
    assert_traversal_consistent,
    assert_valid_path,
)
from .debug_mode import (
    debug_context,
    debug_flag_from_env,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_symmetric_adjacency",
    "assert_valid_path",
    "assert_traversal_consistent",
    "debug_flag_from_env",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
