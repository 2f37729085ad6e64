"""Diagnostics and debugging utilities for dspcore."""

from .checks import assert_ascending, assert_nonzero_pivot
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_ascending",
    "assert_nonzero_pivot",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
