"""Debug mode for dspcore.

The flag is the ``debug`` field of the active :class:`~dspcore.config.DspConfig`
(initially taken from ``DSPCORE_DEBUG``). These helpers toggle only that
field and leave the rest of the configuration untouched.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator

from ..config import get_config, set_config


def is_debug_enabled() -> bool:
    """Whether numeric preconditions are checked eagerly."""
    return get_config().debug


def set_debug_enabled(enabled: bool) -> None:
    """Switch debug mode on or off for the active configuration."""
    config = get_config()
    if config.debug != bool(enabled):
        set_config(replace(config, debug=bool(enabled)))


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """Temporarily switch debug mode, restoring the previous flag on exit.

    Other configuration changes made inside the block are kept.

    Example:
        >>> with debug_context(True):
        ...     TriDiagonalMatrix(3).solve([1.0, 2.0, 3.0])
        Traceback (most recent call last):
        ZeroDivisionError: ...
    """
    prev = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)
