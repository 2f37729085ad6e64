"""Fail-fast numeric precondition checks used in debug mode."""

from __future__ import annotations

import numpy as np


def assert_nonzero_pivot(pivot: float, row: int) -> None:
    """
    Raise if a tridiagonal elimination pivot is zero or not finite.

    Parameters
    ----------
    pivot:
        Denominator of the current elimination step.
    row:
        Row index, used in the error message.

    Raises
    ------
    ZeroDivisionError
        If ``pivot`` is zero or not finite.
    """
    if pivot == 0.0 or not np.isfinite(pivot):
        raise ZeroDivisionError(f"Zero pivot encountered at row {row} (pivot={pivot})")


def assert_ascending(x: np.ndarray, name: str = "x") -> None:
    """
    Raise if ``x`` is not sorted in non-decreasing order.

    Parameters
    ----------
    x:
        1D array of sample positions.
    name:
        Argument name, used in the error message.

    Raises
    ------
    ValueError
        If any element is smaller than its predecessor.
    """
    x = np.asarray(x)
    if x.size > 1 and np.any(np.diff(x) < 0):
        raise ValueError(f"{name} must be sorted in ascending order")
