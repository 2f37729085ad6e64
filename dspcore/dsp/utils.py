"""Utility functions for signal processing.

Provides helper routines for input validation, padding and offset
arithmetic on sample arrays.
"""

from itertools import islice
from typing import Iterable, Iterator

import numpy as np


def check_1d_array(x, finite: bool = True, dtype=float) -> np.ndarray:
    """Validate and cast input to a 1D array.

    Args:
        x: Input array-like object (iterators are materialised).
        finite: If True, reject NaN and Inf values.
        dtype: Target dtype (default: float64).

    Returns:
        1D numpy array.

    Raises:
        ValueError: If input is not 1D, or (with ``finite``) contains NaN or Inf.
    """
    if isinstance(x, Iterator):
        x = list(x)
    arr = np.asarray(x, dtype=dtype)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if finite:
        if np.any(np.isnan(arr)):
            raise ValueError("Input contains NaN values")
        if np.any(np.isinf(arr)):
            raise ValueError("Input contains Inf values")
    return arr


def next_pow2(n: int) -> int:
    """Return the next power-of-two >= n.

    Args:
        n: Positive integer.

    Returns:
        Smallest power-of-two >= n. Returns 1 if n <= 0.
    """
    if n <= 0:
        return 1
    if n & (n - 1) == 0:
        return n
    return 1 << (n - 1).bit_length()


def padded_range(x: np.ndarray, start: int, length: int) -> np.ndarray:
    """Return ``length`` samples of ``x`` beginning at index ``start``.

    Indices outside ``[0, len(x))`` read as zero, so ``start`` may be
    negative and the range may extend past the end.

    Args:
        x: Source samples.
        start: First index (may be negative).
        length: Number of samples to return (non-negative).

    Returns:
        Array of exactly ``length`` samples.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    x = np.asarray(x)
    out = np.zeros(length, dtype=np.result_type(x.dtype, float))
    lo = max(start, 0)
    hi = min(start + length, len(x))
    if hi > lo:
        out[lo - start : hi - start] = x[lo:hi]
    return out


def add_full(a, b, offset: int = 0) -> np.ndarray:
    """Element-wise sum of two sequences without truncation.

    ``b`` is placed ``offset`` samples after the start of ``a`` (a negative
    offset places it before). The result spans both inputs; positions
    covered by only one operand take that operand's value.

    Args:
        a: First sequence.
        b: Second sequence.
        offset: Start of ``b`` relative to the start of ``a``.

    Returns:
        Array of length ``max(len(a), offset + len(b)) - min(0, offset)``.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    lo = min(0, offset)
    hi = max(len(a), offset + len(b))
    out = np.zeros(hi - lo, dtype=np.result_type(a.dtype, b.dtype, float))
    out[-lo : -lo + len(a)] += a
    out[offset - lo : offset - lo + len(b)] += b
    return out


def take(iterable: Iterable[float], n: int) -> np.ndarray:
    """Materialise the first ``n`` items of a (possibly infinite) iterable."""
    out = np.zeros(n, dtype=float)
    for i, value in enumerate(islice(iterable, n)):
        out[i] = value
    return out
