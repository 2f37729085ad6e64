"""Frequency-domain helper functions."""

from __future__ import annotations

import numpy as np

from ..errors import LengthMismatchError
from .utils import check_1d_array


def db_to_linear(db) -> np.ndarray:
    """Convert amplitude decibels to a linear factor (``10 ** (dB / 20)``)."""
    return 10.0 ** (np.asarray(db, dtype=float) / 20.0)


def linear_to_db(x) -> np.ndarray:
    """Convert a linear amplitude to decibels; non-positive values map to -inf."""
    x = np.asarray(x, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(x > 0, 20.0 * np.log10(np.where(x > 0, x, 1.0)), -np.inf)


def wrap_phase(phase) -> np.ndarray:
    """Wrap phase values (radians) into ``(-pi, pi]``."""
    phase = np.asarray(phase, dtype=float)
    wrapped = np.mod(phase + np.pi, 2.0 * np.pi) - np.pi
    return np.where(wrapped == -np.pi, np.pi, wrapped)


def unwrap_phase(phase) -> np.ndarray:
    """Remove 2*pi jumps from a phase sequence."""
    return np.unwrap(np.asarray(phase, dtype=float))


def group_delay(frequencies, phase) -> np.ndarray:
    """Group delay ``-d(phase)/d(omega)`` in seconds.

    Uses central differences for interior points and one-sided differences
    at both ends. ``phase`` should be unwrapped.

    Args:
        frequencies: Frequencies in Hz (ascending).
        phase: Phase in radians at each frequency.

    Returns:
        Group delay at each frequency.

    Raises:
        LengthMismatchError: If the inputs differ in length.
    """
    f = check_1d_array(frequencies)
    p = check_1d_array(phase, finite=False)
    if len(f) != len(p):
        raise LengthMismatchError(len(f), len(p), "phase")
    if len(f) < 2:
        return np.zeros(len(f), dtype=float)

    gd = np.empty(len(f), dtype=float)
    gd[1:-1] = (p[:-2] - p[2:]) / (2.0 * np.pi * (f[2:] - f[:-2]))
    gd[0] = (p[0] - p[1]) / (2.0 * np.pi * (f[1] - f[0]))
    gd[-1] = (p[-2] - p[-1]) / (2.0 * np.pi * (f[-1] - f[-2]))
    return gd


def apply_delay(frequencies, values, delay: float) -> np.ndarray:
    """Multiply a spectrum by the linear phase of a pure delay.

    Args:
        frequencies: Frequencies in Hz.
        values: Complex spectrum values.
        delay: Delay in seconds (negative values advance).

    Returns:
        ``values * exp(-j 2 pi f delay)``.
    """
    f = np.asarray(frequencies, dtype=float)
    v = np.asarray(values, dtype=complex)
    if len(f) != len(v):
        raise LengthMismatchError(len(f), len(v), "values")
    return v * np.exp(-2j * np.pi * f * delay)
