"""Interpolator base class and shared helpers.

Every interpolator maps samples ``(x, y)`` onto target positions. Targets
are split into three parts: those below ``x[0]`` and above ``x[-1]``
receive the extrapolation value, the rest are delegated to the concrete
algorithm. ``x`` must be ascending; target positions are expected to be
ascending as well.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from ..diagnostics import assert_ascending, is_debug_enabled
from ..errors import LengthMismatchError


class ExtrapolationMode(Enum):
    """Value used for targets outside the sampled range."""

    HOLD = "hold"
    ZERO = "zero"
    NAN = "nan"


def linear_interpolation(x_target: float, x1: float, x2: float, y1, y2):
    """Interpolate linearly between ``(x1, y1)`` and ``(x2, y2)``.

    Works for real and complex ``y``; ``x_target`` outside ``[x1, x2]``
    extrapolates along the same line.
    """
    return (x_target - x1) / (x2 - x1) * y2 + (x2 - x_target) / (x2 - x1) * y1


def get_value_at(x, y, x_target: float, mode: ExtrapolationMode = ExtrapolationMode.HOLD) -> float:
    """Evaluate piecewise-linear data at a single position.

    Args:
        x: Ascending sample positions.
        y: Sample values.
        x_target: Position to evaluate.
        mode: Extrapolation for positions outside ``[x[0], x[-1]]``.

    Returns:
        Interpolated (or extrapolated) value.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` differ in length.
        ValueError: If ``x`` is empty.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y)
    if len(x) != len(y):
        raise LengthMismatchError(len(x), len(y), "y")
    if len(x) == 0:
        raise ValueError("x and y cannot be empty")

    i = int(np.searchsorted(x[:-1], x_target, side="left"))
    if x[i] == x_target:
        return y[i]
    if i == 0 or x_target > x[-1]:
        mode = ExtrapolationMode(mode)
        if mode is ExtrapolationMode.HOLD:
            return y[i]
        if mode is ExtrapolationMode.ZERO:
            return 0.0
        return np.nan
    return linear_interpolation(x_target, x[i - 1], x[i], y[i - 1], y[i])


def _extrapolation_value(mode: ExtrapolationMode, edge_value: float) -> float:
    if mode is ExtrapolationMode.HOLD:
        return edge_value
    if mode is ExtrapolationMode.ZERO:
        return 0.0
    return np.nan


class Interpolator(ABC):
    """Base class for resampling strategies.

    Args:
        extrapolation_mode: Value policy outside the sampled range.
        logarithmic_x: If True, ``x`` and target positions are mapped through
            the natural logarithm before interpolating.
    """

    def __init__(
        self,
        extrapolation_mode: ExtrapolationMode = ExtrapolationMode.HOLD,
        logarithmic_x: bool = False,
    ):
        self.extrapolation_mode = ExtrapolationMode(extrapolation_mode)
        self.logarithmic_x = logarithmic_x

    def interpolate(self, x, y, target_x) -> np.ndarray:
        """Resample ``(x, y)`` at ``target_x``.

        Args:
            x: Ascending sample positions.
            y: Sample values.
            target_x: Ascending target positions.

        Returns:
            Array of ``len(target_x)`` values.

        Raises:
            LengthMismatchError: If ``x`` and ``y`` differ in length.
            ValueError: If ``x`` is empty.
        """
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        target_x = np.asarray(target_x, dtype=float)
        if x.ndim == 0:
            x = x.reshape(1)
        if y.ndim == 0:
            y = y.reshape(1)
        if target_x.ndim == 0:
            target_x = target_x.reshape(1)

        if len(x) != len(y):
            raise LengthMismatchError(len(x), len(y), "y")
        if len(x) == 0:
            raise ValueError("x and y cannot be empty")

        out = np.empty(len(target_x), dtype=float)
        if len(target_x) == 0:
            return out

        if self.logarithmic_x:
            with np.errstate(divide="ignore", invalid="ignore"):
                x = np.log(x)
                target_x = np.log(target_x)

        if is_debug_enabled():
            assert_ascending(x)

        below = target_x < x[0]
        above = target_x > x[-1]
        inside = ~(below | above)

        out[below] = _extrapolation_value(self.extrapolation_mode, y[0])
        out[above] = _extrapolation_value(self.extrapolation_mode, y[-1])
        if np.any(inside):
            if len(x) == 1:
                out[inside] = y[0]
            else:
                out[inside] = self._interpolate(x, y, target_x[inside])
        return out

    def interpolate_complex(self, x, y, target_x) -> np.ndarray:
        """Resample complex values by interpolating magnitude and phase separately."""
        y = np.asarray(y, dtype=complex)
        magnitude = self.interpolate(x, np.abs(y), target_x)
        phase = self.interpolate(x, np.angle(y), target_x)
        return magnitude * np.exp(1j * phase)

    @abstractmethod
    def _interpolate(self, x: np.ndarray, y: np.ndarray, target_x: np.ndarray) -> np.ndarray:
        """Interpolate at targets inside ``[x[0], x[-1]]`` (at least 2 samples)."""
