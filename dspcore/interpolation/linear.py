"""Piecewise-linear interpolation."""

from __future__ import annotations

import numpy as np

from .base import Interpolator, linear_interpolation


class LinearInterpolator(Interpolator):
    """Piecewise-linear interpolation with a single forward cursor.

    The cursor over ``x`` only moves forward, so ascending targets are
    resampled in O(len(x) + len(target_x)).
    """

    def _interpolate(self, x: np.ndarray, y: np.ndarray, target_x: np.ndarray) -> np.ndarray:
        out = np.empty(len(target_x), dtype=float)
        last = len(x) - 1
        xc = 1
        for i, t in enumerate(target_x):
            while xc < last and x[xc] < t:
                xc += 1
            out[i] = linear_interpolation(t, x[xc - 1], x[xc], y[xc - 1], y[xc])
        return out
