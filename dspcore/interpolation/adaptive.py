"""Density-adaptive interpolation."""

from __future__ import annotations

import numpy as np

from ..numeric import CubicSpline
from .base import ExtrapolationMode, Interpolator
from .linear import LinearInterpolator


class AdaptiveInterpolator(Interpolator):
    """Choose the algorithm per target point from the local sample density.

    For target ``c`` the raw samples strictly between ``target_x[c - 1]`` and
    ``target_x[c]`` are counted (none for the first target):

    - three or more: their arithmetic mean (decimation),
    - exactly two: linear interpolation,
    - fewer than two: cubic spline if ``use_spline``, else linear.

    The spline is fitted at most once per call, on first use.

    Args:
        use_spline: Use a cubic spline where samples are sparse.
        extrapolation_mode: Value policy outside the sampled range.
        logarithmic_x: Map positions through the natural logarithm.
    """

    def __init__(
        self,
        use_spline: bool = True,
        extrapolation_mode: ExtrapolationMode = ExtrapolationMode.HOLD,
        logarithmic_x: bool = False,
    ):
        super().__init__(extrapolation_mode=extrapolation_mode, logarithmic_x=logarithmic_x)
        self.use_spline = use_spline

    def _interpolate(self, x: np.ndarray, y: np.ndarray, target_x: np.ndarray) -> np.ndarray:
        n_targets = len(target_x)
        lo = np.zeros(n_targets, dtype=int)
        hi = np.zeros(n_targets, dtype=int)
        lo[1:] = np.searchsorted(x, target_x[:-1], side="right")
        hi[1:] = np.searchsorted(x, target_x[1:], side="left")
        counts = np.maximum(hi - lo, 0)

        linear = LinearInterpolator()._interpolate(x, y, target_x)
        spline = None

        out = np.empty(n_targets, dtype=float)
        for c in range(n_targets):
            if counts[c] >= 3:
                out[c] = np.mean(y[lo[c] : hi[c]])
            elif counts[c] == 2 or not self.use_spline:
                out[c] = linear[c]
            else:
                if spline is None:
                    spline = CubicSpline(x, y)
                out[c] = spline(target_x[c])
        return out
