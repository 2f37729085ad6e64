"""Cubic-spline interpolation."""

from __future__ import annotations

import numpy as np

from ..numeric import CubicSpline
from .base import Interpolator


class SplineInterpolator(Interpolator):
    """Natural cubic spline through all samples, solved once per call."""

    def _interpolate(self, x: np.ndarray, y: np.ndarray, target_x: np.ndarray) -> np.ndarray:
        return CubicSpline(x, y)(target_x)
