"""Cubic spline interpolation.

Fits a C2-continuous piecewise cubic through ``(x, y)``. Each segment is
written in the symmetric form

    q(t) = (1 - t) y_j + t y_{j+1} + t (1 - t) (a_j (1 - t) + b_j t),

with ``t = (x - x_j) / (x_{j+1} - x_j)``. The knot slopes ``k`` solve a
tridiagonal system; without prescribed end slopes the spline is natural
(zero curvature at both ends).

References:
    - W. H. Press et al., "Numerical Recipes", Sec. 3.3.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..diagnostics import assert_ascending, is_debug_enabled
from ..dsp.utils import check_1d_array
from ..errors import LengthMismatchError
from ..logging import get_logger
from .tridiagonal import TriDiagonalMatrix

logger = get_logger(__name__)


class CubicSpline:
    """Natural (or clamped) cubic spline through ascending points.

    Args:
        x: Knot positions (ascending, at least two).
        y: Knot values.
        start_slope: Prescribed slope at ``x[0]``; natural end if None.
        end_slope: Prescribed slope at ``x[-1]``; natural end if None.
    """

    def __init__(
        self,
        x,
        y,
        start_slope: Optional[float] = None,
        end_slope: Optional[float] = None,
    ):
        self.x = check_1d_array(x)
        self.y = check_1d_array(y, finite=False)
        if len(self.x) != len(self.y):
            raise LengthMismatchError(len(self.x), len(self.y), "y")
        if len(self.x) < 2:
            raise ValueError(f"A cubic spline needs at least 2 points, got {len(self.x)}")
        for slope in (start_slope, end_slope):
            if slope is not None and math.isinf(slope):
                raise ValueError("start_slope and end_slope cannot be infinite")
        if is_debug_enabled():
            assert_ascending(self.x)

        self.a, self.b = self._fit(start_slope, end_slope)

    def _fit(self, start_slope, end_slope):
        x, y = self.x, self.y
        n = len(x)
        m = TriDiagonalMatrix(n)
        r = np.zeros(n, dtype=float)

        if start_slope is None:
            dx = x[1] - x[0]
            m.c[0] = 1.0 / dx
            m.b[0] = 2.0 * m.c[0]
            r[0] = 3.0 * (y[1] - y[0]) / (dx * dx)
        else:
            m.b[0] = 1.0
            r[0] = start_slope

        dx1 = x[1:-1] - x[:-2]
        dx2 = x[2:] - x[1:-1]
        dy1 = y[1:-1] - y[:-2]
        dy2 = y[2:] - y[1:-1]
        m.a[1:-1] = 1.0 / dx1
        m.c[1:-1] = 1.0 / dx2
        m.b[1:-1] = 2.0 * (m.a[1:-1] + m.c[1:-1])
        r[1:-1] = 3.0 * (dy1 / (dx1 * dx1) + dy2 / (dx2 * dx2))

        if end_slope is None:
            dx = x[-1] - x[-2]
            m.a[-1] = 1.0 / dx
            m.b[-1] = 2.0 * m.a[-1]
            r[-1] = 3.0 * (y[-1] - y[-2]) / (dx * dx)
        else:
            m.b[-1] = 1.0
            r[-1] = end_slope

        k = m.solve(r)
        logger.debug("Fitted cubic spline through %d points", n)

        dx = np.diff(x)
        dy = np.diff(y)
        return k[:-1] * dx - dy, -k[1:] * dx + dy

    def _segments(self, xs: np.ndarray) -> np.ndarray:
        j = np.searchsorted(self.x, xs, side="left") - 1
        return np.clip(j, 0, len(self.x) - 2)

    def __call__(self, xs) -> np.ndarray:
        """Evaluate the spline at ``xs``.

        Points outside the knot range are extrapolated with the end segments.
        """
        xs = np.asarray(xs, dtype=float)
        j = self._segments(xs)
        x0, x1 = self.x[j], self.x[j + 1]
        t = (xs - x0) / (x1 - x0)
        return (1.0 - t) * self.y[j] + t * self.y[j + 1] + t * (1.0 - t) * (
            self.a[j] * (1.0 - t) + self.b[j] * t
        )

    def slope(self, xs) -> np.ndarray:
        """Evaluate the first derivative of the spline at ``xs``."""
        xs = np.asarray(xs, dtype=float)
        j = self._segments(xs)
        dx = self.x[j + 1] - self.x[j]
        dy = self.y[j + 1] - self.y[j]
        t = (xs - self.x[j]) / dx
        a, b = self.a[j], self.b[j]
        return dy / dx + (1.0 - 2.0 * t) * (a * (1.0 - t) + b * t) / dx + t * (1.0 - t) * (b - a) / dx
