"""Numeric support: tridiagonal systems and cubic splines."""

from .cubic_spline import CubicSpline
from .tridiagonal import TriDiagonalMatrix

__all__ = [
    "TriDiagonalMatrix",
    "CubicSpline",
]
