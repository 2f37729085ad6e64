"""Resampling of sampled data onto new positions.

Strategies:
- LinearInterpolator: piecewise linear, single forward cursor
- SplineInterpolator: natural cubic spline
- SmoothingInterpolator: windowed moving average (fractional-octave smoothing)
- AdaptiveInterpolator: mean, linear or spline depending on local density
"""

from .adaptive import AdaptiveInterpolator
from .base import (
    ExtrapolationMode,
    Interpolator,
    get_value_at,
    linear_interpolation,
)
from .linear import LinearInterpolator
from .smoothing import SmoothingInterpolator
from .spline import SplineInterpolator

__all__ = [
    "ExtrapolationMode",
    "Interpolator",
    "LinearInterpolator",
    "SplineInterpolator",
    "SmoothingInterpolator",
    "AdaptiveInterpolator",
    "get_value_at",
    "linear_interpolation",
]
