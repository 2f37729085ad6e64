"""Weighted moving-average interpolation."""

from __future__ import annotations

import numpy as np

from ..dsp.windows import WindowType, get_window_function
from .base import ExtrapolationMode, Interpolator


class SmoothingInterpolator(Interpolator):
    """Weighted moving average over a window centred at each target.

    Samples within ``window_width / 2`` of a target are averaged with weights
    ``f(1 - |x - target| / (window_width / 2))`` where ``f`` is the window
    shape. When fewer than two samples fall inside the window the result is
    the linear interpolation between the bracketing samples.

    Args:
        window_width: Window width in x units (after the optional log mapping).
        window_type: Window shape (default: rectangular).
        extrapolation_mode: Defaults to NAN.
        logarithmic_x: Map positions through the natural logarithm.
    """

    def __init__(
        self,
        window_width: float = 0.0,
        window_type: WindowType = WindowType.RECTANGULAR,
        extrapolation_mode: ExtrapolationMode = ExtrapolationMode.NAN,
        logarithmic_x: bool = False,
    ):
        super().__init__(extrapolation_mode=extrapolation_mode, logarithmic_x=logarithmic_x)
        self.window_width = window_width
        self.window_type = WindowType(window_type)

    @classmethod
    def from_bandwidth(cls, bandwidth_ratio: float, **kwargs) -> "SmoothingInterpolator":
        """Smooth over a constant frequency ratio (e.g. 2 for one octave)."""
        return cls(window_width=float(np.log(bandwidth_ratio)), logarithmic_x=True, **kwargs)

    @classmethod
    def from_points_per_octave(cls, points_per_octave: float, **kwargs) -> "SmoothingInterpolator":
        """Smooth with a window of ``1 / points_per_octave`` octaves."""
        return cls(
            window_width=float(np.log(2.0) / points_per_octave), logarithmic_x=True, **kwargs
        )

    def _interpolate(self, x: np.ndarray, y: np.ndarray, target_x: np.ndarray) -> np.ndarray:
        window = get_window_function(self.window_type)
        half = self.window_width / 2.0
        lower = np.searchsorted(x, target_x - half, side="left")
        upper = np.searchsorted(x, target_x + half, side="left")

        out = np.empty(len(target_x), dtype=float)
        for i, t in enumerate(target_x):
            lo, hi = lower[i], upper[i]
            if hi - lo < 2:
                out[i] = np.interp(t, x, y)
                continue
            weights = window(1.0 - np.abs(x[lo:hi] - t) / half)
            out[i] = np.sum(weights * y[lo:hi]) / np.sum(weights)
        return out
