"""Unbounded signals defined by a sampling function."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..spectrum import Spectrum
from .base import Signal

SampleFunction = Callable[[int], float]
RangeFunction = Callable[[int, int], np.ndarray]


class InfiniteSignal(Signal):
    """Signal defined for every integer time index.

    Exactly one of ``sample_function`` (time index -> sample) or
    ``range_function`` ((start, length) -> samples) must be given.

    Args:
        sample_rate: Sample rate in Hz.
        sample_function: Per-index sampling function.
        range_function: Per-range sampling function.
        display_name: Human-readable label.
    """

    def __init__(
        self,
        sample_rate: float,
        sample_function: Optional[SampleFunction] = None,
        range_function: Optional[RangeFunction] = None,
        display_name: str = "infinite signal",
    ):
        super().__init__(sample_rate, display_name)
        if (sample_function is None) == (range_function is None):
            raise ValueError("Exactly one of sample_function and range_function must be given")
        self._sample_function = sample_function
        self._range_function = range_function

    def get_windowed_samples(self, start: int, length: int) -> np.ndarray:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if self._range_function is not None:
            samples = np.asarray(self._range_function(start, length), dtype=float)
            if samples.shape != (length,):
                raise ValueError(
                    f"range_function returned {samples.shape[0] if samples.ndim else 0} "
                    f"samples, expected {length}"
                )
            return samples
        return np.fromiter(
            (self._sample_function(t) for t in range(start, start + length)),
            dtype=float,
            count=length,
        )

    def get_sample(self, time: int) -> float:
        """Sample at ``time``."""
        return float(self.get_windowed_samples(time, 1)[0])


class SyntheticSignal(InfiniteSignal):
    """Infinite signal whose spectrum is known analytically.

    Args:
        sample_rate: Sample rate in Hz.
        spectrum: Analytic spectrum (no transform is ever computed).
        sample_function: Per-index sampling function.
        range_function: Per-range sampling function.
        display_name: Human-readable label.
    """

    def __init__(
        self,
        sample_rate: float,
        spectrum: Spectrum,
        sample_function: Optional[SampleFunction] = None,
        range_function: Optional[RangeFunction] = None,
        display_name: str = "synthetic signal",
    ):
        super().__init__(
            sample_rate,
            sample_function=sample_function,
            range_function=range_function,
            display_name=display_name,
        )
        self.spectrum = spectrum
