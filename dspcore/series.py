"""Ordered value series used as frequency (or x) axes."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .dsp.fft import fft_frequencies
from .dsp.utils import check_1d_array


class Series(Sequence):
    """Immutable ordered sequence of real values with a log-scale flag.

    Equality is value-based: two series are equal when their values and
    scale flags match.

    Args:
        values: Real values.
        logarithmic: Whether the series is meant to be displayed/treated on a
            logarithmic scale.
    """

    def __init__(self, values, logarithmic: bool = False):
        self._values = check_1d_array(values).copy()
        self._values.flags.writeable = False
        self.logarithmic = bool(logarithmic)

    @property
    def values(self) -> np.ndarray:
        """Read-only array of the series values."""
        return self._values

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __array__(self, dtype=None, copy=None):
        return np.asarray(self._values, dtype=dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self.logarithmic == other.logarithmic and np.array_equal(
            self._values, other._values
        )

    def __hash__(self) -> int:
        return hash((self.logarithmic, self._values.tobytes()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)}, logarithmic={self.logarithmic})"


class CustomSeries(Series):
    """Series with arbitrary user-supplied values."""


class ConstantSeries(Series):
    """Single-point series, e.g. the frequency of a pure tone."""

    def __init__(self, frequency: float = 1000.0):
        super().__init__([frequency])
        self.frequency = float(frequency)


class FftSeries(Series):
    """Bin frequencies of an ``n``-point real FFT at ``sample_rate``.

    Args:
        sample_rate: Sample rate in Hz.
        n: Transform length.
    """

    def __init__(self, sample_rate: float, n: int):
        if n <= 0:
            raise ValueError(f"FFT length must be positive, got {n}")
        super().__init__(fft_frequencies(sample_rate, n))
        self.sample_rate = float(sample_rate)
        self.n = int(n)

    def __eq__(self, other) -> bool:
        if isinstance(other, FftSeries):
            return self.sample_rate == other.sample_rate and self.n == other.n
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()

    def __repr__(self) -> str:
        return f"FftSeries(sample_rate={self.sample_rate}, n={self.n})"


def merge(s1: Series, s2: Series) -> CustomSeries:
    """Sorted union of two series; logarithmic only if both are."""
    values = np.union1d(np.asarray(s1), np.asarray(s2))
    return CustomSeries(values, logarithmic=s1.logarithmic and s2.logarithmic)
