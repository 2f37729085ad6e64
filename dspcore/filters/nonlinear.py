"""Nonlinear and user-defined filters."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional

import numpy as np

from .base import Filter, FiniteFilter

StreamFunction = Callable[[Iterable[float]], Iterable[float]]


class DistortionFilter(FiniteFilter):
    """Asymmetric logarithmic soft clipper.

    ``y = -log(1 - x)`` for negative and ``y = log(1 + sqrt(x))`` for
    non-negative samples.
    """

    def __init__(self, sample_rate: Optional[float] = None):
        super().__init__(sample_rate, display_name="distortion")

    @staticmethod
    def _distort(x: float) -> float:
        if x < 0:
            return -math.log(1.0 - x)
        return math.log(1.0 + math.sqrt(x))

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return (self._distort(x) for x in samples)


class AwgnFilter(FiniteFilter):
    """Add white Gaussian noise.

    ``sigma`` and ``variance`` are coupled; setting one updates the other
    and raises ``changed`` once.

    Args:
        sample_rate: Sample rate in Hz.
        variance: Noise variance (default: 0.1).
        seed: Seed for the noise generator.
    """

    def __init__(
        self,
        sample_rate: Optional[float] = None,
        variance: float = 0.1,
        seed: Optional[int] = None,
    ):
        super().__init__(sample_rate, display_name="awgn")
        if variance < 0:
            raise ValueError(f"variance must be non-negative, got {variance}")
        self._variance = float(variance)
        self._rng = np.random.default_rng(seed)

    @property
    def variance(self) -> float:
        return self._variance

    @variance.setter
    def variance(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"variance must be non-negative, got {value}")
        self._set_parameter("_variance", float(value))

    @property
    def sigma(self) -> float:
        """Noise standard deviation."""
        return math.sqrt(self._variance)

    @sigma.setter
    def sigma(self, value: float) -> None:
        self._set_parameter("_variance", float(value) ** 2)

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        rng = self._rng
        sigma = self.sigma
        return (x + sigma * rng.standard_normal() for x in samples)


class CustomFilter(Filter):
    """Filter applying a user function to the whole sample stream.

    Args:
        function: Callable mapping an iterable of samples to an iterable.
        sample_rate: Sample rate in Hz.
    """

    def __init__(self, function: StreamFunction, sample_rate: Optional[float] = None):
        super().__init__(sample_rate, display_name="custom filter")
        self._function = function

    @property
    def function(self) -> StreamFunction:
        return self._function

    @function.setter
    def function(self, value: StreamFunction) -> None:
        self._set_parameter("_function", value)

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return self._function(samples)


class CustomFiniteFilter(CustomFilter, FiniteFilter):
    """:class:`CustomFilter` whose function maps finite input to finite output."""
