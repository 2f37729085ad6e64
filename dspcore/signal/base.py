"""Signal base class.

A signal is a sampled function of an integer time index at a fixed sample
rate. Concrete variants differ in how samples are produced:

- :class:`~dspcore.signal.finite.FiniteSignal`: explicit samples on
  ``[start, stop)``, zero elsewhere;
- :class:`~dspcore.signal.infinite.InfiniteSignal`: an unbounded sampling
  function;
- :class:`~dspcore.signal.infinite.SyntheticSignal`: an infinite signal with
  an analytically known spectrum.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .finite import FiniteSignal


class Signal(ABC):
    """Abstract sampled signal.

    Args:
        sample_rate: Sample rate in Hz (positive, immutable).
        display_name: Human-readable label.
    """

    def __init__(self, sample_rate: float, display_name: str = "signal"):
        if not sample_rate > 0:
            raise ValueError(f"sample_rate must be positive, got {sample_rate}")
        self._sample_rate = float(sample_rate)
        self.display_name = display_name

    @property
    def sample_rate(self) -> float:
        """Sample rate in Hz."""
        return self._sample_rate

    @property
    def is_finite(self) -> bool:
        return False

    @abstractmethod
    def get_windowed_samples(self, start: int, length: int) -> np.ndarray:
        """Return exactly ``length`` samples beginning at time index ``start``."""

    def get_windowed_signal(self, start: int, length: int) -> "FiniteSignal":
        """Excerpt ``[start, start + length)`` as a finite signal.

        Raises:
            ValueError: If ``length`` is negative.
        """
        from .finite import FiniteSignal

        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return FiniteSignal(
            self.get_windowed_samples(start, length), self.sample_rate, start=start
        )

    def __add__(self, other: "Signal") -> "Signal":
        from .operations import add

        return add(self, other)

    def __mul__(self, other: "Signal") -> "Signal":
        from .operations import multiply

        return multiply(self, other)

    def __neg__(self) -> "Signal":
        from .operations import negate

        return negate(self)

    def __sub__(self, other: "Signal") -> "Signal":
        from .operations import add, negate

        return add(self, negate(other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.display_name!r}, sample_rate={self.sample_rate})"
