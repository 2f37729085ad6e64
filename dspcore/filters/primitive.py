"""Elementary LTI filters: gain, inversion, delay, identity and zero."""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterable, Optional

from .base import FiniteFilter


class GainFilter(FiniteFilter):
    """Multiply every sample by a linear ``gain``; no effect when ``gain == 1``."""

    def __init__(self, sample_rate: Optional[float] = None, gain: float = 1.0):
        super().__init__(sample_rate, display_name="gain")
        self._gain = float(gain)

    @property
    def gain(self) -> float:
        return self._gain

    @gain.setter
    def gain(self, value: float) -> None:
        self._set_parameter("_gain", float(value))

    @property
    def has_effect_override(self) -> bool:
        return self._gain != 1.0

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        gain = self._gain
        return (gain * x for x in samples)


class InvertFilter(FiniteFilter):
    """Negate every sample."""

    def __init__(self, sample_rate: Optional[float] = None):
        super().__init__(sample_rate, display_name="invert")

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return (-x for x in samples)


class DelayFilter(FiniteFilter):
    """Delay the signal by a whole number of samples.

    The delay can be set in seconds (``delay``) or samples
    (``sample_delay``); the sample count is ``round(delay * sample_rate)``.
    Positive delays prepend zeros, negative delays drop leading samples.
    """

    def __init__(self, sample_rate: Optional[float] = None, delay: float = 0.0):
        super().__init__(sample_rate, display_name="delay")
        self._sample_delay = int(round(delay * self.sample_rate))

    @property
    def sample_delay(self) -> int:
        return self._sample_delay

    @sample_delay.setter
    def sample_delay(self, value: int) -> None:
        self._set_parameter("_sample_delay", int(value))

    @property
    def delay(self) -> float:
        """Delay in seconds."""
        return self._sample_delay / self.sample_rate

    @delay.setter
    def delay(self, value: float) -> None:
        self._set_parameter("_sample_delay", int(round(value * self.sample_rate)))

    @property
    def has_effect_override(self) -> bool:
        return self._sample_delay != 0

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        if self._sample_delay > 0:
            return chain(repeat(0.0, self._sample_delay), samples)
        return islice(samples, -self._sample_delay, None)


class DiracFilter(FiniteFilter):
    """Identity filter (unit impulse response); never has an effect."""

    def __init__(self, sample_rate: Optional[float] = None):
        super().__init__(sample_rate, display_name="dirac")

    @property
    def has_effect_override(self) -> bool:
        return False

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return samples


class ZeroFilter(FiniteFilter):
    """Replace every sample by zero."""

    def __init__(self, sample_rate: Optional[float] = None):
        super().__init__(sample_rate, display_name="zero")

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return (0.0 for _ in samples)
