"""Concrete signal generators."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..dsp.windows import WindowMode, WindowType, create_window, default_window_start
from ..series import CustomSeries
from ..spectrum import Spectrum
from .finite import FiniteSignal
from .infinite import InfiniteSignal, SyntheticSignal


def _check_frequency(frequency: float, sample_rate: float, name: str = "frequency") -> None:
    if frequency < 0 or frequency > sample_rate / 2:
        raise ValueError(
            f"{name} must lie in [0, sample_rate / 2] = [0, {sample_rate / 2}], got {frequency}"
        )


def _brickwall(fc: float, sample_rate: float, below: float, above: float) -> Spectrum:
    # Step at fc; the duplicated point keeps the frequency axis ascending.
    return Spectrum(
        CustomSeries([0.0, fc, fc, sample_rate / 2]), [below, below, above, above]
    )


class Dirac(FiniteSignal):
    """Unit impulse at time 0, scaled by ``gain``."""

    def __init__(self, sample_rate: float, gain: float = 1.0):
        super().__init__([gain], sample_rate, display_name=f"dirac, gain = {gain}")
        self.gain = gain


class IdealLowpass(SyntheticSignal):
    """Impulse response of the ideal lowpass with cutoff ``fc``.

    ``h[t] = (2 fc / fs) * sinc(2 fc t / fs)``; the spectrum is 1 below ``fc``
    and 0 above.
    """

    def __init__(self, sample_rate: float, fc: float):
        _check_frequency(fc, sample_rate, "fc")
        w = 2.0 * fc / sample_rate
        spectrum = _brickwall(fc, sample_rate, 1.0, 0.0)
        super().__init__(
            sample_rate,
            spectrum,
            range_function=lambda start, length: w * np.sinc(w * np.arange(start, start + length)),
            display_name=f"ideal lowpass, fc = {fc}",
        )
        self.fc = fc


class IdealHighpass(SyntheticSignal):
    """Impulse response of the ideal highpass: unit impulse minus the ideal lowpass."""

    def __init__(self, sample_rate: float, fc: float):
        _check_frequency(fc, sample_rate, "fc")
        w = 2.0 * fc / sample_rate

        def samples(start: int, length: int) -> np.ndarray:
            t = np.arange(start, start + length)
            return (t == 0).astype(float) - w * np.sinc(w * t)

        spectrum = _brickwall(fc, sample_rate, 0.0, 1.0)
        super().__init__(
            sample_rate, spectrum, range_function=samples, display_name=f"ideal highpass, fc = {fc}"
        )
        self.fc = fc


class Sinc(SyntheticSignal):
    """``sinc(f t / fs)``, band-limited to ``f / 2``."""

    def __init__(self, sample_rate: float, frequency: float):
        _check_frequency(frequency, sample_rate)
        if frequency == 0:
            raise ValueError("frequency must be positive")
        ratio = frequency / sample_rate
        level = 1.0 / (2.0 * frequency)
        spectrum = Spectrum(
            CustomSeries([0.0, frequency, frequency, sample_rate / 2]), [level, level, 0, 0]
        )
        super().__init__(
            sample_rate,
            spectrum,
            range_function=lambda start, length: np.sinc(ratio * np.arange(start, start + length)),
            display_name=f"sinc, f = {frequency}",
        )
        self.frequency = frequency


class Sinus(SyntheticSignal):
    """``sin(2 pi f t / fs + phase)``; the spectrum is a line at ``f``."""

    def __init__(self, sample_rate: float, frequency: float, phase: float = 0.0):
        _check_frequency(frequency, sample_rate)
        omega = 2.0 * np.pi * frequency / sample_rate
        spectrum = Spectrum(
            CustomSeries([0.0, frequency, frequency, frequency, sample_rate / 2]),
            [0, 0, np.inf, 0, 0],
        )
        super().__init__(
            sample_rate,
            spectrum,
            range_function=lambda start, length: np.sin(
                omega * np.arange(start, start + length) + phase
            ),
            display_name=f"sinus, f = {frequency}",
        )
        self.frequency = frequency
        self.phase = phase


class WhiteNoise(InfiniteSignal):
    """Gaussian white noise.

    Generated samples are cached, so overlapping windows always see the
    same values. The cache grows in both directions as needed.

    Args:
        sample_rate: Sample rate in Hz.
        mean: Mean value.
        variance: Variance (non-negative).
        seed: Seed for the random generator.
    """

    def __init__(
        self,
        sample_rate: float,
        mean: float = 0.0,
        variance: float = 1.0,
        seed: Optional[int] = None,
    ):
        if variance < 0:
            raise ValueError(f"variance must be non-negative, got {variance}")
        super().__init__(
            sample_rate,
            range_function=self._noise,
            display_name=f"white noise, mean = {mean}, variance = {variance}",
        )
        self.mean = mean
        self.variance = variance
        self.sigma = float(np.sqrt(variance))
        self._rng = np.random.default_rng(seed)
        self._cache = np.zeros(0, dtype=float)
        self._cache_start = 0

    def _generate(self, n: int) -> np.ndarray:
        return self._rng.normal(self.mean, self.sigma, size=n)

    def _noise(self, start: int, length: int) -> np.ndarray:
        if length == 0:
            return np.zeros(0, dtype=float)
        if len(self._cache) == 0:
            self._cache = self._generate(length)
            self._cache_start = start
        else:
            if start < self._cache_start:
                self._cache = np.concatenate(
                    [self._generate(self._cache_start - start), self._cache]
                )
                self._cache_start = start
            cache_stop = self._cache_start + len(self._cache)
            if start + length > cache_stop:
                self._cache = np.concatenate(
                    [self._cache, self._generate(start + length - cache_stop)]
                )
        offset = start - self._cache_start
        return self._cache[offset : offset + length].copy()


class LogSweep(FiniteSignal):
    """Exponential sine sweep from ``f_from`` to ``f_to`` over ``length_s`` seconds.

    A descending sweep is the time reverse of the ascending one.
    """

    def __init__(self, f_from: float, f_to: float, length_s: float, sample_rate: float):
        if length_s <= 0:
            raise ValueError(f"length_s must be positive, got {length_s}")
        if f_from <= 0 or f_to <= 0:
            raise ValueError("Sweep frequencies must be positive")
        if f_from == f_to:
            raise ValueError("f_from and f_to cannot be the same")

        steps = int(length_s * sample_rate)
        w1 = 2.0 * np.pi * min(f_from, f_to)
        w2 = 2.0 * np.pi * max(f_from, f_to)
        rate = np.log(w2 / w1) / length_s
        t = np.arange(steps) / sample_rate
        sweep = np.sin(w1 / rate * (np.exp(t * rate) - 1.0))
        if f_to < f_from:
            sweep = sweep[::-1]

        super().__init__(
            sweep, sample_rate, display_name=f"log sweep, {f_from} Hz - {f_to} Hz"
        )
        self.f_from = f_from
        self.f_to = f_to
        self.duration = length_s


class WindowSignal(FiniteSignal):
    """A window function as a finite signal.

    Args:
        window_type: Window shape.
        length: Window length in samples.
        sample_rate: Sample rate in Hz.
        mode: Placement relative to time zero.
        start: First time index (default depends on ``mode``).
        ratio: Fraction of the window that is shaped.
    """

    def __init__(
        self,
        window_type: WindowType,
        length: int,
        sample_rate: float,
        mode: WindowMode = WindowMode.SYMMETRIC,
        start: Optional[int] = None,
        ratio: float = 1.0,
    ):
        if start is None:
            start = default_window_start(mode, length)
        super().__init__(
            create_window(window_type, mode, length, ratio),
            sample_rate,
            start=start,
            display_name=f"{WindowType(window_type).value} {WindowMode(mode).value} window, length = {length}",
        )
        self.window_type = WindowType(window_type)
        self.mode = WindowMode(mode)
