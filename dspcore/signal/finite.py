"""Finite signals with lazy time/frequency duality."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..config import get_config
from ..dsp.utils import check_1d_array, padded_range
from ..logging import get_logger
from ..series import FftSeries
from ..spectrum import FftSpectrum
from .base import Signal

logger = get_logger(__name__)


class FiniteSignal(Signal):
    """Samples on ``[start, start + length)``, zero outside.

    A finite signal is built either from time-domain samples or from an
    :class:`FftSpectrum`; the other representation is derived on first
    access and cached.

    Args:
        samples: Time-domain samples.
        sample_rate: Sample rate in Hz.
        start: Time index of the first sample.
        display_name: Human-readable label.
    """

    def __init__(
        self,
        samples,
        sample_rate: float,
        start: int = 0,
        display_name: str = "finite signal",
    ):
        super().__init__(sample_rate, display_name)
        signal = check_1d_array(samples, finite=False).copy()
        signal.flags.writeable = False
        self._signal: Optional[np.ndarray] = signal
        self._spectrum: Optional[FftSpectrum] = None
        self.start = int(start)
        self.length = len(signal)
        self.min_fft_length = get_config().min_fft_length

    @classmethod
    def from_spectrum(cls, spectrum: FftSpectrum, start: int = 0) -> "FiniteSignal":
        """Finite signal whose samples are the inverse transform of ``spectrum``.

        ``start`` undoes the circular shift applied by
        :meth:`FftSpectrum.from_time_signal`.
        """
        signal = cls.__new__(cls)
        Signal.__init__(signal, spectrum.sample_rate, "finite signal")
        signal._signal = None
        signal._spectrum = spectrum
        signal.start = int(start)
        signal.length = spectrum.time_length
        signal.min_fft_length = get_config().min_fft_length
        return signal

    @property
    def is_finite(self) -> bool:
        return True

    @property
    def stop(self) -> int:
        """Time index one past the last sample."""
        return self.start + self.length

    @property
    def signal(self) -> np.ndarray:
        """Read-only time-domain samples."""
        if self._signal is None:
            logger.debug("Deriving %d time samples from spectrum", self.length)
            samples = np.roll(self._spectrum.get_time_domain_signal(), -self.start)
            samples.flags.writeable = False
            self._signal = samples
        return self._signal

    @property
    def spectrum(self) -> FftSpectrum:
        """Spectrum with FFT length ``max(length, min_fft_length)`` (computed once)."""
        if self._spectrum is None:
            fft_length = max(self.length, self.min_fft_length)
            logger.debug("Computing spectrum of %d samples (fft_length=%d)", self.length, fft_length)
            self._spectrum = self.get_spectrum(fft_length)
        return self._spectrum

    @property
    def frequencies(self) -> FftSeries:
        return FftSeries(self.sample_rate, max(self.length, 1))

    def get_spectrum(self, fft_length: int) -> FftSpectrum:
        """Spectrum of this signal at an explicit FFT length (not cached)."""
        return FftSpectrum.from_time_signal(self.signal, self.sample_rate, fft_length, self.start)

    def get_sample(self, time: int) -> float:
        """Sample at ``time``; 0 outside ``[start, stop)``."""
        if time < self.start or time >= self.stop:
            return 0.0
        return float(self.signal[time - self.start])

    def get_windowed_samples(self, start: int, length: int) -> np.ndarray:
        return padded_range(self.signal, start - self.start, length)

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        return iter(self.signal)
