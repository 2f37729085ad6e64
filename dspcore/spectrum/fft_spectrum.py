"""Half spectra of real signals with lazy time/frequency duality."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..dsp.fft import infer_signal_length, real_forward_transform, real_inverse_transform
from ..dsp.utils import check_1d_array, padded_range
from ..errors import LengthMismatchError
from ..logging import get_logger
from ..series import FftSeries
from .spectrum import Spectrum

logger = get_logger(__name__)


class FftSpectrum(Spectrum):
    """Hermitian half spectrum of an ``n``-point real signal.

    The time-domain representation is circular: sample ``k`` belongs to time
    index ``k`` (mod ``n``). It is computed from the spectrum on first request
    and then cached; a spectrum built from a time signal caches that signal
    immediately.

    Args:
        frequencies: FftSeries describing sample rate and transform length.
        values: ``frequencies.n // 2 + 1`` complex bins.
    """

    def __init__(self, frequencies: FftSeries, values):
        if not isinstance(frequencies, FftSeries):
            raise TypeError(f"Expected FftSeries, got {type(frequencies).__name__}")
        super().__init__(frequencies, values)
        self._time_signal: Optional[np.ndarray] = None

    @classmethod
    def from_time_signal(
        cls,
        samples,
        sample_rate: float,
        fft_length: Optional[int] = None,
        start: int = 0,
    ) -> "FftSpectrum":
        """Transform a real signal whose first sample sits at time ``start``.

        The signal is zero-padded (or truncated) to ``fft_length`` and
        circularly shifted by ``start`` so that the phase refers to time zero.

        Args:
            samples: Real time-domain samples.
            sample_rate: Sample rate in Hz.
            fft_length: Transform length (default: ``len(samples)``).
            start: Time index of ``samples[0]``.

        Returns:
            FftSpectrum with ``fft_length // 2 + 1`` bins.
        """
        x = check_1d_array(samples, finite=False)
        if fft_length is None:
            fft_length = len(x)
        circular = np.roll(padded_range(x, 0, fft_length), start)
        spectrum = cls(FftSeries(sample_rate, fft_length), real_forward_transform(circular))
        circular.flags.writeable = False
        spectrum._time_signal = circular
        return spectrum

    @property
    def n(self) -> int:
        """Transform length of the frequency axis."""
        return self.frequencies.n

    @property
    def sample_rate(self) -> float:
        return self.frequencies.sample_rate

    @property
    def time_length(self) -> int:
        """Length of the time-domain signal returned by :meth:`get_time_domain_signal`.

        Known exactly once the time signal is cached; otherwise inferred from
        the parity of the last bin without transforming.
        """
        if self._time_signal is not None:
            return len(self._time_signal)
        return infer_signal_length(self.values)

    def get_time_domain_signal(self) -> np.ndarray:
        """Circular time-domain signal (computed once).

        The length is inferred from the half spectrum: a real last bin means an
        even length ``2 * (m - 1)``, otherwise the length is odd (``2 * m - 1``).
        A spectrum built with :meth:`from_time_signal` keeps its original
        samples instead.
        """
        if self._time_signal is None:
            logger.debug("Inverse transform of %d bins", len(self))
            signal = real_inverse_transform(self.values)
            signal.flags.writeable = False
            self._time_signal = signal
        return self._time_signal

    def multiply(self, other: "FftSpectrum") -> "FftSpectrum":
        """Bin-wise product with another spectrum on the same axis.

        Corresponds to circular convolution of the time signals.

        Raises:
            ValueError: If the frequency axes differ.
        """
        if self.frequencies != other.frequencies:
            if len(self) != len(other):
                raise LengthMismatchError(len(self), len(other), "spectrum")
            raise ValueError("Spectra must share the same FFT frequency axis")
        return FftSpectrum(self.frequencies, self.values * other.values)
