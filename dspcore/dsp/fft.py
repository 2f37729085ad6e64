"""Real-valued FFT transform service.

Thin wrapper around :mod:`numpy.fft` exposing the Hermitian half-spectrum
(``N // 2 + 1`` bins) of real signals. The inverse transform infers the
time-domain length from the half spectrum when it is not given.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..config import get_config
from .utils import check_1d_array


def real_forward_transform(samples, n: Optional[int] = None) -> np.ndarray:
    """Compute the half spectrum of a real signal.

    Args:
        samples: Real time-domain samples.
        n: Transform length. The input is zero-padded or truncated to ``n``
            (default: ``len(samples)``).

    Returns:
        Complex array of ``n // 2 + 1`` bins.

    Raises:
        ValueError: If ``n`` is not positive.
    """
    x = check_1d_array(samples, finite=False)
    if n is None:
        n = len(x)
    if n <= 0:
        raise ValueError(f"Transform length must be positive, got {n}")
    return np.fft.rfft(x, n=n)


def infer_signal_length(half_spectrum, tolerance: Optional[float] = None) -> int:
    """Infer the time-domain length that produced a half spectrum.

    A half spectrum of ``m`` bins stems from an even-length signal
    (``2 * (m - 1)``) when its last (Nyquist) bin is real, and from an
    odd-length signal (``2 * m - 1``) otherwise. The last bin counts as real
    when ``|imag| <= tolerance * max(1, max|X|)``.

    Args:
        half_spectrum: Complex half spectrum with at least one bin.
        tolerance: Relative tolerance (default: ``DspConfig.parity_tolerance``).

    Returns:
        Inferred time-domain length.
    """
    values = np.asarray(half_spectrum, dtype=complex)
    m = len(values)
    if m == 0:
        raise ValueError("Half spectrum must contain at least one bin")
    if m == 1:
        return 1
    if tolerance is None:
        tolerance = get_config().parity_tolerance
    scale = max(1.0, float(np.max(np.abs(values))))
    if abs(values[-1].imag) <= tolerance * scale:
        return 2 * (m - 1)
    return 2 * m - 1


def real_inverse_transform(half_spectrum, n: Optional[int] = None) -> np.ndarray:
    """Reconstruct a real signal from its half spectrum.

    Args:
        half_spectrum: Complex half spectrum.
        n: Time-domain length. Inferred via :func:`infer_signal_length` when
            omitted.

    Returns:
        Real array of ``n`` samples.
    """
    values = np.asarray(half_spectrum, dtype=complex)
    if n is None:
        n = infer_signal_length(values)
    if n <= 0:
        raise ValueError(f"Transform length must be positive, got {n}")
    return np.fft.irfft(values, n=n)


def fft_frequencies(sample_rate: float, n: int) -> np.ndarray:
    """Bin frequencies of an ``n``-point real FFT.

    Args:
        sample_rate: Sample rate in Hz.
        n: Transform length.

    Returns:
        ``n // 2 + 1`` frequencies from 0 up to (at most) ``sample_rate / 2``.
    """
    if n <= 0:
        raise ValueError(f"Transform length must be positive, got {n}")
    return np.fft.rfftfreq(n, d=1.0 / sample_rate)
