"""FIR filter design using the window method.

The ideal (sinc) impulse response is centred at ``length // 2`` and shaped
by a symmetric window from :mod:`dspcore.dsp.windows`.
"""

import numpy as np

from .iir import PassType
from .windows import WindowType, symmetric_window


def fir_window_design(
    length: int,
    fc: float,
    sample_rate: float,
    pass_type: PassType = PassType.LOWPASS,
    window_type: WindowType = WindowType.HANN,
) -> np.ndarray:
    """Design a lowpass or highpass FIR filter by windowing an ideal sinc.

    Lowpass: ``h[n] = w * sinc(w * (n - length // 2))`` with
    ``w = 2 * fc / sample_rate``. Highpass is the unit impulse at the centre
    minus the lowpass response. The result is multiplied by the window.

    Args:
        length: Number of taps (must be positive).
        fc: Cutoff frequency in Hz (must be positive).
        sample_rate: Sample rate in Hz.
        pass_type: LOWPASS or HIGHPASS.
        window_type: Window shape (default: Hann).

    Returns:
        Filter taps of length ``length``.

    Raises:
        ValueError: If ``length`` or ``fc`` is not positive.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if fc <= 0:
        raise ValueError(f"Invalid cutoff frequency: {fc}")

    center = length // 2
    n = np.arange(length, dtype=float) - center
    w = 2.0 * fc / sample_rate
    h = w * np.sinc(w * n)

    if PassType(pass_type) is PassType.HIGHPASS:
        h = -h
        h[center] += 1.0

    return h * symmetric_window(window_type, length)
