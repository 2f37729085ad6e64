"""IIR filter design formulas and difference-equation filtering.

Biquad coefficients follow R. Bristow-Johnson's "Audio EQ Cookbook"
(bilinear transform of analog second-order prototypes). Butterworth
filters of arbitrary order are realised as a cascade of an optional
first-order section and biquads with the Butterworth pole Q values.

References:
    - R. Bristow-Johnson, "Cookbook formulae for audio EQ biquad filter
      coefficients".
    - Oppenheim & Schafer, "Discrete-Time Signal Processing", Ch. 6.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import chain, repeat
from typing import Iterable, Iterator, Tuple

import numpy as np

from .utils import check_1d_array


class BiquadType(Enum):
    """Second-order section responses."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    PEAKING = "peaking"
    BANDPASS = "bandpass"
    NOTCH = "notch"
    LOWSHELF = "lowshelf"
    HIGHSHELF = "highshelf"
    ALLPASS = "allpass"

    @property
    def uses_gain(self) -> bool:
        """Whether the response depends on a gain parameter."""
        return self in (BiquadType.PEAKING, BiquadType.LOWSHELF, BiquadType.HIGHSHELF)


class PassType(Enum):
    """Lowpass/highpass selector for Butterworth and FIR designs."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"


def biquad_coefficients(
    biquad_type: BiquadType,
    fc: float,
    q: float,
    sample_rate: float,
    gain_db: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute unnormalised biquad coefficients.

    Args:
        biquad_type: Response type.
        fc: Centre/corner frequency in Hz.
        q: Quality factor.
        sample_rate: Sample rate in Hz.
        gain_db: Gain in dB (used by peaking and shelving types only).

    Returns:
        Tuple ``(b, a)`` of length-3 arrays; ``a[0]`` is not normalised to 1.
    """
    biquad_type = BiquadType(biquad_type)
    amp = 10.0 ** (gain_db / 40.0)
    w0 = 2.0 * np.pi * fc / sample_rate
    cos_w0 = np.cos(w0)
    alpha = np.sin(w0) / (2.0 * q)

    if biquad_type is BiquadType.LOWPASS:
        b = [(1.0 - cos_w0) / 2.0, 1.0 - cos_w0, (1.0 - cos_w0) / 2.0]
        a = [1.0 + alpha, -2.0 * cos_w0, 1.0 - alpha]
    elif biquad_type is BiquadType.HIGHPASS:
        b = [(1.0 + cos_w0) / 2.0, -(1.0 + cos_w0), (1.0 + cos_w0) / 2.0]
        a = [1.0 + alpha, -2.0 * cos_w0, 1.0 - alpha]
    elif biquad_type is BiquadType.PEAKING:
        b = [1.0 + alpha * amp, -2.0 * cos_w0, 1.0 - alpha * amp]
        a = [1.0 + alpha / amp, -2.0 * cos_w0, 1.0 - alpha / amp]
    elif biquad_type is BiquadType.BANDPASS:
        b = [alpha, 0.0, -alpha]
        a = [1.0 + alpha, -2.0 * cos_w0, 1.0 - alpha]
    elif biquad_type is BiquadType.NOTCH:
        b = [1.0, -2.0 * cos_w0, 1.0]
        a = [1.0 + alpha, -2.0 * cos_w0, 1.0 - alpha]
    elif biquad_type is BiquadType.ALLPASS:
        b = [1.0 - alpha, -2.0 * cos_w0, 1.0 + alpha]
        a = [1.0 + alpha, -2.0 * cos_w0, 1.0 - alpha]
    elif biquad_type is BiquadType.LOWSHELF:
        sq = 2.0 * np.sqrt(amp) * alpha
        b = [
            amp * ((amp + 1.0) - (amp - 1.0) * cos_w0 + sq),
            2.0 * amp * ((amp - 1.0) - (amp + 1.0) * cos_w0),
            amp * ((amp + 1.0) - (amp - 1.0) * cos_w0 - sq),
        ]
        a = [
            (amp + 1.0) + (amp - 1.0) * cos_w0 + sq,
            -2.0 * ((amp - 1.0) + (amp + 1.0) * cos_w0),
            (amp + 1.0) + (amp - 1.0) * cos_w0 - sq,
        ]
    else:  # HIGHSHELF
        sq = 2.0 * np.sqrt(amp) * alpha
        b = [
            amp * ((amp + 1.0) + (amp - 1.0) * cos_w0 + sq),
            -2.0 * amp * ((amp - 1.0) + (amp + 1.0) * cos_w0),
            amp * ((amp + 1.0) + (amp - 1.0) * cos_w0 - sq),
        ]
        a = [
            (amp + 1.0) - (amp - 1.0) * cos_w0 + sq,
            2.0 * ((amp - 1.0) - (amp + 1.0) * cos_w0),
            (amp + 1.0) - (amp - 1.0) * cos_w0 - sq,
        ]

    return np.array(b, dtype=float), np.array(a, dtype=float)


def first_order_butterworth(
    pass_type: PassType, fc: float, sample_rate: float
) -> Tuple[np.ndarray, np.ndarray]:
    """First-order Butterworth section used for odd filter orders.

    Args:
        pass_type: LOWPASS or HIGHPASS.
        fc: Corner frequency in Hz.
        sample_rate: Sample rate in Hz.

    Returns:
        Tuple ``(b, a)`` of length-2 arrays (unnormalised).
    """
    w0 = 2.0 * np.pi * fc / sample_rate
    cos_w0, sin_w0 = np.cos(w0), np.sin(w0)
    a = np.array([cos_w0 - sin_w0 - 1.0, cos_w0 + sin_w0 - 1.0])
    if PassType(pass_type) is PassType.LOWPASS:
        b = np.array([cos_w0 - 1.0, cos_w0 - 1.0])
    else:
        b = np.array([-sin_w0, sin_w0])
    return b, a


def butterworth_q_values(order: int) -> np.ndarray:
    """Q factors of the ``order // 2`` biquads of a Butterworth cascade.

    Args:
        order: Filter order (positive).

    Returns:
        Array of Q values, one per conjugate pole pair.
    """
    if order < 1:
        raise ValueError(f"Filter order must be >= 1, got {order}")
    k = np.arange(1, order // 2 + 1, dtype=float)
    return 1.0 / (-2.0 * np.cos((2.0 * k + order - 1.0) / (2.0 * order) * np.pi))


def normalize_coefficients(b, a) -> Tuple[np.ndarray, np.ndarray]:
    """Pad ``b`` and ``a`` to equal length and divide both by ``a[0]``.

    Raises:
        ValueError: If ``a`` is empty or ``a[0] == 0``.
    """
    b = check_1d_array(b, finite=False)
    a = check_1d_array(a, finite=False)
    n = max(len(a), len(b))
    if len(a) == 0 or a[0] == 0:
        raise ValueError("Denominator leading coefficient a[0] cannot be 0")
    a = np.pad(a, (0, n - len(a)))
    b = np.pad(b, (0, n - len(b)))
    return b / a[0], a / a[0]


def iir_filter(samples: Iterable[float], b, a) -> Iterator[float]:
    """Apply a difference equation to a sample stream.

    Computes ``y[n] = sum_i b[i] x[n-i] - sum_{j>=1} a[j] y[n-j]`` (after
    normalising by ``a[0]``) with zero initial state. After the input is
    exhausted the filter keeps running on zero input, so the output is
    unbounded and carries the decaying tail of the response.

    Args:
        samples: Input samples (any iterable).
        b: Numerator coefficients.
        a: Denominator coefficients.

    Yields:
        Output samples, indefinitely.

    Raises:
        ValueError: If ``a[0] == 0``.
    """
    b, a = normalize_coefficients(b, a)
    order = len(a) - 1
    x_hist: deque = deque([0.0] * order, maxlen=order)
    y_hist: deque = deque([0.0] * order, maxlen=order)
    b_tail = b[1:]
    a_tail = a[1:]

    for x in chain(samples, repeat(0.0)):
        y = b[0] * x
        for i in range(order):
            y += b_tail[i] * x_hist[i] - a_tail[i] * y_hist[i]
        if order:
            x_hist.appendleft(x)
            y_hist.appendleft(y)
        yield y


def iir_frequency_response(b, a, frequencies, sample_rate: float) -> np.ndarray:
    """Evaluate ``H(e^{jw}) = B(e^{jw}) / A(e^{jw})`` at given frequencies.

    Args:
        b: Numerator coefficients.
        a: Denominator coefficients.
        frequencies: Frequencies in Hz.
        sample_rate: Sample rate in Hz.

    Returns:
        Complex response at each frequency.
    """
    b = check_1d_array(b)
    a = check_1d_array(a)
    w = 2.0 * np.pi * np.asarray(frequencies, dtype=float) / sample_rate
    z_inv = np.exp(-1j * w)
    num = np.polyval(b[::-1], z_inv)
    den = np.polyval(a[::-1], z_inv)
    return num / den
