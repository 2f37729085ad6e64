"""Signal combinators.

Every binary operation requires both operands to share a sample rate and
dispatches on the signal variants: finite operands produce finite results
where the result has bounded support, everything else produces an
:class:`InfiniteSignal` evaluated lazily window by window.
"""

from __future__ import annotations

from itertools import islice

import numpy as np

from ..dsp.conv import convolve_window, correlate, fft_convolve
from ..dsp.utils import add_full
from ..errors import SampleRateMismatchError
from .base import Signal
from .finite import FiniteSignal
from .infinite import InfiniteSignal


def _check_sample_rates(s1: Signal, s2: Signal) -> None:
    if s1.sample_rate != s2.sample_rate:
        raise SampleRateMismatchError(s1.sample_rate, s2.sample_rate)


def add(s1: Signal, s2: Signal) -> Signal:
    """Sample-wise sum.

    Two finite signals yield a finite signal spanning the union of both
    ranges.

    Raises:
        SampleRateMismatchError: If the sample rates differ.
    """
    _check_sample_rates(s1, s2)
    if isinstance(s1, FiniteSignal) and isinstance(s2, FiniteSignal):
        samples = add_full(s1.signal, s2.signal, s2.start - s1.start)
        return FiniteSignal(samples, s1.sample_rate, start=min(s1.start, s2.start))

    return InfiniteSignal(
        s1.sample_rate,
        range_function=lambda start, length: s1.get_windowed_samples(start, length)
        + s2.get_windowed_samples(start, length),
        display_name=f"{s1.display_name} + {s2.display_name}",
    )


def multiply(s1: Signal, s2: Signal) -> Signal:
    """Sample-wise product.

    Two finite signals yield a finite signal on their overlapping range; a
    finite and any other signal yield a finite signal on the finite
    operand's range.

    Raises:
        SampleRateMismatchError: If the sample rates differ.
    """
    _check_sample_rates(s1, s2)
    if isinstance(s1, FiniteSignal) and isinstance(s2, FiniteSignal):
        start = max(s1.start, s2.start)
        length = max(min(s1.stop, s2.stop) - start, 0)
        samples = s1.get_windowed_samples(start, length) * s2.get_windowed_samples(start, length)
        return FiniteSignal(samples, s1.sample_rate, start=start)

    if isinstance(s2, FiniteSignal):
        s1, s2 = s2, s1
    if isinstance(s1, FiniteSignal):
        samples = s1.signal * s2.get_windowed_samples(s1.start, s1.length)
        return FiniteSignal(samples, s1.sample_rate, start=s1.start)

    return InfiniteSignal(
        s1.sample_rate,
        range_function=lambda start, length: s1.get_windowed_samples(start, length)
        * s2.get_windowed_samples(start, length),
        display_name=f"{s1.display_name} * {s2.display_name}",
    )


def negate(s: Signal) -> Signal:
    """Sample-wise negation, preserving the variant and range."""
    if isinstance(s, FiniteSignal):
        return FiniteSignal(-s.signal, s.sample_rate, start=s.start)
    return InfiniteSignal(
        s.sample_rate,
        range_function=lambda start, length: -s.get_windowed_samples(start, length),
        display_name=f"-{s.display_name}",
    )


def convolve(s1: Signal, s2: Signal) -> Signal:
    """Linear convolution.

    Finite with finite is computed in one FFT product; the result starts at
    ``s1.start + s2.start``. Finite with infinite yields an infinite signal
    computed block-wise per requested window.

    Raises:
        SampleRateMismatchError: If the sample rates differ.
        ValueError: If neither operand is finite.
    """
    _check_sample_rates(s1, s2)
    if isinstance(s1, FiniteSignal) and isinstance(s2, FiniteSignal):
        return FiniteSignal(
            fft_convolve(s1.signal, s2.signal), s1.sample_rate, start=s1.start + s2.start
        )

    if isinstance(s2, FiniteSignal):
        s1, s2 = s2, s1
    if not isinstance(s1, FiniteSignal):
        raise ValueError("At least one operand of a convolution must be finite")

    kernel = s1.signal
    kernel_start = s1.start
    source = s2.get_windowed_samples
    return InfiniteSignal(
        s1.sample_rate,
        range_function=lambda start, length: convolve_window(
            kernel, kernel_start, source, start, length
        ),
        display_name=f"{s1.display_name} * {s2.display_name}",
    )


def cross_correlate(s1: FiniteSignal, s2: FiniteSignal) -> FiniteSignal:
    """Cross-correlation ``r[lag] = sum_t s1[t] s2[t - lag]`` of two finite signals.

    Raises:
        SampleRateMismatchError: If the sample rates differ.
    """
    _check_sample_rates(s1, s2)
    return FiniteSignal(
        correlate(s1.signal, s2.signal), s1.sample_rate, start=s1.start - (s2.stop - 1)
    )


def reverse(s: Signal) -> Signal:
    """Time reversal ``t -> -t``."""
    if isinstance(s, FiniteSignal):
        return FiniteSignal(s.signal[::-1], s.sample_rate, start=-(s.stop - 1))
    return InfiniteSignal(
        s.sample_rate,
        range_function=lambda start, length: s.get_windowed_samples(
            -(start + length - 1), length
        )[::-1],
        display_name=f"reversed {s.display_name}",
    )


def circular_shift(s: FiniteSignal, shift: int) -> FiniteSignal:
    """Rotate the samples of a finite signal by ``shift`` within its range."""
    return FiniteSignal(np.roll(s.signal, shift), s.sample_rate, start=s.start)


class _StreamWindow:
    """Random access to an iterator of samples that starts at ``start``.

    Every sample pulled from the iterator is kept, so any earlier window can
    be served again; memory grows with the furthest sample requested. The
    iterator is not restarted because the filter that feeds it may have
    changed since.
    """

    def __init__(self, iterator, start: int):
        self._iterator = iterator
        self._start = start
        self._buffer = np.zeros(0, dtype=float)

    def __call__(self, start: int, length: int) -> np.ndarray:
        out = np.zeros(length, dtype=float)
        needed = start + length - self._start
        if needed > len(self._buffer):
            more = np.fromiter(
                islice(self._iterator, needed - len(self._buffer)), dtype=float
            )
            self._buffer = np.concatenate([self._buffer, more])
        lo = max(start - self._start, 0)
        hi = min(needed, len(self._buffer))
        if hi > lo:
            out[lo - (start - self._start) : hi - (start - self._start)] = self._buffer[lo:hi]
        return out


def process(s: Signal, filt) -> Signal:
    """Run a finite signal through a filter.

    A filter without effect returns ``s`` unchanged. FIR filters produce a
    finite signal; filters with an infinite impulse response produce an
    infinite signal whose samples before ``s.start`` are zero.

    The infinite result buffers the filter output up to the furthest sample
    requested so far; reading a window far ahead keeps everything before it
    in memory. Its samples use the filter parameters at the time of the call.

    Raises:
        SampleRateMismatchError: If signal and filter sample rates differ.
        ValueError: If ``s`` is not finite.
    """
    if s.sample_rate != filt.sample_rate:
        raise SampleRateMismatchError(s.sample_rate, filt.sample_rate)
    if not filt.has_effect:
        return s
    if not isinstance(s, FiniteSignal):
        raise ValueError("Only finite signals can be processed by a filter")

    if not filt.has_infinite_impulse_response:
        samples = np.fromiter(filt.process(s.signal), dtype=float)
        return FiniteSignal(samples, s.sample_rate, start=s.start)

    return InfiniteSignal(
        s.sample_rate,
        range_function=_StreamWindow(iter(filt.process(s.signal)), s.start),
        display_name=f"{s.display_name} ({filt.display_name})",
    )
