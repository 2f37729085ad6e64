"""Convolution and correlation operations.

Implements FFT-based convolution of finite arrays, block-wise convolution of
a window of an unbounded signal, and a streaming overlap-add convolver for
lazily produced input.
"""

from itertools import islice
from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from .utils import add_full, check_1d_array, next_pow2


def fft_convolve(x, h, n_fft: Optional[int] = None) -> np.ndarray:
    """FFT-based full linear convolution.

    Both inputs are zero-padded to ``n_fft`` and multiplied in the frequency
    domain; the product is truncated to ``len(x) + len(h) - 1``.

    Args:
        x: First input signal (1D array).
        h: Second input signal (impulse response, 1D array).
        n_fft: FFT size (default: next power-of-two >= len(x) + len(h) - 1).

    Returns:
        Convolved signal (real-valued) of length ``len(x) + len(h) - 1``.

    Raises:
        ValueError: If ``n_fft`` is smaller than the full output length.
    """
    x = check_1d_array(x, finite=False)
    h = check_1d_array(h, finite=False)

    if len(x) == 0 or len(h) == 0:
        return np.zeros(0, dtype=float)

    out_len = len(x) + len(h) - 1
    if n_fft is None:
        n_fft = next_pow2(out_len)
    elif n_fft < out_len:
        raise ValueError(f"n_fft ({n_fft}) must be >= len(x) + len(h) - 1 ({out_len})")

    X = np.fft.rfft(x, n=n_fft)
    H = np.fft.rfft(h, n=n_fft)
    y = np.fft.irfft(X * H, n=n_fft)
    return y[:out_len]


def correlate(x, h, n_fft: Optional[int] = None) -> np.ndarray:
    """Full cross-correlation, computed as convolution with reversed ``h``.

    Args:
        x: First input signal (1D array).
        h: Second input signal (1D array).
        n_fft: Optional FFT size forwarded to :func:`fft_convolve`.

    Returns:
        Cross-correlated signal of length ``len(x) + len(h) - 1``.
    """
    h = check_1d_array(h, finite=False)
    return fft_convolve(x, h[::-1], n_fft=n_fft)


def convolve_window(
    h,
    h_start: int,
    source: Callable[[int, int], np.ndarray],
    start: int,
    length: int,
) -> np.ndarray:
    """One window of the convolution of a finite kernel with an unbounded signal.

    Output sample ``t`` is ``sum_k h[k] * s[t - h_start - k]`` where ``s`` is
    read through ``source(first_index, count)``. The window is computed from
    two FFT products: one against the ``len(h)`` source samples preceding the
    window (its tail carries the history into the window) and one against
    the source samples aligned with the window itself.

    Args:
        h: Finite kernel.
        h_start: Time index of ``h[0]``.
        source: Callable returning ``count`` samples of the unbounded signal
            starting at ``first_index``.
        start: First output time index.
        length: Number of output samples.

    Returns:
        Array of exactly ``length`` samples.
    """
    h = check_1d_array(h, finite=False)
    L = len(h)
    if length <= 0 or L == 0:
        return np.zeros(max(length, 0), dtype=float)

    n_fft = next_pow2(L + max(L, length) - 1)
    H = np.fft.rfft(h, n=n_fft)

    history = np.asarray(source(start - h_start - L, L), dtype=float)
    current = np.asarray(source(start - h_start, length), dtype=float)

    tail = np.fft.irfft(H * np.fft.rfft(history, n=n_fft), n=n_fft)[L : L + min(length, L - 1)]
    body = np.fft.irfft(H * np.fft.rfft(current, n=n_fft), n=n_fft)[:length]

    return add_full(tail, body)[:length]


def overlap_add(
    samples: Iterable[float], h, block_len: Optional[int] = None
) -> Iterator[float]:
    """Stream the full convolution of ``samples`` with ``h`` by overlap-add.

    Input is consumed block by block, so ``samples`` may be an unbounded
    iterator. For finite input the output has ``len(samples) + len(h) - 1``
    samples.

    Args:
        samples: Input samples (any iterable).
        h: Impulse response (1D array).
        block_len: Input block length (default: max(1024, next_pow2(len(h)))).

    Yields:
        Output samples in order.
    """
    h = check_1d_array(h, finite=False)
    L = len(h)
    if L == 0:
        return
    if block_len is None:
        block_len = max(1024, next_pow2(L))
    n_fft = next_pow2(block_len + L - 1)
    H = np.fft.rfft(h, n=n_fft)

    carry = np.zeros(L - 1, dtype=float)
    seen = False
    iterator = iter(samples)
    while True:
        block = np.fromiter(islice(iterator, block_len), dtype=float)
        if len(block) == 0:
            break
        y = np.fft.irfft(np.fft.rfft(block, n=n_fft) * H, n=n_fft)[: len(block) + L - 1]
        y[: L - 1] += carry
        yield from y[: len(block)]
        carry = y[len(block) :]
        seen = True
        if len(block) < block_len:
            break
    if seen:
        yield from carry
