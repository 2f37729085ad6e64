"""Window functions for signal processing.

Window shapes are expressed as functions of a normalised position
``v ∈ [0, 1]`` where ``v = 1`` is the window centre (weight 1) and
``v = 0`` its outer edge. Full windows are assembled from half windows so
that symmetric, causal and anti-causal variants share one definition.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import numpy as np


class WindowType(Enum):
    """Supported window shapes."""

    RECTANGULAR = "rectangular"
    HANN = "hann"
    HAMMING = "hamming"
    TRIANGULAR = "triangular"
    WELCH = "welch"
    BLACKMAN = "blackman"
    BLACKMAN_HARRIS = "blackman_harris"
    KAISER_ALPHA2 = "kaiser_alpha2"
    KAISER_ALPHA3 = "kaiser_alpha3"


class WindowMode(Enum):
    """Placement of a window relative to time zero."""

    SYMMETRIC = "symmetric"
    CAUSAL = "causal"
    ANTI_CAUSAL = "anti_causal"


def _rectangular(v: np.ndarray) -> np.ndarray:
    return np.ones_like(v)


def _hann(v: np.ndarray) -> np.ndarray:
    return 0.5 * (1.0 - np.cos(np.pi * v))


def _hamming(v: np.ndarray) -> np.ndarray:
    return 0.54 - 0.46 * np.cos(np.pi * v)


def _triangular(v: np.ndarray) -> np.ndarray:
    return v


def _welch(v: np.ndarray) -> np.ndarray:
    return 1.0 - (1.0 - v) ** 2


def _blackman(v: np.ndarray) -> np.ndarray:
    return 0.42659 - 0.49656 * np.cos(np.pi * v) + 0.076849 * np.cos(2.0 * np.pi * v)


def _blackman_harris(v: np.ndarray) -> np.ndarray:
    return (
        0.35875
        - 0.48829 * np.cos(np.pi * v)
        + 0.14128 * np.cos(2.0 * np.pi * v)
        - 0.01168 * np.cos(3.0 * np.pi * v)
    )


def _kaiser(alpha: float) -> Callable[[np.ndarray], np.ndarray]:
    def window(v: np.ndarray) -> np.ndarray:
        arg = np.pi * alpha * np.sqrt(np.clip(1.0 - (v - 1.0) ** 2, 0.0, None))
        return np.i0(arg) / np.i0(np.pi * alpha)

    return window


_WINDOW_FUNCTIONS: dict[WindowType, Callable[[np.ndarray], np.ndarray]] = {
    WindowType.RECTANGULAR: _rectangular,
    WindowType.HANN: _hann,
    WindowType.HAMMING: _hamming,
    WindowType.TRIANGULAR: _triangular,
    WindowType.WELCH: _welch,
    WindowType.BLACKMAN: _blackman,
    WindowType.BLACKMAN_HARRIS: _blackman_harris,
    WindowType.KAISER_ALPHA2: _kaiser(2.0),
    WindowType.KAISER_ALPHA3: _kaiser(3.0),
}


def get_window_function(window_type: WindowType) -> Callable[[np.ndarray], np.ndarray]:
    """Return the vectorised shape function for ``window_type``.

    Args:
        window_type: Window shape.

    Returns:
        Callable mapping normalised positions in [0, 1] to weights.

    Raises:
        ValueError: If ``window_type`` is not a known WindowType.
    """
    try:
        return _WINDOW_FUNCTIONS[WindowType(window_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown window type: {window_type!r}") from None


def get_window_values(window_type: WindowType, values) -> np.ndarray:
    """Evaluate a window at normalised positions, clamping outside [0, 1].

    Positions ``<= 0`` map to 0 and positions ``>= 1`` map to 1.

    Args:
        window_type: Window shape.
        values: Array-like of normalised positions.

    Returns:
        Array of window weights, same shape as ``values``.
    """
    func = get_window_function(window_type)
    v = np.asarray(values, dtype=float)
    inner = np.clip(v, 0.0, 1.0)
    out = func(inner)
    out = np.where(v <= 0.0, 0.0, out)
    out = np.where(v >= 1.0, 1.0, out)
    return out


def get_window_value(window_type: WindowType, value: float) -> float:
    """Scalar version of :func:`get_window_values`."""
    return float(get_window_values(window_type, value))


def causal_half_window(window_type: WindowType, length: int) -> np.ndarray:
    """Half window starting at the centre (weight 1) and decaying outwards.

    Args:
        window_type: Window shape.
        length: Number of samples (may be 0).

    Returns:
        Array ``w[i] = f((length - i) / length)`` for ``i = 0..length-1``.
    """
    if length < 0:
        raise ValueError(f"Window length must be non-negative, got {length}")
    if length == 0:
        return np.zeros(0, dtype=float)
    v = np.arange(length, 0, -1, dtype=float) / length
    return get_window_function(window_type)(v)


def anti_causal_half_window(window_type: WindowType, length: int) -> np.ndarray:
    """Half window rising towards the centre; reverse of :func:`causal_half_window`."""
    return causal_half_window(window_type, length)[::-1].copy()


def create_window(
    window_type: WindowType,
    mode: WindowMode,
    length: int,
    ratio: float = 1.0,
) -> np.ndarray:
    """Assemble a full window of ``length`` samples.

    Only ``round(length * ratio)`` samples are shaped by the window function;
    the remaining samples are flat (weight 1).

    Args:
        window_type: Window shape.
        mode: SYMMETRIC (centre in the middle), CAUSAL (flat part first, then
            decaying) or ANTI_CAUSAL (rising, then flat).
        length: Total window length (must be positive).
        ratio: Fraction of the window that is shaped, in [0, 1].

    Returns:
        Window array of length ``length``.

    Raises:
        ValueError: If ``length`` is not positive or ``ratio`` outside [0, 1].
    """
    if length <= 0:
        raise ValueError(f"Window length must be positive, got {length}")
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Window ratio must be in [0, 1], got {ratio}")

    mode = WindowMode(mode)
    shaped = int(round(length * ratio))

    if mode is WindowMode.SYMMETRIC:
        half = causal_half_window(window_type, (shaped >> 1) + 1)
        positive = half[1 : (shaped + 1) >> 1]
        flat = np.ones(max(length - len(half) - len(positive), 0))
        return np.concatenate([half[::-1], flat, positive])[:length]

    if mode is WindowMode.CAUSAL:
        return np.concatenate([np.ones(length - shaped), causal_half_window(window_type, shaped)])

    return np.concatenate([anti_causal_half_window(window_type, shaped), np.ones(length - shaped)])


def default_window_start(mode: WindowMode, length: int) -> int:
    """Time index of the first window sample for the given placement."""
    mode = WindowMode(mode)
    if mode is WindowMode.SYMMETRIC:
        return -(length >> 1)
    if mode is WindowMode.CAUSAL:
        return 0
    return -length


def symmetric_window(window_type: WindowType, length: int) -> np.ndarray:
    """Fully shaped symmetric window, peaking at ``length // 2``."""
    return create_window(window_type, WindowMode.SYMMETRIC, length)
