"""Digital signal processing primitives.

This module provides the array-level building blocks used by signals,
spectra and filters:
- Real FFT transform service with length inference
- FFT convolution, windowed convolution of unbounded signals, streaming
  overlap-add
- Biquad (Audio EQ Cookbook) and Butterworth design formulas
- Difference-equation (IIR) filtering on sample streams
- Window functions in symmetric/causal/anti-causal placement
- Frequency-domain helpers (dB conversion, phase wrapping, group delay)
"""

from .conv import convolve_window, correlate, fft_convolve, overlap_add
from .fft import (
    fft_frequencies,
    infer_signal_length,
    real_forward_transform,
    real_inverse_transform,
)
from .fir import fir_window_design
from .frequency import (
    apply_delay,
    db_to_linear,
    group_delay,
    linear_to_db,
    unwrap_phase,
    wrap_phase,
)
from .iir import (
    BiquadType,
    PassType,
    biquad_coefficients,
    butterworth_q_values,
    first_order_butterworth,
    iir_filter,
    iir_frequency_response,
    normalize_coefficients,
)
from .utils import add_full, check_1d_array, next_pow2, padded_range, take
from .windows import (
    WindowMode,
    WindowType,
    causal_half_window,
    create_window,
    default_window_start,
    get_window_function,
    get_window_value,
    get_window_values,
    symmetric_window,
)

__all__ = [
    # Transform service
    "real_forward_transform",
    "real_inverse_transform",
    "infer_signal_length",
    "fft_frequencies",
    # Convolution
    "fft_convolve",
    "correlate",
    "convolve_window",
    "overlap_add",
    # FIR
    "fir_window_design",
    # IIR
    "BiquadType",
    "PassType",
    "biquad_coefficients",
    "first_order_butterworth",
    "butterworth_q_values",
    "normalize_coefficients",
    "iir_filter",
    "iir_frequency_response",
    # Windows
    "WindowType",
    "WindowMode",
    "get_window_function",
    "get_window_value",
    "get_window_values",
    "causal_half_window",
    "create_window",
    "default_window_start",
    "symmetric_window",
    # Frequency domain
    "db_to_linear",
    "linear_to_db",
    "wrap_phase",
    "unwrap_phase",
    "group_delay",
    "apply_delay",
    # Utilities
    "check_1d_array",
    "next_pow2",
    "padded_range",
    "add_full",
    "take",
]
