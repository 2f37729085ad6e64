"""Factory for creating filters by type."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import Filter
from .fir import CorrectingFilter, CustomConvolver, FirFilter
from .iir import BiquadFilter, ButterworthFilter, CustomIirFilter
from .nonlinear import DistortionFilter
from .primitive import DelayFilter, DiracFilter, GainFilter, InvertFilter, ZeroFilter


class FilterType(Enum):
    """Filter kinds available through :func:`create_filter`."""

    DISTORTION = "distortion"
    BIQUAD = "biquad"
    BUTTERWORTH = "butterworth"
    CUSTOM_CONVOLVER = "custom_convolver"
    CORRECTING = "correcting"
    DELAY = "delay"
    DIRAC = "dirac"
    FIR = "fir"
    GAIN = "gain"
    IIR = "iir"
    INVERT = "invert"
    ZERO = "zero"


_FILTER_CLASSES = {
    FilterType.DISTORTION: DistortionFilter,
    FilterType.BIQUAD: BiquadFilter,
    FilterType.BUTTERWORTH: ButterworthFilter,
    FilterType.CORRECTING: CorrectingFilter,
    FilterType.DELAY: DelayFilter,
    FilterType.DIRAC: DiracFilter,
    FilterType.FIR: FirFilter,
    FilterType.GAIN: GainFilter,
    FilterType.IIR: CustomIirFilter,
    FilterType.INVERT: InvertFilter,
    FilterType.ZERO: ZeroFilter,
}


def create_filter(filter_type: FilterType, sample_rate: Optional[float] = None) -> Filter:
    """Create a filter of the given type with default parameters.

    Args:
        filter_type: A FilterType or its string value (e.g. ``"biquad"``).
        sample_rate: Sample rate in Hz (default: configured default).

    Returns:
        A new filter instance.

    Raises:
        ValueError: If ``filter_type`` is unknown.
    """
    try:
        filter_type = FilterType(filter_type)
    except ValueError:
        supported = ", ".join(t.value for t in FilterType)
        raise ValueError(
            f"Unknown filter type: {filter_type!r}. Supported: {supported}"
        ) from None

    if filter_type is FilterType.CUSTOM_CONVOLVER:
        return CustomConvolver(sample_rate=sample_rate)
    return _FILTER_CLASSES[filter_type](sample_rate)
