"""Composable filter pipeline.

This module provides:
- Filter base classes with enable/effect gating and change notification
- FilterSet / FiniteFilterSet cascades that re-raise child changes
- Primitive filters (gain, invert, delay, dirac, zero)
- IIR filters (custom coefficients, biquads, Butterworth cascades)
- FIR filters (convolvers, windowed-sinc FIR, correcting filter settings)
- Nonlinear and user-defined filters
- A factory creating filters by type
"""

from .base import ChangeEvent, Filter, FiniteFilter
from .factory import FilterType, create_filter
from .filter_set import FilterSet, FiniteFilterSet, chain, get_impulse_response
from .fir import (
    CorrectingFilter,
    Convolver,
    CustomConvolver,
    FirFilter,
    PhaseType,
    UpdateMode,
)
from .iir import BiquadFilter, ButterworthFilter, CustomIirFilter, IirFilter
from .nonlinear import AwgnFilter, CustomFilter, CustomFiniteFilter, DistortionFilter
from .primitive import DelayFilter, DiracFilter, GainFilter, InvertFilter, ZeroFilter

__all__ = [
    # Base
    "ChangeEvent",
    "Filter",
    "FiniteFilter",
    "FilterSet",
    "FiniteFilterSet",
    "chain",
    "get_impulse_response",
    # Primitive
    "GainFilter",
    "InvertFilter",
    "DelayFilter",
    "DiracFilter",
    "ZeroFilter",
    # IIR
    "IirFilter",
    "CustomIirFilter",
    "BiquadFilter",
    "ButterworthFilter",
    # FIR
    "Convolver",
    "CustomConvolver",
    "FirFilter",
    "CorrectingFilter",
    "PhaseType",
    "UpdateMode",
    # Nonlinear
    "DistortionFilter",
    "AwgnFilter",
    "CustomFilter",
    "CustomFiniteFilter",
    # Factory
    "FilterType",
    "create_filter",
]
