"""dspcore - lazy time/frequency signals, composable filters and interpolation."""

__version__ = "0.1.0"

# Configuration and errors
from .config import DspConfig, config_context, get_config, set_config
from .errors import LengthMismatchError, SampleRateMismatchError

# Filters
from .filters import (
    AwgnFilter,
    BiquadFilter,
    ButterworthFilter,
    ChangeEvent,
    CorrectingFilter,
    CustomConvolver,
    CustomFilter,
    CustomFiniteFilter,
    CustomIirFilter,
    DelayFilter,
    DiracFilter,
    DistortionFilter,
    Filter,
    FilterSet,
    FilterType,
    FiniteFilter,
    FiniteFilterSet,
    FirFilter,
    GainFilter,
    InvertFilter,
    ZeroFilter,
    chain,
    create_filter,
    get_impulse_response,
)

# Interpolation
from .interpolation import (
    AdaptiveInterpolator,
    ExtrapolationMode,
    LinearInterpolator,
    SmoothingInterpolator,
    SplineInterpolator,
)

# Numeric support
from .numeric import CubicSpline, TriDiagonalMatrix

# Series and spectra
from .series import ConstantSeries, CustomSeries, FftSeries, Series
from .spectrum import FftSpectrum, Spectrum

# Signals
from .signal import (
    Dirac,
    FiniteSignal,
    IdealHighpass,
    IdealLowpass,
    InfiniteSignal,
    LogSweep,
    Signal,
    Sinc,
    Sinus,
    SyntheticSignal,
    WhiteNoise,
    WindowSignal,
)

__all__ = [
    "__version__",
    # Configuration and errors
    "DspConfig",
    "get_config",
    "set_config",
    "config_context",
    "LengthMismatchError",
    "SampleRateMismatchError",
    # Series and spectra
    "Series",
    "CustomSeries",
    "ConstantSeries",
    "FftSeries",
    "Spectrum",
    "FftSpectrum",
    # Signals
    "Signal",
    "FiniteSignal",
    "InfiniteSignal",
    "SyntheticSignal",
    "Dirac",
    "IdealLowpass",
    "IdealHighpass",
    "Sinc",
    "Sinus",
    "WhiteNoise",
    "LogSweep",
    "WindowSignal",
    # Filters
    "ChangeEvent",
    "Filter",
    "FiniteFilter",
    "FilterSet",
    "FiniteFilterSet",
    "GainFilter",
    "InvertFilter",
    "DelayFilter",
    "DiracFilter",
    "ZeroFilter",
    "CustomIirFilter",
    "BiquadFilter",
    "ButterworthFilter",
    "CustomConvolver",
    "FirFilter",
    "CorrectingFilter",
    "DistortionFilter",
    "AwgnFilter",
    "CustomFilter",
    "CustomFiniteFilter",
    "FilterType",
    "create_filter",
    "chain",
    "get_impulse_response",
    # Interpolation
    "ExtrapolationMode",
    "LinearInterpolator",
    "SplineInterpolator",
    "SmoothingInterpolator",
    "AdaptiveInterpolator",
    # Numeric
    "TriDiagonalMatrix",
    "CubicSpline",
]
