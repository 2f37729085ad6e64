"""Time-domain signals.

This module provides:
- Signal: abstract base with windowed sample access
- FiniteSignal: explicit samples with a lazily derived FFT spectrum
- InfiniteSignal / SyntheticSignal: unbounded signals (the latter with an
  analytic spectrum)
- Concrete generators (Dirac, ideal filters, sinc, sinus, white noise,
  log sweep, windows)
- Combinators (add, multiply, negate, convolve, cross-correlate, reverse,
  circular shift, filter processing)
"""

from .base import Signal
from .finite import FiniteSignal
from .infinite import InfiniteSignal, SyntheticSignal
from .operations import (
    add,
    circular_shift,
    convolve,
    cross_correlate,
    multiply,
    negate,
    process,
    reverse,
)
from .types import (
    Dirac,
    IdealHighpass,
    IdealLowpass,
    LogSweep,
    Sinc,
    Sinus,
    WhiteNoise,
    WindowSignal,
)

__all__ = [
    # Variants
    "Signal",
    "FiniteSignal",
    "InfiniteSignal",
    "SyntheticSignal",
    # Generators
    "Dirac",
    "IdealLowpass",
    "IdealHighpass",
    "Sinc",
    "Sinus",
    "WhiteNoise",
    "LogSweep",
    "WindowSignal",
    # Combinators
    "add",
    "multiply",
    "negate",
    "convolve",
    "cross_correlate",
    "reverse",
    "circular_shift",
    "process",
]
