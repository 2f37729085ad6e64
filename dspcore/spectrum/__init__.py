"""Frequency-domain representations."""

from .fft_spectrum import FftSpectrum
from .spectrum import Spectrum

__all__ = [
    "Spectrum",
    "FftSpectrum",
]
