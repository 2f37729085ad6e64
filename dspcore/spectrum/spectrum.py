"""Complex spectra on arbitrary frequency axes."""

from __future__ import annotations

from functools import cached_property

import numpy as np

from ..dsp.frequency import group_delay, unwrap_phase
from ..errors import LengthMismatchError
from ..logging import get_logger
from ..series import CustomSeries, Series

logger = get_logger(__name__)


class Spectrum:
    """Complex values paired 1:1 with an ascending frequency series.

    Magnitude, phase and group delay are computed on first access and cached
    for the lifetime of the object.

    Args:
        frequencies: Frequency axis (a Series or array-like, in Hz).
        values: Complex values, one per frequency.

    Raises:
        LengthMismatchError: If the lengths differ.
    """

    def __init__(self, frequencies, values):
        if not isinstance(frequencies, Series):
            frequencies = CustomSeries(frequencies)
        values = np.array(values, dtype=complex)
        if values.ndim != 1:
            raise ValueError(f"Expected 1D values, got {values.ndim}D array")
        if len(frequencies) != len(values):
            raise LengthMismatchError(len(frequencies), len(values), "spectrum values")
        values.flags.writeable = False
        self.frequencies = frequencies
        self.values = values

    def __len__(self) -> int:
        return len(self.values)

    def get_value(self, frequency: float) -> complex:
        """Value at ``frequency``, linearly interpolated between bins.

        Frequencies below the first (above the last) bin return the first
        (last) value.
        """
        f = self.frequencies.values
        if frequency <= f[0]:
            return complex(self.values[0])
        if frequency >= f[-1]:
            return complex(self.values[-1])

        c = int(np.searchsorted(f, frequency, side="left"))
        if f[c] == frequency:
            return complex(self.values[c])
        d1 = (frequency - f[c - 1]) / (f[c] - f[c - 1])
        return complex((1.0 - d1) * self.values[c - 1] + d1 * self.values[c])

    @cached_property
    def magnitude(self) -> np.ndarray:
        """Absolute values."""
        return np.abs(self.values)

    @cached_property
    def phase(self) -> np.ndarray:
        """Phase in radians, wrapped to ``(-pi, pi]``."""
        return np.angle(self.values)

    @cached_property
    def unwrapped_phase(self) -> np.ndarray:
        """Phase in radians with 2*pi jumps removed."""
        return unwrap_phase(self.phase)

    @cached_property
    def group_delay(self) -> np.ndarray:
        """Group delay in seconds, from the unwrapped phase."""
        logger.debug("Computing group delay over %d bins", len(self))
        return group_delay(self.frequencies.values, self.unwrapped_phase)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)})"
