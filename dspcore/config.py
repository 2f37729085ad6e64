"""Library-wide defaults for dspcore.

The active configuration is a frozen dataclass; replace it with
:func:`set_config` or temporarily with :func:`config_context`.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

DEBUG_ENV_VAR = "DSPCORE_DEBUG"


def _debug_from_env() -> bool:
    return os.getenv(DEBUG_ENV_VAR, "0").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DspConfig:
    """
    Default parameters shared by signals, spectra and filters.

    Args:
        default_sample_rate: Sample rate (Hz) used when none is given.
        default_sample_rates: Sample rates offered to callers choosing one.
        min_fft_length: Lower bound of the FFT length used when a finite
            signal computes its spectrum.
        parity_tolerance: Relative tolerance on the imaginary part of the
            last half-spectrum bin below which an inverse transform assumes an
            even-length time signal.
        debug: Check numeric preconditions (non-zero pivots, ascending sample
            positions) eagerly and raise on violations. Defaults to the
            ``DSPCORE_DEBUG`` environment variable.
    """

    default_sample_rate: float = 44100.0
    default_sample_rates: tuple[float, ...] = (44100.0, 48000.0, 88200.0, 96000.0, 192000.0)
    min_fft_length: int = 128
    parity_tolerance: float = 1e-12
    debug: bool = field(default_factory=_debug_from_env)

    def __post_init__(self) -> None:
        """Validate DspConfig invariants."""
        if self.default_sample_rate <= 0:
            raise ValueError(
                f"default_sample_rate must be positive, got {self.default_sample_rate}."
            )
        if any(fs <= 0 for fs in self.default_sample_rates):
            raise ValueError(
                f"default_sample_rates must all be positive, got {self.default_sample_rates}."
            )
        if self.min_fft_length < 1:
            raise ValueError(f"min_fft_length must be >= 1, got {self.min_fft_length}.")
        if self.parity_tolerance < 0:
            raise ValueError(
                f"parity_tolerance must be non-negative, got {self.parity_tolerance}."
            )


_config = DspConfig()


def get_config() -> DspConfig:
    """Return the active configuration."""
    return _config


def set_config(config: DspConfig) -> None:
    """Replace the active configuration.

    Args:
        config: New configuration.

    Raises:
        TypeError: If ``config`` is not a DspConfig.
    """
    global _config
    if not isinstance(config, DspConfig):
        raise TypeError(f"Expected DspConfig, got {type(config).__name__}")
    _config = config


@contextmanager
def config_context(config: DspConfig) -> Iterator[DspConfig]:
    """Temporarily activate ``config``, restoring the previous one on exit."""
    prev = _config
    set_config(config)
    try:
        yield config
    finally:
        set_config(prev)
