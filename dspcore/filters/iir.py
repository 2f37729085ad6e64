"""Recursive (IIR) filters: custom coefficients, biquads and Butterworth cascades."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from ..dsp.iir import (
    BiquadType,
    PassType,
    biquad_coefficients,
    butterworth_q_values,
    first_order_butterworth,
    iir_filter,
    iir_frequency_response,
)
from ..errors import LengthMismatchError
from ..logging import get_logger
from .base import Filter
from .filter_set import FilterSet

logger = get_logger(__name__)


class IirFilter(Filter):
    """Filter defined by a difference equation with coefficients ``a`` and ``b``.

    The filter has an effect only when both coefficient arrays are set and
    the order (``len(a) - 1``) is positive.
    """

    def __init__(self, sample_rate: Optional[float] = None, display_name: str = "iir filter"):
        super().__init__(sample_rate, display_name)
        self._a: Optional[np.ndarray] = None
        self._b: Optional[np.ndarray] = None

    @property
    def a(self) -> Optional[np.ndarray]:
        """Denominator (feedback) coefficients."""
        return self._a

    @property
    def b(self) -> Optional[np.ndarray]:
        """Numerator (feed-forward) coefficients."""
        return self._b

    @property
    def order(self) -> int:
        return 0 if self._a is None else len(self._a) - 1

    @property
    def has_effect_override(self) -> bool:
        return self._a is not None and self._b is not None and self.order > 0

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return iir_filter(samples, self._b, self._a)

    def frequency_response(self, frequencies) -> np.ndarray:
        """Complex response at ``frequencies`` (Hz); 1 when the filter has no effect."""
        frequencies = np.asarray(frequencies, dtype=float)
        if not self.has_effect:
            return np.ones(frequencies.shape, dtype=complex)
        return iir_frequency_response(self._b, self._a, frequencies, self.sample_rate)


class CustomIirFilter(IirFilter):
    """IIR filter with user-supplied coefficients.

    Args:
        sample_rate: Sample rate in Hz.
        a: Denominator coefficients.
        b: Numerator coefficients (same length as ``a``).
    """

    def __init__(self, sample_rate: Optional[float] = None, a=None, b=None):
        super().__init__(sample_rate, display_name="custom iir filter")
        if a is not None or b is not None:
            self._a, self._b = self._check(a, b)

    @staticmethod
    def _check(a, b):
        if a is None or b is None:
            raise ValueError("Both a and b must be given")
        a = np.array(a, dtype=float)
        b = np.array(b, dtype=float)
        if len(a) != len(b):
            raise LengthMismatchError(len(a), len(b), "b")
        if len(a) > 0 and a[0] == 0:
            raise ValueError("Denominator leading coefficient a[0] cannot be 0")
        return a, b

    def set_coefficients(self, a, b) -> None:
        """Replace both coefficient arrays and raise ``changed`` once."""
        self._a, self._b = self._check(a, b)
        self._raise_changed()


class BiquadFilter(IirFilter):
    """Second-order IIR section from the Audio EQ Cookbook.

    Coefficients are recomputed on every parameter change, after which the
    ``changed`` event fires exactly once.

    Args:
        sample_rate: Sample rate in Hz.
        biquad_type: Response type (default: HIGHPASS).
        fc: Centre/corner frequency in Hz (default: 1000).
        q: Quality factor (default: 0.71).
        gain: Gain in dB, used by PEAKING, LOWSHELF and HIGHSHELF.
    """

    def __init__(
        self,
        sample_rate: Optional[float] = None,
        biquad_type: BiquadType = BiquadType.HIGHPASS,
        fc: float = 1000.0,
        q: float = 0.71,
        gain: float = 0.0,
    ):
        super().__init__(sample_rate, display_name="biquad filter")
        self._biquad_type = BiquadType(biquad_type)
        self._fc = float(fc)
        self._q = float(q)
        self._gain = float(gain)
        self._compute_coefficients()

    def _compute_coefficients(self) -> None:
        with np.errstate(divide="ignore", invalid="ignore"):
            self._b, self._a = biquad_coefficients(
                self._biquad_type, self._fc, self._q, self.sample_rate, self._gain
            )
        logger.debug(
            "Biquad %s fc=%g q=%g gain=%g: b=%s a=%s",
            self._biquad_type.value, self._fc, self._q, self._gain, self._b, self._a,
        )

    def _on_change(self) -> None:
        self._compute_coefficients()

    @property
    def biquad_type(self) -> BiquadType:
        return self._biquad_type

    @biquad_type.setter
    def biquad_type(self, value: BiquadType) -> None:
        self._set_parameter("_biquad_type", BiquadType(value))

    @property
    def fc(self) -> float:
        """Centre/corner frequency in Hz."""
        return self._fc

    @fc.setter
    def fc(self, value: float) -> None:
        self._set_parameter("_fc", float(value))

    @property
    def q(self) -> float:
        return self._q

    @q.setter
    def q(self, value: float) -> None:
        self._set_parameter("_q", float(value))

    @property
    def gain(self) -> float:
        """Gain in dB."""
        return self._gain

    @gain.setter
    def gain(self, value: float) -> None:
        self._set_parameter("_gain", float(value))

    @property
    def is_gain_used(self) -> bool:
        return self._biquad_type.uses_gain

    @property
    def has_effect_override(self) -> bool:
        if not self._q > 0:
            return False
        if not 0 < self._fc < self.sample_rate / 2:
            return False
        if self.is_gain_used and np.isnan(self._gain):
            return False
        return super().has_effect_override

    # Coefficients normalised by a0.

    @property
    def b0n(self) -> float:
        return float(self._b[0] / self._a[0])

    @property
    def b1n(self) -> float:
        return float(self._b[1] / self._a[0])

    @property
    def b2n(self) -> float:
        return float(self._b[2] / self._a[0])

    @property
    def a1n(self) -> float:
        return float(self._a[1] / self._a[0])

    @property
    def a2n(self) -> float:
        return float(self._a[2] / self._a[0])


class ButterworthFilter(Filter):
    """Butterworth lowpass or highpass of arbitrary order.

    Realised as a cascade of one first-order section (odd orders) and
    ``order // 2`` biquads. The cascade is rebuilt on first use after a
    parameter change.

    Args:
        sample_rate: Sample rate in Hz.
        pass_type: LOWPASS or HIGHPASS (default: HIGHPASS).
        order: Filter order (default: 2).
        fc: Corner frequency in Hz (default: 1000).
    """

    def __init__(
        self,
        sample_rate: Optional[float] = None,
        pass_type: PassType = PassType.HIGHPASS,
        order: int = 2,
        fc: float = 1000.0,
    ):
        super().__init__(sample_rate, display_name="butterworth filter")
        self._pass_type = PassType(pass_type)
        self._order = int(order)
        self._fc = float(fc)
        self._internal: Optional[FilterSet] = None

    @property
    def pass_type(self) -> PassType:
        return self._pass_type

    @pass_type.setter
    def pass_type(self, value: PassType) -> None:
        self._set_parameter("_pass_type", PassType(value))

    @property
    def order(self) -> int:
        return self._order

    @order.setter
    def order(self, value: int) -> None:
        self._set_parameter("_order", int(value))

    @property
    def fc(self) -> float:
        return self._fc

    @fc.setter
    def fc(self, value: float) -> None:
        self._set_parameter("_fc", float(value))

    def _on_change(self) -> None:
        self._internal = None

    @property
    def has_effect_override(self) -> bool:
        return self._order >= 1 and 0 < self._fc < self.sample_rate / 2

    @property
    def sections(self) -> FilterSet:
        """Internal cascade of first- and second-order sections."""
        if self._internal is None:
            self._internal = self._build_sections()
        return self._internal

    def _build_sections(self) -> FilterSet:
        logger.debug(
            "Building %s butterworth of order %d at %g Hz",
            self._pass_type.value, self._order, self._fc,
        )
        sections = FilterSet(sample_rate=self.sample_rate, display_name="butterworth sections")
        if self._order % 2:
            b, a = first_order_butterworth(self._pass_type, self._fc, self.sample_rate)
            sections.append(CustomIirFilter(self.sample_rate, a=a, b=b))
        biquad_type = (
            BiquadType.HIGHPASS if self._pass_type is PassType.HIGHPASS else BiquadType.LOWPASS
        )
        for q in butterworth_q_values(self._order):
            sections.append(BiquadFilter(self.sample_rate, biquad_type, self._fc, float(q)))
        return sections

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return self.sections.process(samples)

    def frequency_response(self, frequencies) -> np.ndarray:
        """Complex response at ``frequencies`` (Hz): product of the section responses."""
        frequencies = np.asarray(frequencies, dtype=float)
        response = np.ones(frequencies.shape, dtype=complex)
        if self.has_effect:
            for section in self.sections:
                response *= section.frequency_response(frequencies)
        return response
