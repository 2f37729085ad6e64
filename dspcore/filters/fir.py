"""Convolution-based (FIR) filters."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from ..dsp.conv import overlap_add
from ..dsp.fir import fir_window_design
from ..dsp.iir import PassType
from ..dsp.windows import WindowType
from ..errors import SampleRateMismatchError
from ..logging import get_logger
from ..signal import FiniteSignal
from .base import Filter, FiniteFilter

logger = get_logger(__name__)


class Convolver(FiniteFilter):
    """Filter that convolves its input with an impulse response.

    Subclasses provide :attr:`impulse_response`; the filter has an effect
    iff it is not None. Input is convolved block-wise (overlap-add), so
    unbounded streams are supported.
    """

    @property
    @abstractmethod
    def impulse_response(self) -> Optional[np.ndarray]:
        """Impulse response samples, or None."""

    @property
    def has_effect_override(self) -> bool:
        return self.impulse_response is not None

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        return overlap_add(samples, self.impulse_response)


class CustomConvolver(Convolver):
    """Convolve with the samples of a finite source signal.

    Without a source the filter has no effect and its impulse response is a
    unit impulse.

    Args:
        source: Impulse response as a finite signal.
        sample_rate: Sample rate in Hz (default: that of ``source``).

    Raises:
        SampleRateMismatchError: If ``source`` has a different sample rate.
    """

    def __init__(self, source: Optional[FiniteSignal] = None, sample_rate: Optional[float] = None):
        if sample_rate is None and source is not None:
            sample_rate = source.sample_rate
        super().__init__(sample_rate, display_name="custom convolver")
        self._check_source(source)
        self._source: Optional[FiniteSignal] = source

    def _check_source(self, source: Optional[FiniteSignal]) -> None:
        if source is not None and source.sample_rate != self.sample_rate:
            raise SampleRateMismatchError(self.sample_rate, source.sample_rate)

    @property
    def source(self) -> Optional[FiniteSignal]:
        return self._source

    @source.setter
    def source(self, value: Optional[FiniteSignal]) -> None:
        self._check_source(value)
        self._source = value
        self._raise_changed()

    @property
    def has_effect_override(self) -> bool:
        return self._source is not None

    @property
    def impulse_response(self) -> np.ndarray:
        if self._source is None:
            return np.ones(1)
        return self._source.signal


class FirFilter(Convolver):
    """Windowed-sinc lowpass or highpass.

    The taps are designed on first use and cached until a parameter changes.

    Args:
        sample_rate: Sample rate in Hz.
        fc: Cutoff frequency in Hz (default: 1000).
        filter_length: Number of taps (default: 10000).
        pass_type: LOWPASS or HIGHPASS (default: LOWPASS).
        window_type: Window shape (default: Hann).
    """

    def __init__(
        self,
        sample_rate: Optional[float] = None,
        fc: float = 1000.0,
        filter_length: int = 10000,
        pass_type: PassType = PassType.LOWPASS,
        window_type: WindowType = WindowType.HANN,
    ):
        super().__init__(sample_rate, display_name="fir filter")
        self._fc = float(fc)
        self._filter_length = int(filter_length)
        self._pass_type = PassType(pass_type)
        self._window_type = WindowType(window_type)
        self._coefficients: Optional[np.ndarray] = None

    def _on_change(self) -> None:
        self._coefficients = None

    @property
    def fc(self) -> float:
        return self._fc

    @fc.setter
    def fc(self, value: float) -> None:
        self._set_parameter("_fc", float(value))

    @property
    def filter_length(self) -> int:
        return self._filter_length

    @filter_length.setter
    def filter_length(self, value: int) -> None:
        self._set_parameter("_filter_length", int(value))

    @property
    def pass_type(self) -> PassType:
        return self._pass_type

    @pass_type.setter
    def pass_type(self, value: PassType) -> None:
        self._set_parameter("_pass_type", PassType(value))

    @property
    def window_type(self) -> WindowType:
        return self._window_type

    @window_type.setter
    def window_type(self, value: WindowType) -> None:
        self._set_parameter("_window_type", WindowType(value))

    @property
    def has_effect_override(self) -> bool:
        return self._fc > 0 and self._filter_length > 0

    @property
    def impulse_response(self) -> Optional[np.ndarray]:
        if not self.has_effect_override:
            return None
        if self._coefficients is None:
            logger.debug(
                "Designing %s fir: fc=%g, %d taps, %s window",
                self._pass_type.value, self._fc, self._filter_length, self._window_type.value,
            )
            self._coefficients = fir_window_design(
                self._filter_length, self._fc, self.sample_rate, self._pass_type, self._window_type
            )
        return self._coefficients


class PhaseType(Enum):
    """Phase behaviour of a correcting filter."""

    LINEAR_FILTER = "linear_filter"
    LINEAR_RESULT = "linear_result"
    MINIMUM_FILTER = "minimum_filter"


class UpdateMode(Enum):
    """When a correcting filter picks up changes of its original/target filters."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"


class CorrectingFilter(Convolver):
    """Filter meant to transform the response of one filter into another's.

    Only the configuration surface is provided: parameters, change
    propagation from the observed ``original`` and ``target`` filters, and
    latching of those filters via :meth:`update_filter`. Computing the
    correction itself is not supported and raises NotImplementedError.

    In AUTOMATIC mode a change of either observed filter re-latches both and
    raises ``changed``; in MANUAL mode :meth:`update_filter` must be called.
    """

    def __init__(
        self,
        sample_rate: Optional[float] = None,
        filter_length: int = 8192,
        oversampling: int = 1,
        max_boost: float = 6.0,
        min_boost: float = -20.0,
        positive_threshold: float = 3.0,
        positive_ratio: float = 0.5,
        negative_threshold: float = -10.0,
        negative_ratio: float = 0.5,
        phase_type: PhaseType = PhaseType.LINEAR_RESULT,
        window_type: WindowType = WindowType.HANN,
        update_mode: UpdateMode = UpdateMode.AUTOMATIC,
    ):
        super().__init__(sample_rate, display_name="correcting filter")
        self._filter_length = int(filter_length)
        self._oversampling = int(oversampling)
        self._max_boost = float(max_boost)
        self._min_boost = float(min_boost)
        self._positive_threshold = float(positive_threshold)
        self._positive_ratio = float(positive_ratio)
        self._negative_threshold = float(negative_threshold)
        self._negative_ratio = float(negative_ratio)
        self._phase_type = PhaseType(phase_type)
        self._window_type = WindowType(window_type)
        self._update_mode = UpdateMode(update_mode)

        self._original: Optional[Filter] = None
        self._target: Optional[Filter] = None
        self._local_original: Optional[Filter] = None
        self._local_target: Optional[Filter] = None

    # ---- Observed filters ---------------------------------------------------

    def _observe(self, old: Optional[Filter], new: Optional[Filter]) -> None:
        if old is not None:
            old.changed.unsubscribe(self._on_observed_changed)
        if new is not None:
            if new.sample_rate != self.sample_rate:
                raise SampleRateMismatchError(self.sample_rate, new.sample_rate)
            new.changed.subscribe(self._on_observed_changed)

    def _on_observed_changed(self, sender: Filter) -> None:
        if self._update_mode is UpdateMode.AUTOMATIC:
            self.update_filter()

    @property
    def original(self) -> Optional[Filter]:
        """Filter whose response is to be corrected."""
        return self._original

    @original.setter
    def original(self, value: Optional[Filter]) -> None:
        self._observe(self._original, value)
        self._original = value
        self._on_observed_changed(value)

    @property
    def target(self) -> Optional[Filter]:
        """Filter whose response should result."""
        return self._target

    @target.setter
    def target(self, value: Optional[Filter]) -> None:
        self._observe(self._target, value)
        self._target = value
        self._on_observed_changed(value)

    def update_filter(self) -> None:
        """Latch the current original and target filters and raise ``changed``."""
        self._local_original = self._original
        self._local_target = self._target
        self._raise_changed()

    # ---- Parameters ---------------------------------------------------------

    @property
    def filter_length(self) -> int:
        return self._filter_length

    @filter_length.setter
    def filter_length(self, value: int) -> None:
        self._set_parameter("_filter_length", int(value))

    @property
    def oversampling(self) -> int:
        return self._oversampling

    @oversampling.setter
    def oversampling(self, value: int) -> None:
        self._set_parameter("_oversampling", int(value))

    @property
    def max_boost(self) -> float:
        """Maximum boost in dB."""
        return self._max_boost

    @max_boost.setter
    def max_boost(self, value: float) -> None:
        self._set_parameter("_max_boost", float(value))

    @property
    def min_boost(self) -> float:
        """Minimum boost (maximum cut) in dB."""
        return self._min_boost

    @min_boost.setter
    def min_boost(self, value: float) -> None:
        self._set_parameter("_min_boost", float(value))

    @property
    def positive_threshold(self) -> float:
        return self._positive_threshold

    @positive_threshold.setter
    def positive_threshold(self, value: float) -> None:
        self._set_parameter("_positive_threshold", float(value))

    @property
    def positive_ratio(self) -> float:
        return self._positive_ratio

    @positive_ratio.setter
    def positive_ratio(self, value: float) -> None:
        self._set_parameter("_positive_ratio", float(value))

    @property
    def negative_threshold(self) -> float:
        return self._negative_threshold

    @negative_threshold.setter
    def negative_threshold(self, value: float) -> None:
        self._set_parameter("_negative_threshold", float(value))

    @property
    def negative_ratio(self) -> float:
        return self._negative_ratio

    @negative_ratio.setter
    def negative_ratio(self, value: float) -> None:
        self._set_parameter("_negative_ratio", float(value))

    @property
    def phase_type(self) -> PhaseType:
        return self._phase_type

    @phase_type.setter
    def phase_type(self, value: PhaseType) -> None:
        self._set_parameter("_phase_type", PhaseType(value))

    @property
    def window_type(self) -> WindowType:
        return self._window_type

    @window_type.setter
    def window_type(self, value: WindowType) -> None:
        self._set_parameter("_window_type", WindowType(value))

    @property
    def update_mode(self) -> UpdateMode:
        return self._update_mode

    @update_mode.setter
    def update_mode(self, value: UpdateMode) -> None:
        self._set_parameter("_update_mode", UpdateMode(value))

    # ---- Filter interface ---------------------------------------------------

    @property
    def has_effect_override(self) -> bool:
        return self._local_original is not None and self._local_target is not None

    @property
    def impulse_response(self) -> Optional[np.ndarray]:
        raise NotImplementedError("Correcting filter responses are not implemented")
