"""Filter base classes and change notification.

A filter maps a sample stream to a sample stream. Filters are either
finite (FIR: finite input gives finite output) or infinite (IIR: the output
continues indefinitely after the input ends). Each filter can be disabled;
a disabled filter, or one whose parameters are out of range, has no effect
and passes its input through unchanged.

Parameter changes are announced through :class:`ChangeEvent` so that
owners (filter sets, correcting filters, user interfaces) can react.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional

import numpy as np

from ..config import get_config


ChangeCallback = Callable[[Any], None]


class ChangeEvent:
    """Observer list for change notifications.

    Callbacks are invoked with the sender in subscription order. Exceptions
    raised by a callback propagate to the code that triggered the change.
    """

    def __init__(self) -> None:
        self._subscribers: list[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> None:
        """Register ``callback`` to be called on every change."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        """Remove a previously registered callback (no-op if absent)."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def fire(self, sender: Any) -> None:
        """Notify all subscribers that ``sender`` changed."""
        for callback in list(self._subscribers):
            callback(sender)

    def __len__(self) -> int:
        return len(self._subscribers)


class Filter(ABC):
    """Abstract filter.

    Args:
        sample_rate: Sample rate in Hz (default: ``DspConfig.default_sample_rate``).
        display_name: Human-readable label.
    """

    #: Whether the output continues after the input ends.
    has_infinite_impulse_response: bool = True

    def __init__(self, sample_rate: Optional[float] = None, display_name: str = "filter"):
        if sample_rate is None:
            sample_rate = get_config().default_sample_rate
        if not sample_rate > 0:
            raise ValueError(f"sample_rate must be positive, got {sample_rate}")
        self._sample_rate = float(sample_rate)
        self._enabled = True
        self.display_name = display_name
        self.changed = ChangeEvent()

    @property
    def sample_rate(self) -> float:
        """Sample rate in Hz (fixed at construction)."""
        return self._sample_rate

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._set_parameter("_enabled", bool(value))

    @property
    def has_effect_override(self) -> bool:
        """Whether the current parameters describe a non-identity transform."""
        return True

    @property
    def has_effect(self) -> bool:
        """True if the filter is enabled and its parameters are valid."""
        return self.enabled and self.has_effect_override

    def process(self, samples: Iterable[float]) -> Iterable[float]:
        """Filter a sample stream.

        Returns ``samples`` itself when the filter has no effect, otherwise a
        lazy iterator over the output.
        """
        if not self.has_effect:
            return samples
        return self._process(samples)

    @abstractmethod
    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        """Type-specific transform, only called when the filter has an effect."""

    def _on_change(self) -> None:
        """Hook run before subscribers are notified (e.g. to drop caches)."""

    def _raise_changed(self) -> None:
        self._on_change()
        self.changed.fire(self)

    def _set_parameter(self, attr: str, value: Any) -> None:
        """Assign ``value`` to ``attr`` and raise ``changed`` if it differs."""
        current = getattr(self, attr)
        if isinstance(current, np.ndarray) or isinstance(value, np.ndarray):
            unchanged = np.array_equal(current, value)
        else:
            unchanged = current == value
        if unchanged:
            return
        setattr(self, attr, value)
        self._raise_changed()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.display_name!r}, sample_rate={self.sample_rate}, "
            f"enabled={self.enabled})"
        )


class FiniteFilter(Filter):
    """Filter whose output is finite for finite input."""

    has_infinite_impulse_response = False

    def process_array(self, samples) -> np.ndarray:
        """Filter a finite sequence and materialise the output."""
        return np.fromiter(self.process(samples), dtype=float)
