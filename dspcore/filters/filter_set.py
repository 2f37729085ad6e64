"""Ordered filter cascades."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Union

import numpy as np

from ..dsp.utils import padded_range, take
from ..errors import SampleRateMismatchError
from ..logging import get_logger
from .base import Filter, FiniteFilter

logger = get_logger(__name__)


class FilterSet(Filter):
    """Cascade of child filters applied in order.

    The set behaves like a mutable list of filters. Every structural
    mutation, and every change of a child, raises the set's own ``changed``
    event exactly once.

    Args:
        filters: Initial children.
        sample_rate: Sample rate in Hz (default: that of the first child,
            else the configured default).
        display_name: Human-readable label.

    Raises:
        SampleRateMismatchError: If a child has a different sample rate.
    """

    def __init__(
        self,
        filters: Iterable[Filter] = (),
        sample_rate: Optional[float] = None,
        display_name: str = "filter set",
    ):
        filters = list(filters)
        if sample_rate is None and filters:
            sample_rate = filters[0].sample_rate
        super().__init__(sample_rate, display_name)
        self._filters: list[Filter] = []
        for f in filters:
            self._attach(f)
            self._filters.append(f)

    # ---- Child bookkeeping --------------------------------------------------

    def _validate(self, f: Filter) -> None:
        if not isinstance(f, Filter):
            raise TypeError(f"Expected Filter, got {type(f).__name__}")
        if f.sample_rate != self.sample_rate:
            raise SampleRateMismatchError(self.sample_rate, f.sample_rate)

    def _attach(self, f: Filter) -> None:
        self._validate(f)
        f.changed.subscribe(self._on_child_changed)

    def _detach(self, f: Filter) -> None:
        f.changed.unsubscribe(self._on_child_changed)

    def _on_child_changed(self, sender: Filter) -> None:
        self._raise_changed()

    def _structure_changed(self, action: str) -> None:
        logger.debug("%s: %s (%d filters)", self.display_name, action, len(self._filters))
        self._raise_changed()

    # ---- List interface -----------------------------------------------------

    @property
    def filters(self) -> tuple:
        """Children in processing order (read-only view)."""
        return tuple(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __contains__(self, f) -> bool:
        return f in self._filters

    def __getitem__(self, index: Union[int, slice]):
        return self._filters[index]

    def __setitem__(self, index: int, f: Filter) -> None:
        self._validate(f)
        old = self._filters[index]
        self._detach(old)
        self._attach(f)
        self._filters[index] = f
        self._structure_changed("replace")

    def __delitem__(self, index: int) -> None:
        self._detach(self._filters[index])
        del self._filters[index]
        self._structure_changed("remove")

    def append(self, f: Filter) -> None:
        self._attach(f)
        self._filters.append(f)
        self._structure_changed("append")

    def extend(self, filters: Sequence[Filter]) -> None:
        """Append several filters, raising ``changed`` once."""
        filters = list(filters)
        for f in filters:
            self._validate(f)
        for f in filters:
            self._attach(f)
            self._filters.append(f)
        self._structure_changed("extend")

    def insert(self, index: int, f: Filter) -> None:
        self._attach(f)
        self._filters.insert(index, f)
        self._structure_changed("insert")

    def remove(self, f: Filter) -> None:
        self._filters.remove(f)
        self._detach(f)
        self._structure_changed("remove")

    def pop(self, index: int = -1) -> Filter:
        f = self._filters.pop(index)
        self._detach(f)
        self._structure_changed("pop")
        return f

    def clear(self) -> None:
        for f in self._filters:
            self._detach(f)
        self._filters.clear()
        self._structure_changed("clear")

    # ---- Filter interface ---------------------------------------------------

    @property
    def has_infinite_impulse_response(self) -> bool:  # type: ignore[override]
        return any(f.has_infinite_impulse_response for f in self._filters)

    @property
    def has_effect_override(self) -> bool:
        return any(f.has_effect for f in self._filters)

    def _process(self, samples: Iterable[float]) -> Iterable[float]:
        for f in self._filters:
            samples = f.process(samples)
        return samples


class FiniteFilterSet(FilterSet, FiniteFilter):
    """Cascade restricted to finite (FIR) filters; the set itself is finite."""

    def _validate(self, f: Filter) -> None:
        super()._validate(f)
        if f.has_infinite_impulse_response:
            raise TypeError(f"{type(f).__name__} is not a finite filter")

    @property
    def has_infinite_impulse_response(self) -> bool:  # type: ignore[override]
        return False


def chain(f1: Filter, f2: Filter) -> FilterSet:
    """Cascade two filters.

    Appends ``f2`` to ``f1`` when ``f1`` is already a filter set, otherwise
    returns a new set ``[f1, f2]``.
    """
    if isinstance(f1, FilterSet):
        f1.append(f2)
        return f1
    return FilterSet([f1, f2])


def get_impulse_response(f: Filter, length: Optional[int] = None) -> np.ndarray:
    """Response of ``f`` to a unit impulse.

    Args:
        f: Filter.
        length: Number of samples. Required for filters with an infinite
            impulse response; for finite filters the whole response is
            returned when omitted.

    Returns:
        Impulse response samples (zero-padded to ``length`` if given).

    Raises:
        ValueError: If ``length`` is omitted for an infinite filter.
    """
    if length is None:
        if f.has_infinite_impulse_response and f.has_effect:
            raise ValueError("length is required for filters with an infinite impulse response")
        return np.fromiter(f.process([1.0]), dtype=float)
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if f.has_infinite_impulse_response and f.has_effect:
        return take(f.process([1.0]), length)
    return padded_range(np.fromiter(f.process([1.0]), dtype=float), 0, length)
