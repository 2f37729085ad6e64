"""Tests for dsp.frequency module."""

import numpy as np
import pytest

from dspcore.dsp.frequency import (
    apply_delay,
    db_to_linear,
    group_delay,
    linear_to_db,
    unwrap_phase,
    wrap_phase,
)
from dspcore.errors import LengthMismatchError


def test_db_conversions():
    """Test amplitude decibel conversion in both directions."""
    np.testing.assert_array_almost_equal(db_to_linear([0.0, 20.0, -20.0]), [1.0, 10.0, 0.1])
    np.testing.assert_array_almost_equal(linear_to_db([1.0, 10.0]), [0.0, 20.0])
    assert linear_to_db(0.0) == -np.inf
    assert linear_to_db(-1.0) == -np.inf


def test_wrap_and_unwrap_phase():
    """Test phase wrapping."""
    phase = np.linspace(0.0, 6.0 * np.pi, 40)
    wrapped = wrap_phase(phase)
    assert np.all(wrapped > -np.pi) and np.all(wrapped <= np.pi)
    np.testing.assert_array_almost_equal(unwrap_phase(wrapped), phase)
    assert wrap_phase(np.pi) == pytest.approx(np.pi)
    assert wrap_phase(-np.pi) == pytest.approx(np.pi)


def test_group_delay_of_pure_delay():
    """Test that a linear phase yields a constant group delay."""
    f = np.linspace(0.0, 1000.0, 21)
    tau = 0.002
    phase = -2.0 * np.pi * f * tau
    np.testing.assert_array_almost_equal(group_delay(f, phase), np.full(21, tau))


def test_group_delay_edge_cases():
    """Test short inputs and mismatched lengths."""
    assert len(group_delay([100.0], [0.0])) == 1
    with pytest.raises(LengthMismatchError):
        group_delay([1.0, 2.0], [0.0])


def test_apply_delay():
    """Test the linear phase of a delay."""
    f = np.array([0.0, 250.0, 500.0])
    v = apply_delay(f, np.ones(3), 0.001)
    np.testing.assert_array_almost_equal(np.abs(v), np.ones(3))
    assert np.angle(v[1]) == pytest.approx(-np.pi / 2)
    assert np.real(v[2]) == pytest.approx(-1.0)
    with pytest.raises(LengthMismatchError):
        apply_delay(f, np.ones(2), 0.001)
