"""Tests for interpolation.base module."""

import numpy as np
import pytest

from dspcore.diagnostics import debug_context
from dspcore.errors import LengthMismatchError
from dspcore.interpolation import (
    ExtrapolationMode,
    LinearInterpolator,
    get_value_at,
    linear_interpolation,
)


class TestHelpers:
    """Tests for the single-point helpers."""

    def test_linear_interpolation(self):
        """Test the two-point formula for real and complex values."""
        assert linear_interpolation(1.5, 1.0, 2.0, 10.0, 20.0) == pytest.approx(15.0)
        assert linear_interpolation(3.0, 1.0, 2.0, 10.0, 20.0) == pytest.approx(30.0)
        assert linear_interpolation(0.5, 0.0, 1.0, 0j, 2j) == pytest.approx(1j)

    def test_get_value_at_inside(self):
        """Test exact hits and interpolation."""
        x = [0.0, 1.0, 3.0]
        y = [0.0, 2.0, 6.0]
        assert get_value_at(x, y, 1.0) == 2.0
        assert get_value_at(x, y, 3.0) == 6.0
        assert get_value_at(x, y, 2.0) == pytest.approx(4.0)

    @pytest.mark.parametrize(
        "mode,expected_low,expected_high",
        [
            (ExtrapolationMode.HOLD, 1.0, 3.0),
            (ExtrapolationMode.ZERO, 0.0, 0.0),
        ],
    )
    def test_get_value_at_outside(self, mode, expected_low, expected_high):
        """Test extrapolation modes of the single-point helper."""
        x = [0.0, 1.0]
        y = [1.0, 3.0]
        assert get_value_at(x, y, -1.0, mode) == expected_low
        assert get_value_at(x, y, 2.0, mode) == expected_high

    def test_get_value_at_nan(self):
        """Test NAN extrapolation of the single-point helper."""
        assert np.isnan(get_value_at([0.0, 1.0], [1.0, 3.0], 5.0, ExtrapolationMode.NAN))

    def test_get_value_at_errors(self):
        """Test invalid inputs."""
        with pytest.raises(LengthMismatchError):
            get_value_at([0.0, 1.0], [1.0], 0.5)
        with pytest.raises(ValueError, match="empty"):
            get_value_at([], [], 0.5)


class TestInterpolatorContract:
    """Tests for behaviour shared by all interpolators."""

    def test_extrapolation_modes(self):
        """Test values outside the sampled range."""
        x = [1.0, 2.0]
        y = [5.0, 7.0]
        target = [0.0, 1.5, 3.0]

        hold = LinearInterpolator(ExtrapolationMode.HOLD).interpolate(x, y, target)
        np.testing.assert_array_almost_equal(hold, [5.0, 6.0, 7.0])

        zero = LinearInterpolator(ExtrapolationMode.ZERO).interpolate(x, y, target)
        np.testing.assert_array_almost_equal(zero, [0.0, 6.0, 0.0])

        nan = LinearInterpolator(ExtrapolationMode.NAN).interpolate(x, y, target)
        assert np.isnan(nan[0]) and np.isnan(nan[2])
        assert nan[1] == pytest.approx(6.0)

    def test_single_sample(self):
        """Test a single raw sample."""
        result = LinearInterpolator(ExtrapolationMode.ZERO).interpolate([2.0], [4.0], [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(result, [0.0, 4.0, 0.0])

    def test_logarithmic_x(self):
        """Test interpolation on a logarithmic axis."""
        interpolator = LinearInterpolator(logarithmic_x=True)
        result = interpolator.interpolate([1.0, 10.0, 100.0], [0.0, 1.0, 2.0], [np.sqrt(1000.0)])
        np.testing.assert_array_almost_equal(result, [1.5])

    def test_empty_target(self):
        """Test that no targets give an empty result."""
        assert len(LinearInterpolator().interpolate([0.0, 1.0], [0.0, 1.0], [])) == 0

    def test_errors(self):
        """Test invalid inputs."""
        with pytest.raises(LengthMismatchError):
            LinearInterpolator().interpolate([0.0, 1.0], [0.0], [0.5])
        with pytest.raises(ValueError, match="empty"):
            LinearInterpolator().interpolate([], [], [0.5])

    def test_unsorted_x_raises_in_debug_mode(self):
        """Test the ordering check in debug mode."""
        with debug_context(True):
            with pytest.raises(ValueError, match="ascending"):
                LinearInterpolator().interpolate([0.0, 2.0, 1.0], [0.0, 1.0, 2.0], [0.5])

    def test_interpolate_complex(self):
        """Test separate interpolation of magnitude and phase."""
        result = LinearInterpolator().interpolate_complex([0.0, 1.0], [1.0 + 0j, 3j], [0.5])
        np.testing.assert_array_almost_equal(result, [2.0 * np.exp(1j * np.pi / 4)])
