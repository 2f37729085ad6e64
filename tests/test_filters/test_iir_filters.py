"""Tests for custom IIR, biquad and Butterworth filters."""

from itertools import islice

import numpy as np
import pytest

from dspcore.dsp.iir import BiquadType, PassType, iir_filter
from dspcore.errors import LengthMismatchError
from dspcore.filters import (
    BiquadFilter,
    ButterworthFilter,
    CustomIirFilter,
    FilterSet,
    get_impulse_response,
)

FS = 48000.0


def _counter(f):
    calls = []
    f.changed.subscribe(calls.append)
    return calls


class TestCustomIirFilter:
    """Tests for CustomIirFilter."""

    def test_no_coefficients_has_no_effect(self):
        """Test that a filter without coefficients is an identity."""
        f = CustomIirFilter(FS)
        assert not f.has_effect
        assert f.order == 0
        np.testing.assert_array_equal(f.frequency_response([0.0, 1000.0]), [1.0, 1.0])

    def test_coefficient_checks(self):
        """Test validation of coefficient arrays."""
        with pytest.raises(ValueError, match="Both a and b"):
            CustomIirFilter(FS, a=[1.0, 0.5])
        with pytest.raises(LengthMismatchError):
            CustomIirFilter(FS, a=[1.0, 0.5], b=[1.0])
        with pytest.raises(ValueError, match="cannot be 0"):
            CustomIirFilter(FS, a=[0.0, 0.5], b=[1.0, 0.0])

    def test_one_pole_response(self):
        """Test the impulse response of y[n] = x[n] + 0.5 y[n-1]."""
        f = CustomIirFilter(FS, a=[1.0, -0.5], b=[1.0, 0.0])
        assert f.has_effect
        assert f.order == 1
        np.testing.assert_array_almost_equal(
            get_impulse_response(f, 4), [1.0, 0.5, 0.25, 0.125]
        )

    def test_set_coefficients_fires(self):
        """Test that replacing coefficients raises changed once."""
        f = CustomIirFilter(FS)
        calls = _counter(f)
        f.set_coefficients([1.0, -0.5], [0.5, 0.5])
        assert calls == [f]
        np.testing.assert_array_equal(f.b, [0.5, 0.5])

    def test_output_continues_after_input(self):
        """Test that the IIR output is unbounded for finite input."""
        f = CustomIirFilter(FS, a=[1.0, -0.5], b=[1.0, 0.0])
        assert f.has_infinite_impulse_response
        out = list(islice(f.process([1.0]), 20))
        assert len(out) == 20
        assert out[-1] == pytest.approx(0.5**19)


class TestBiquadFilter:
    """Tests for BiquadFilter."""

    def test_defaults(self):
        """Test default parameters."""
        f = BiquadFilter(FS)
        assert f.biquad_type is BiquadType.HIGHPASS
        assert f.fc == 1000.0
        assert f.q == pytest.approx(0.71)
        assert f.gain == 0.0
        assert f.has_effect

    def test_lowpass_coefficients_at_quarter_rate(self):
        """Test normalised coefficients of a lowpass at fs/4."""
        q = 1.0 / np.sqrt(2.0)
        f = BiquadFilter(FS, BiquadType.LOWPASS, FS / 4, q)
        alpha = 1.0 / (2.0 * q)
        assert f.b0n == pytest.approx(0.5 / (1.0 + alpha))
        assert f.b1n == pytest.approx(1.0 / (1.0 + alpha))
        assert f.b2n == pytest.approx(0.5 / (1.0 + alpha))
        assert f.a1n == pytest.approx(0.0, abs=1e-12)
        assert f.a2n == pytest.approx((1.0 - alpha) / (1.0 + alpha))

    def test_each_setter_fires_once_and_recomputes(self):
        """Test that every parameter change recomputes coefficients and notifies once."""
        f = BiquadFilter(FS, BiquadType.PEAKING, 1000.0, 1.0, 6.0)
        calls = _counter(f)
        before = f.b0n

        f.fc = 2000.0
        assert len(calls) == 1
        assert f.b0n != before

        f.q = 2.0
        f.gain = -3.0
        f.biquad_type = BiquadType.NOTCH
        assert len(calls) == 4

        f.q = 2.0
        assert len(calls) == 4

    def test_invalid_parameters_have_no_effect(self):
        """Test the validity window of biquad parameters."""
        f = BiquadFilter(FS)
        f.fc = FS / 2
        assert not f.has_effect
        f.fc = 1000.0
        f.q = 0.0
        assert not f.has_effect
        f.q = 1.0
        f.biquad_type = BiquadType.PEAKING
        f.gain = float("nan")
        assert not f.has_effect
        f.biquad_type = BiquadType.LOWPASS
        assert f.has_effect

    def test_is_gain_used(self):
        """Test which types depend on gain."""
        assert BiquadFilter(FS, BiquadType.LOWSHELF).is_gain_used
        assert not BiquadFilter(FS, BiquadType.BANDPASS).is_gain_used

    def test_frequency_response(self):
        """Test the lowpass magnitude at DC and near Nyquist."""
        f = BiquadFilter(FS, BiquadType.LOWPASS, 1000.0, 0.71)
        h = np.abs(f.frequency_response([0.0, 20000.0]))
        assert h[0] == pytest.approx(1.0)
        assert h[1] < 0.01

    def test_change_bubbles_through_set(self):
        """Test that a biquad change raises its set's changed once."""
        f = BiquadFilter(FS)
        fs = FilterSet([f])
        calls = _counter(fs)
        f.fc = 500.0
        assert calls == [fs]


class TestButterworthFilter:
    """Tests for ButterworthFilter."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8])
    @pytest.mark.parametrize("pass_type", [PassType.LOWPASS, PassType.HIGHPASS])
    def test_corner_is_minus_3db(self, order, pass_type):
        """Test that the magnitude at the corner frequency is 1/sqrt(2)."""
        f = ButterworthFilter(FS, pass_type, order, 2000.0)
        h = f.frequency_response([2000.0])
        assert np.abs(h[0]) == pytest.approx(1.0 / np.sqrt(2.0), rel=1e-6)

    def test_sections(self):
        """Test the number and kind of sections."""
        f = ButterworthFilter(FS, PassType.LOWPASS, 5, 1000.0)
        sections = f.sections
        assert len(sections) == 3
        assert isinstance(sections[0], CustomIirFilter)
        assert all(isinstance(s, BiquadFilter) for s in sections[1:])
        assert f.sections is sections

    def test_change_rebuilds_sections(self):
        """Test that a parameter change invalidates the cascade."""
        f = ButterworthFilter(FS, PassType.LOWPASS, 2, 1000.0)
        calls = _counter(f)
        old = f.sections
        f.order = 4
        assert len(calls) == 1
        assert f.sections is not old
        assert len(f.sections) == 2

    def test_has_effect(self):
        """Test the validity window of order and corner frequency."""
        f = ButterworthFilter(FS)
        assert f.has_effect
        f.order = 0
        assert not f.has_effect
        f.order = 2
        f.fc = FS
        assert not f.has_effect
        np.testing.assert_array_equal(f.frequency_response([100.0]), [1.0])

    def test_process_matches_cascade(self):
        """Test that processing equals running the sections in order."""
        f = ButterworthFilter(FS, PassType.LOWPASS, 3, 3000.0)
        n = 64
        expected = np.zeros(n)
        expected[0] = 1.0
        for section in f.sections:
            expected = np.fromiter(islice(iir_filter(expected, section.b, section.a), n), float)
        np.testing.assert_array_almost_equal(get_impulse_response(f, n), expected)

    def test_lowpass_dc_gain(self):
        """Test that a lowpass impulse response sums to unity."""
        f = ButterworthFilter(FS, PassType.LOWPASS, 4, 2000.0)
        assert get_impulse_response(f, 4096).sum() == pytest.approx(1.0, abs=1e-6)
