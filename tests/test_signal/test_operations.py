"""Tests for signal combinators."""

import itertools

import numpy as np
import pytest

from dspcore.dsp.iir import iir_filter
from dspcore.errors import SampleRateMismatchError
from dspcore.filters import BiquadFilter, FirFilter, GainFilter
from dspcore.signal import (
    FiniteSignal,
    InfiniteSignal,
    WhiteNoise,
    add,
    circular_shift,
    convolve,
    cross_correlate,
    multiply,
    negate,
    process,
    reverse,
)

FS = 48000.0


def _ramp():
    return InfiniteSignal(FS, sample_function=float)


class TestAdd:
    """Tests for signal addition."""

    def test_finite_union_range(self):
        """Test that finite sums span both ranges."""
        s1 = FiniteSignal([1.0, 1.0], FS, start=0)
        s2 = FiniteSignal([2.0, 2.0], FS, start=3)
        result = add(s1, s2)
        assert isinstance(result, FiniteSignal)
        assert result.start == 0
        np.testing.assert_array_equal(result.signal, [1.0, 1.0, 0.0, 2.0, 2.0])

    def test_finite_overlapping(self):
        """Test overlapping operands with the later one first."""
        result = FiniteSignal([1.0, 1.0, 1.0], FS, start=2) + FiniteSignal([5.0, 5.0], FS, start=1)
        assert result.start == 1
        np.testing.assert_array_equal(result.signal, [5.0, 6.0, 1.0, 1.0])

    def test_infinite(self):
        """Test that an infinite operand gives an infinite sum."""
        result = add(FiniteSignal([10.0], FS, start=1), _ramp())
        assert isinstance(result, InfiniteSignal)
        np.testing.assert_array_equal(result.get_windowed_samples(0, 3), [0.0, 11.0, 2.0])

    def test_sample_rate_mismatch(self):
        """Test that operands must share a sample rate."""
        with pytest.raises(SampleRateMismatchError):
            add(FiniteSignal([1.0], 44100.0), FiniteSignal([1.0], 48000.0))


class TestMultiply:
    """Tests for signal multiplication."""

    def test_finite_overlap(self):
        """Test that finite products cover only the overlap."""
        s1 = FiniteSignal([1.0, 2.0, 3.0], FS, start=0)
        s2 = FiniteSignal([2.0, 2.0, 2.0], FS, start=1)
        result = multiply(s1, s2)
        assert result.start == 1
        np.testing.assert_array_equal(result.signal, [4.0, 6.0])

    def test_finite_disjoint(self):
        """Test that disjoint operands give an empty product."""
        result = multiply(FiniteSignal([1.0], FS, start=0), FiniteSignal([1.0], FS, start=5))
        assert result.length == 0

    def test_finite_times_infinite(self):
        """Test that the finite operand defines the range."""
        result = _ramp() * FiniteSignal([1.0, 1.0], FS, start=4)
        assert isinstance(result, FiniteSignal)
        assert result.start == 4
        np.testing.assert_array_equal(result.signal, [4.0, 5.0])

    def test_infinite_times_infinite(self):
        """Test two infinite operands."""
        result = multiply(_ramp(), _ramp())
        np.testing.assert_array_equal(result.get_windowed_samples(-1, 3), [1.0, 0.0, 1.0])


class TestNegateReverseShift:
    """Tests for unary combinators."""

    def test_negate(self):
        """Test negation of both variants."""
        s = -FiniteSignal([1.0, -2.0], FS, start=3)
        assert s.start == 3
        np.testing.assert_array_equal(s.signal, [-1.0, 2.0])
        np.testing.assert_array_equal(negate(_ramp()).get_windowed_samples(1, 2), [-1.0, -2.0])

    def test_subtract(self):
        """Test the subtraction operator."""
        result = FiniteSignal([3.0, 3.0], FS) - FiniteSignal([1.0, 2.0], FS)
        np.testing.assert_array_equal(result.signal, [2.0, 1.0])

    def test_reverse_finite(self):
        """Test time reversal of a finite signal."""
        s = reverse(FiniteSignal([1.0, 2.0, 3.0], FS, start=2))
        assert s.start == -4
        assert s.get_sample(-2) == 1.0
        assert s.get_sample(-4) == 3.0

    def test_reverse_infinite(self):
        """Test time reversal of an infinite signal."""
        s = reverse(_ramp())
        np.testing.assert_array_equal(s.get_windowed_samples(-1, 3), [1.0, 0.0, -1.0])

    def test_circular_shift(self):
        """Test rotation within the signal range."""
        s = circular_shift(FiniteSignal([1.0, 2.0, 3.0], FS, start=1), 1)
        assert s.start == 1
        np.testing.assert_array_equal(s.signal, [3.0, 1.0, 2.0])


class TestConvolve:
    """Tests for convolution."""

    def test_finite_finite(self, rng):
        """Test finite convolution against numpy."""
        x = rng.standard_normal(40)
        h = rng.standard_normal(7)
        result = convolve(FiniteSignal(x, FS, start=-3), FiniteSignal(h, FS, start=5))
        assert result.start == 2
        assert result.length == 46
        np.testing.assert_array_almost_equal(result.signal, np.convolve(x, h))

    @pytest.mark.parametrize("start,length", [(10, 50), (-30, 7), (0, 1), (100, 300)])
    def test_finite_infinite_matches_direct(self, rng, start, length):
        """Test streaming windows against the direct convolution of an excerpt."""
        h = rng.standard_normal(16)
        kernel_start = 2
        noise = WhiteNoise(FS, seed=7)
        result = convolve(FiniteSignal(h, FS, start=kernel_start), noise)
        assert isinstance(result, InfiniteSignal)

        window = result.get_windowed_samples(start, length)

        excerpt = noise.get_windowed_samples(start - kernel_start - len(h) + 1, length + len(h) - 1)
        np.testing.assert_array_almost_equal(window, np.convolve(excerpt, h, mode="valid"))

    def test_infinite_operand_order(self):
        """Test that the finite operand may come second."""
        result = convolve(_ramp(), FiniteSignal([1.0, 1.0], FS))
        np.testing.assert_array_almost_equal(result.get_windowed_samples(1, 3), [1.0, 3.0, 5.0])

    def test_two_infinite_operands(self):
        """Test that one operand must be finite."""
        with pytest.raises(ValueError, match="finite"):
            convolve(_ramp(), _ramp())


def test_cross_correlate(rng):
    """Test that the correlation peak sits at the relative delay."""
    x = rng.standard_normal(32)
    s1 = FiniteSignal(x, FS, start=5)
    s2 = FiniteSignal(x, FS, start=0)
    result = cross_correlate(s1, s2)
    assert result.length == 63
    assert result.start == 5 - 31
    assert result.start + int(np.argmax(result.signal)) == 5

    np.testing.assert_array_almost_equal(result.signal, np.correlate(x, x, mode="full"))


class TestProcess:
    """Tests for running signals through filters."""

    def test_fir_gives_finite_signal(self):
        """Test processing with a finite filter."""
        s = FiniteSignal([1.0, 2.0], FS, start=3)
        result = process(s, GainFilter(FS, gain=3.0))
        assert isinstance(result, FiniteSignal)
        assert result.start == 3
        np.testing.assert_array_almost_equal(result.signal, [3.0, 6.0])

    def test_convolver_output_length(self):
        """Test that convolution filters extend the signal."""
        s = FiniteSignal(np.ones(10), FS)
        result = process(s, FirFilter(FS, fc=1000.0, filter_length=31))
        assert result.length == 40

    def test_iir_gives_infinite_signal(self):
        """Test processing with an IIR filter."""
        biquad = BiquadFilter(FS, fc=1000.0)
        s = FiniteSignal([1.0, 0.5, -0.25], FS, start=2)
        result = process(s, biquad)
        assert isinstance(result, InfiniteSignal)

        expected = list(itertools.islice(iir_filter(s.signal, biquad.b, biquad.a), 20))
        np.testing.assert_array_almost_equal(result.get_windowed_samples(2, 20), expected)
        # Samples before the input starts are zero; windows can be re-read
        np.testing.assert_array_almost_equal(
            result.get_windowed_samples(0, 5), [0.0, 0.0] + expected[:3]
        )

    def test_iir_windows_after_reading_far_ahead(self):
        """Test that earlier windows stay exact after a far-ahead read."""
        biquad = BiquadFilter(FS, fc=1000.0)
        s = FiniteSignal([1.0, -1.0], FS)
        result = process(s, biquad)
        expected = np.fromiter(
            itertools.islice(iir_filter(s.signal, biquad.b, biquad.a), 510), dtype=float
        )

        np.testing.assert_array_almost_equal(result.get_windowed_samples(500, 10), expected[500:])
        biquad.fc = 5000.0
        np.testing.assert_array_almost_equal(result.get_windowed_samples(0, 10), expected[:10])

    def test_no_effect_returns_input(self):
        """Test that an identity filter leaves the signal untouched."""
        s = FiniteSignal([1.0], FS)
        assert process(s, GainFilter(FS)) is s

    def test_errors(self):
        """Test sample rate and variant checks."""
        with pytest.raises(SampleRateMismatchError):
            process(FiniteSignal([1.0], 44100.0), GainFilter(48000.0, gain=2.0))
        with pytest.raises(ValueError, match="finite"):
            process(_ramp(), GainFilter(FS, gain=2.0))
