"""Tests for filter cascades."""

import numpy as np
import pytest

from dspcore.errors import SampleRateMismatchError
from dspcore.filters import (
    BiquadFilter,
    DelayFilter,
    FilterSet,
    FiniteFilterSet,
    GainFilter,
    InvertFilter,
    chain,
    get_impulse_response,
)

FS = 48000.0


def _counter(f):
    calls = []
    f.changed.subscribe(calls.append)
    return calls


class TestFilterSet:
    """Tests for FilterSet."""

    def test_process_in_order(self):
        """Test that children are applied in order."""
        gain = GainFilter(FS, gain=2.0)
        fs = FilterSet([gain, InvertFilter(FS)])
        assert list(fs.process([1.0, 1.0, 1.0])) == [-2.0, -2.0, -2.0]

    def test_sample_rate_from_children(self):
        """Test that the set inherits the first child's sample rate."""
        assert FilterSet([GainFilter(FS)]).sample_rate == FS
        with pytest.raises(SampleRateMismatchError):
            FilterSet([GainFilter(FS), GainFilter(44100.0)])

    def test_has_effect_is_any(self):
        """Test that the set has an effect iff any child does."""
        gain = GainFilter(FS)
        invert = InvertFilter(FS)
        fs = FilterSet([gain, invert])
        assert fs.has_effect
        invert.enabled = False
        assert not fs.has_effect
        gain.gain = 0.5
        assert fs.has_effect
        assert not FilterSet(sample_rate=FS).has_effect

    def test_has_infinite_impulse_response_is_any(self):
        """Test the capability flag of a set."""
        fs = FilterSet([GainFilter(FS)])
        assert not fs.has_infinite_impulse_response
        fs.append(BiquadFilter(FS))
        assert fs.has_infinite_impulse_response

    def test_child_change_bubbles_once(self):
        """Test that a child parameter change raises the set's changed once."""
        gain = GainFilter(FS)
        fs = FilterSet([gain, InvertFilter(FS)])
        calls = _counter(fs)
        gain.gain = 4.0
        assert calls == [fs]

    def test_mutations_fire_once_each(self):
        """Test that every structural mutation raises changed exactly once."""
        fs = FilterSet(sample_rate=FS)
        calls = _counter(fs)
        a, b, c = GainFilter(FS, gain=2.0), InvertFilter(FS), DelayFilter(FS)

        fs.append(a)
        fs.insert(0, b)
        fs.extend([c])
        fs[2] = GainFilter(FS)
        del fs[0]
        fs.remove(a)
        fs.append(c)
        assert fs.pop() is c
        fs.clear()
        assert len(calls) == 9
        assert len(fs) == 0

    def test_removed_children_are_unsubscribed(self):
        """Test that removed children no longer notify the set."""
        gain = GainFilter(FS)
        fs = FilterSet([gain])
        fs.remove(gain)
        calls = _counter(fs)
        gain.gain = 3.0
        assert calls == []
        assert len(gain.changed) == 0

    def test_replaced_child_is_unsubscribed(self):
        """Test that a replaced child is detached."""
        old = GainFilter(FS)
        fs = FilterSet([old])
        fs[0] = InvertFilter(FS)
        assert len(old.changed) == 0
        assert isinstance(fs[0], InvertFilter)

    def test_type_check(self):
        """Test that only filters can be added."""
        with pytest.raises(TypeError):
            FilterSet(sample_rate=FS).append("gain")

    def test_chain(self):
        """Test cascading two filters."""
        gain = GainFilter(FS, gain=2.0)
        invert = InvertFilter(FS)
        fs = chain(gain, invert)
        assert isinstance(fs, FilterSet)
        assert fs.filters == (gain, invert)

        delay = DelayFilter(FS)
        assert chain(fs, delay) is fs
        assert fs[-1] is delay


class TestFiniteFilterSet:
    """Tests for FiniteFilterSet."""

    def test_rejects_iir_children(self):
        """Test that IIR filters cannot join a finite set."""
        with pytest.raises(TypeError, match="not a finite filter"):
            FiniteFilterSet([BiquadFilter(FS)])
        fs = FiniteFilterSet(sample_rate=FS)
        with pytest.raises(TypeError):
            fs.append(BiquadFilter(FS))

    def test_process_array(self):
        """Test that a finite set is itself finite."""
        fs = FiniteFilterSet([GainFilter(FS, gain=3.0), InvertFilter(FS)])
        assert not fs.has_infinite_impulse_response
        np.testing.assert_array_equal(fs.process_array([1.0, 2.0]), [-3.0, -6.0])


class TestImpulseResponse:
    """Tests for get_impulse_response."""

    def test_finite_filter(self):
        """Test impulse responses of finite filters."""
        f = FilterSet([GainFilter(FS, gain=0.5), DelayFilter(FS, delay=2.0 / FS)])
        np.testing.assert_array_equal(get_impulse_response(f), [0.0, 0.0, 0.5])
        np.testing.assert_array_equal(get_impulse_response(f, 5), [0.0, 0.0, 0.5, 0.0, 0.0])
        np.testing.assert_array_equal(get_impulse_response(f, 2), [0.0, 0.0])

    def test_no_effect_is_dirac(self):
        """Test that an identity filter has a unit impulse response."""
        np.testing.assert_array_equal(get_impulse_response(GainFilter(FS), 3), [1.0, 0.0, 0.0])

    def test_infinite_filter_requires_length(self):
        """Test that IIR responses need an explicit length."""
        biquad = BiquadFilter(FS)
        with pytest.raises(ValueError, match="length"):
            get_impulse_response(biquad)
        assert len(get_impulse_response(biquad, 100)) == 100
