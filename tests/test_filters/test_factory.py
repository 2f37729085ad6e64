"""Tests for the filter factory."""

import pytest

from dspcore.filters import (
    BiquadFilter,
    CustomConvolver,
    Filter,
    FilterType,
    create_filter,
)


class TestCreateFilter:
    """Tests for create_filter."""

    @pytest.mark.parametrize("filter_type", list(FilterType))
    def test_every_type(self, filter_type):
        """Test that every filter type can be created."""
        f = create_filter(filter_type, 48000.0)
        assert isinstance(f, Filter)
        assert f.sample_rate == 48000.0

    def test_from_string(self):
        """Test creation from the type's string value."""
        assert isinstance(create_filter("biquad"), BiquadFilter)
        convolver = create_filter("custom_convolver", 48000.0)
        assert isinstance(convolver, CustomConvolver)
        assert not convolver.has_effect

    def test_unknown_type(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown filter type"):
            create_filter("wah")
