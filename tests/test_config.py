"""Tests for library configuration."""

import pytest

from dspcore.config import DspConfig, config_context, get_config, set_config
from dspcore.filters import GainFilter
from dspcore.signal import FiniteSignal


class TestDspConfig:
    """Tests for the DspConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = DspConfig()
        assert config.default_sample_rate == 44100.0
        assert 48000.0 in config.default_sample_rates
        assert config.min_fft_length == 128

    def test_frozen(self):
        """Test that configurations are immutable."""
        config = DspConfig()
        with pytest.raises(AttributeError):
            config.default_sample_rate = 48000.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_sample_rate": 0.0},
            {"default_sample_rates": (44100.0, -1.0)},
            {"min_fft_length": 0},
            {"parity_tolerance": -1e-3},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            DspConfig(**kwargs)


class TestActiveConfig:
    """Tests for switching the active configuration."""

    def test_set_config(self):
        """Test replacing the active configuration."""
        set_config(DspConfig(default_sample_rate=48000.0))
        assert get_config().default_sample_rate == 48000.0
        assert GainFilter().sample_rate == 48000.0

    def test_set_config_type_check(self):
        """Test that set_config rejects other types."""
        with pytest.raises(TypeError, match="DspConfig"):
            set_config({"default_sample_rate": 48000.0})

    def test_config_context_restores(self):
        """Test that config_context restores the previous configuration."""
        before = get_config()
        with config_context(DspConfig(default_sample_rate=96000.0)) as config:
            assert get_config() is config
            assert GainFilter().sample_rate == 96000.0
        assert get_config() is before

    def test_min_fft_length_applies_to_spectra(self):
        """Test that short signals are zero-padded to the minimum FFT length."""
        with config_context(DspConfig(min_fft_length=16)):
            signal = FiniteSignal([1.0, 0.0, 0.0], 1000.0)
            assert signal.spectrum.n == 16
