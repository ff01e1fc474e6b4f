"""Tests for the parameter sanitizer."""

import math
from dataclasses import asdict

import pytest

from speech_mastering.filter_chain.assembler import build_filter_spec
from speech_mastering.filter_chain.models import ExpanderBand, FilterChainConfig
from speech_mastering.filter_chain.sanitizer import sanitize_config, sanitize_float


@pytest.fixture
def broken_chain(chain: FilterChainConfig) -> FilterChainConfig:
    """Configuration with non-finite values scattered across stages."""
    chain.highpass.frequency = math.nan
    chain.noise_reduction.reduction = math.inf
    chain.compressor.threshold_db = -math.inf
    chain.gate.attack = math.nan
    chain.speechnorm.expansion = math.inf
    chain.limiter.ceiling_db = math.nan
    chain.deesser.intensity = math.nan
    chain.target_i = math.nan
    return chain


@pytest.mark.unit
class TestSanitizeFloat:
    """Test cases for sanitize_float."""

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_replaced(self, value: float) -> None:
        """Test NaN and infinities fall back to the default."""
        assert sanitize_float(value, 3.0) == 3.0

    @pytest.mark.parametrize("value", [0.0, -45.0, 12.5])
    def test_finite_passed_through(self, value: float) -> None:
        """Test zero and negative values are valid."""
        assert sanitize_float(value, 3.0) == value


@pytest.mark.unit
class TestSanitizeConfig:
    """Test cases for sanitize_config."""

    def test_non_finite_fields_get_stage_defaults(self, broken_chain: FilterChainConfig) -> None:
        """Test every broken field is replaced with its stage default."""
        sanitize_config(broken_chain)

        assert broken_chain.highpass.frequency == 80.0
        assert broken_chain.noise_reduction.reduction == 12.0
        assert broken_chain.compressor.threshold_db == -18.0
        assert broken_chain.gate.attack == 12.0
        assert broken_chain.speechnorm.expansion == 3.0
        assert broken_chain.limiter.ceiling_db == -1.0
        assert broken_chain.deesser.intensity == 0.0
        assert broken_chain.target_i == -16.0

    def test_valid_negative_values_untouched(self, chain: FilterChainConfig) -> None:
        """Test negative dB settings are not treated as invalid."""
        chain.compressor.threshold_db = -30.0
        chain.noise_reduction.noise_floor = -75.0
        sanitize_config(chain)
        assert chain.compressor.threshold_db == -30.0
        assert chain.noise_reduction.noise_floor == -75.0

    @pytest.mark.parametrize("threshold", [0.0, -0.2, math.nan, math.inf])
    def test_gate_threshold_must_be_positive(
        self, chain: FilterChainConfig, threshold: float
    ) -> None:
        """Test zero, negative and non-finite gate thresholds are reset."""
        chain.gate.threshold = threshold
        sanitize_config(chain)
        assert chain.gate.threshold == 0.01

    def test_broken_expander_bands_dropped(self, chain: FilterChainConfig) -> None:
        """Test expander bands with non-finite values are removed."""
        chain.multiband_expander.bands = [
            ExpanderBand(100.0, 100.0, 0.006, 0.095, 6.0),
            ExpanderBand(300.0, math.nan, 0.005, 0.100, 8.0),
        ]
        sanitize_config(chain)
        assert [band.crossover for band in chain.multiband_expander.bands] == [100.0]

    def test_idempotent(self, broken_chain: FilterChainConfig) -> None:
        """Test sanitizing twice gives the same result as once."""
        once = asdict(sanitize_config(broken_chain))
        twice = asdict(sanitize_config(broken_chain))
        assert once == twice

    def test_description_has_no_non_finite_values(self, broken_chain: FilterChainConfig) -> None:
        """Test the assembled chain never contains NaN or Inf text."""
        broken_chain.dynaudnorm.enabled = True
        broken_chain.declick.enabled = True
        spec = build_filter_spec(sanitize_config(broken_chain)).lower()
        assert "nan" not in spec
        assert "inf" not in spec
