"""Shared fixtures for speech mastering tests."""

import pytest

from speech_mastering.filter_chain.models import FilterChainConfig, default_filter_config
from speech_mastering.models import AudioMeasurements, NoiseProfile


@pytest.fixture
def chain() -> FilterChainConfig:
    """Fresh default configuration."""
    return default_filter_config()


@pytest.fixture
def broadband_profile() -> NoiseProfile:
    """Hiss-like noise profile from a moderately quiet room."""
    return NoiseProfile(
        measured_noise_floor=-50.0, peak_level=-42.0, crest_factor=8.0, entropy=0.8
    )


@pytest.fixture
def typical_measurements(broadband_profile: NoiseProfile) -> AudioMeasurements:
    """Measurements of an ordinary home podcast recording."""
    return AudioMeasurements(
        input_i=-24.0,
        input_lra=9.0,
        noise_floor=-58.0,
        spectral_centroid=4500.0,
        spectral_rolloff=9500.0,
        spectral_decrease=-0.02,
        spectral_skewness=0.6,
        spectral_flux=0.02,
        max_difference=0.08,
        dynamic_range=24.0,
        spectral_crest=28.0,
        spectral_flatness=0.1,
        rms_trough=-82.0,
        noise_profile=broadband_profile,
    )
