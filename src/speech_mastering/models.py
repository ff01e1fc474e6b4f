"""Data models for audio measurements."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NoiseProfile:
    """Characterisation of the quietest region of a recording."""

    measured_noise_floor: float  # dB
    peak_level: float  # dB
    crest_factor: float  # dB, peak to RMS
    entropy: float  # 0-1, low = tonal, high = broadband


@dataclass(frozen=True)
class AudioMeasurements:
    """
    Measurements produced by the analysis pass.

    Zero is the "not measured" marker for ``input_i`` and the spectral
    fields; tuners keep their defaults when they see it.
    """

    input_i: float = 0.0  # LUFS
    input_lra: float = 0.0  # LU
    noise_floor: float = 0.0  # dB
    spectral_centroid: float = 0.0  # Hz
    spectral_rolloff: float = 0.0  # Hz
    spectral_decrease: float = 0.0
    spectral_skewness: float = 0.0
    spectral_flux: float = 0.0
    max_difference: float = 0.0  # 0-1 normalised
    dynamic_range: float = 0.0  # dB
    spectral_crest: float = 0.0  # dB
    spectral_flatness: float = 0.0  # 0-1
    spectral_kurtosis: float = 0.0
    zero_crossings_rate: float = 0.0  # crossings per sample
    rms_trough: float = 0.0  # dB, quietest RMS interval
    noise_profile: NoiseProfile | None = None
