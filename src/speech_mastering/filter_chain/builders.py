"""Serialisers turning stage settings into filter-graph fragments.

Every builder takes the whole chain configuration and returns a fragment,
or an empty string when the stage should be left out.
"""

from collections.abc import Callable
from pathlib import Path

from .. import config
from .conversions import db_to_linear
from .models import FilterChainConfig, FilterID

FilterBuilder = Callable[[FilterChainConfig], str]


def build_downmix_filter(chain: FilterChainConfig) -> str:
    """Build the mono downmix fragment."""
    if not chain.downmix.enabled:
        return ""
    return "aformat=channel_layouts=mono"


def build_analysis_filter(chain: FilterChainConfig) -> str:
    """Build the measurement fragment (levels, spectrum and loudness)."""
    if not chain.analysis.enabled:
        return ""
    return (
        "astats=metadata=1:measure_perchannel=all,"
        f"aspectralstats=win_size={config.ANALYSIS_WINDOW_SIZE}"
        f":win_func={config.ANALYSIS_WINDOW_FUNC}:measure=all,"
        "ebur128=metadata=1:peak=sample+true:dualmono=true"
        f":target={chain.target_i:.0f}"
    )


def build_resample_filter(chain: FilterChainConfig) -> str:
    """Build the output format fragment with fixed-size frames."""
    stage = chain.resample
    if not stage.enabled:
        return ""
    return (
        f"aformat=sample_rates={stage.sample_rate}:channel_layouts=mono"
        f":sample_fmts={stage.sample_format},asetnsamples=n={stage.frame_size}"
    )


def build_highpass_filter(chain: FilterChainConfig) -> str:
    """Build the highpass fragment, followed by hum notches when enabled."""
    stage = chain.highpass
    if not stage.enabled:
        return ""

    poles = stage.poles if stage.poles >= 1 else config.HIGHPASS_DEFAULT_POLES
    width = stage.width if stage.width > 0 else config.HIGHPASS_DEFAULT_WIDTH

    spec = (
        f"highpass=f={stage.frequency:.0f}:poles={poles}"
        f":width_type=q:width={width:.3f}:normalize=1"
    )
    if stage.transform:
        spec += f":a={stage.transform}"
    if 0 < stage.mix < 1:
        spec += f":m={stage.mix:.2f}"

    if stage.hum_notch_enabled:
        notches = [
            f"bandreject=f={stage.hum_frequency * harmonic:.0f}"
            f":width_type=h:width={stage.hum_width:.1f}"
            for harmonic in range(1, stage.hum_harmonics + 1)
        ]
        spec = ",".join([spec, *notches])

    return spec


def build_lowpass_filter(chain: FilterChainConfig) -> str:
    """Build the lowpass fragment for ultrasonic and HF noise removal."""
    stage = chain.lowpass
    if not stage.enabled:
        return ""

    poles = stage.poles if stage.poles >= 1 else config.LOWPASS_DEFAULT_POLES
    width = stage.width if stage.width > 0 else config.LOWPASS_DEFAULT_WIDTH

    spec = (
        f"lowpass=f={stage.frequency:.0f}:poles={poles}"
        f":width_type=q:width={width:.3f}:normalize=1"
    )
    if stage.transform:
        spec += f":a={stage.transform}"
    if 0 < stage.mix < 1:
        spec += f":m={stage.mix:.2f}"
    return spec


def build_declick_filter(chain: FilterChainConfig) -> str:
    """Build the click removal fragment."""
    stage = chain.declick
    if not stage.enabled:
        return ""
    return (
        f"adeclick=w={stage.window:.0f}:o=50:a=2"
        f":t={stage.threshold:.1f}:b=2:m={stage.method}"
    )


def build_noise_reduction_filter(chain: FilterChainConfig) -> str:
    """Build the FFT denoiser fragment with noise tracking."""
    stage = chain.noise_reduction
    if not stage.enabled:
        return ""
    return f"afftdn=nr={stage.reduction:.1f}:nf={stage.noise_floor:.1f}:tn=1"


def _expander_curve(threshold_db: float, expansion_db: float) -> str:
    points = [(level, level - expansion_db) for level in config.EXPANDER_CURVE_POINTS]
    points.append((threshold_db, threshold_db))
    points.extend((level, level) for level in config.EXPANDER_UNITY_POINTS)
    return r"\,".join(f"{level:.0f}/{out:.0f}" for level, out in points)


def build_multiband_expander_filter(chain: FilterChainConfig) -> str:
    """
    Build the multiband expander fragment.

    Each band applies the same flat reduction below the threshold, scaled
    by the band's percentage. Commas inside the arguments are escaped so
    they are not read as filter separators.
    """
    stage = chain.multiband_expander
    if not stage.enabled or not stage.bands:
        return ""

    bands = []
    for band in stage.bands:
        # Whole-dB expansion per band
        expansion = round(stage.expansion_db * band.scale_percent / 100.0)
        curve = _expander_curve(stage.threshold_db, expansion)
        bands.append(
            rf"{band.attack:.3f}\,{band.decay:.3f} {band.soft_knee:.0f} "
            f"{curve} {band.crossover:.0f}"
        )

    spec = "mcompand=args=" + " | ".join(bands)
    if stage.makeup_gain_db != 0:
        spec += f",volume={stage.makeup_gain_db:.1f}dB:precision=double"
    return spec


def escape_filter_path(path: Path) -> str:
    """Escape a file path for use as a filter option value."""
    return str(path).replace("\\", "/").replace(":", r"\:")


def build_neural_denoise_filter(chain: FilterChainConfig) -> str:
    """Build the RNN denoiser fragment; empty without a resolved model."""
    stage = chain.neural_denoise
    if not stage.enabled or stage.model_path is None:
        return ""
    return f"arnndn=m={escape_filter_path(stage.model_path)}:mix={stage.mix:.2f}"


def build_gate_filter(chain: FilterChainConfig) -> str:
    """Build the noise gate fragment."""
    stage = chain.gate
    if not stage.enabled:
        return ""
    detection = stage.detection or config.GATE_DEFAULT_DETECTION
    return (
        f"agate=threshold={stage.threshold:.6f}:ratio={stage.ratio:.1f}"
        f":attack={stage.attack:.2f}:release={stage.release:.0f}"
        f":range={stage.range:.4f}:knee={stage.knee:.1f}"
        f":detection={detection}:makeup={stage.makeup:.1f}"
    )


def build_compressor_filter(chain: FilterChainConfig) -> str:
    """Build the compressor fragment, converting dB settings to linear."""
    stage = chain.compressor
    if not stage.enabled:
        return ""
    return (
        f"acompressor=threshold={db_to_linear(stage.threshold_db):.6f}"
        f":ratio={stage.ratio:.1f}:attack={stage.attack:.0f}"
        f":release={stage.release:.0f}:makeup={db_to_linear(stage.makeup_db):.2f}"
        f":knee={stage.knee:.1f}:detection=rms:mix={stage.mix:.2f}"
    )


def build_deesser_filter(chain: FilterChainConfig) -> str:
    """Build the de-esser fragment; empty at zero intensity."""
    stage = chain.deesser
    if not stage.enabled or stage.intensity <= 0:
        return ""
    return (
        f"deesser=i={stage.intensity:.2f}:m={stage.amount:.2f}"
        f":f={stage.frequency_keep:.2f}"
    )


def build_speechnorm_filter(chain: FilterChainConfig) -> str:
    """Build the speech normaliser fragment."""
    stage = chain.speechnorm
    if not stage.enabled:
        return ""
    spec = (
        f"speechnorm=p={stage.peak:.2f}:e={stage.expansion:.2f}"
        f":c={stage.compression:.2f}:t={stage.threshold:.2f}"
        f":r={stage.raise_:.3f}:f={stage.fall:.3f}"
    )
    if stage.rms > 0:
        spec += f":rms={stage.rms:.3f}"
    return spec


def build_dynaudnorm_filter(chain: FilterChainConfig) -> str:
    """Build the dynamic normaliser fragment."""
    stage = chain.dynaudnorm
    if not stage.enabled:
        return ""
    return (
        f"dynaudnorm=f={stage.frame_len}:g={stage.filter_size}"
        f":p={stage.peak:.2f}:m={stage.max_gain:.1f}:r={stage.target_rms:.2f}"
        f":s={stage.compress:.1f}:t={stage.threshold:.2f}"
    )


def build_limiter_filter(chain: FilterChainConfig) -> str:
    """Build the limiter fragment with the ceiling converted to linear."""
    stage = chain.limiter
    if not stage.enabled:
        return ""

    level_in = stage.level_in if stage.level_in != 0 else 1.0
    level_out = stage.level_out if stage.level_out != 0 else 1.0

    spec = (
        f"alimiter=limit={db_to_linear(stage.ceiling_db):.6f}"
        f":attack={stage.attack:.1f}:release={stage.release:.1f}"
        f":level_in={level_in:.4f}:level_out={level_out:.4f}:level=0:latency=1"
    )
    if stage.asc:
        spec += f":asc=1:asc_level={stage.asc_level:.2f}"
    else:
        spec += ":asc=0"
    return spec


FILTER_BUILDERS: dict[FilterID, FilterBuilder] = {
    FilterID.DOWNMIX: build_downmix_filter,
    FilterID.ANALYSIS: build_analysis_filter,
    FilterID.RESAMPLE: build_resample_filter,
    FilterID.HIGHPASS: build_highpass_filter,
    FilterID.LOWPASS: build_lowpass_filter,
    FilterID.DECLICK: build_declick_filter,
    FilterID.NOISE_REDUCTION: build_noise_reduction_filter,
    FilterID.MULTIBAND_EXPANDER: build_multiband_expander_filter,
    FilterID.NEURAL_DENOISE: build_neural_denoise_filter,
    FilterID.GATE: build_gate_filter,
    FilterID.COMPRESSOR: build_compressor_filter,
    FilterID.DEESSER: build_deesser_filter,
    FilterID.SPEECHNORM: build_speechnorm_filter,
    FilterID.DYNAUDNORM: build_dynaudnorm_filter,
    FilterID.LIMITER: build_limiter_filter,
}
