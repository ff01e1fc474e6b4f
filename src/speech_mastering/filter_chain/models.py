"""Data models for the filter chain: per-stage settings and their aggregate."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .. import config
from ..models import AudioMeasurements


class FilterID(Enum):
    """Identifiers of the stages a chain can contain."""

    DOWNMIX = "downmix"
    ANALYSIS = "analysis"
    RESAMPLE = "resample"
    HIGHPASS = "highpass"
    LOWPASS = "lowpass"
    DECLICK = "declick"
    NOISE_REDUCTION = "noise_reduction"
    MULTIBAND_EXPANDER = "multiband_expander"
    NEURAL_DENOISE = "neural_denoise"
    GATE = "gate"
    COMPRESSOR = "compressor"
    DEESSER = "deesser"
    SPEECHNORM = "speechnorm"
    DYNAUDNORM = "dynaudnorm"
    LIMITER = "limiter"


ANALYSIS_FILTER_ORDER: list[FilterID] = [FilterID.DOWNMIX, FilterID.ANALYSIS]

PROCESSING_FILTER_ORDER: list[FilterID] = [
    FilterID.DOWNMIX,
    FilterID.HIGHPASS,
    FilterID.LOWPASS,
    FilterID.DECLICK,
    FilterID.NOISE_REDUCTION,
    FilterID.MULTIBAND_EXPANDER,
    FilterID.NEURAL_DENOISE,
    FilterID.GATE,
    FilterID.COMPRESSOR,
    FilterID.DEESSER,
    FilterID.SPEECHNORM,
    FilterID.DYNAUDNORM,
    FilterID.LIMITER,
    FilterID.ANALYSIS,
    FilterID.RESAMPLE,
]


@dataclass
class DownmixConfig:
    """Mono downmix."""

    enabled: bool = True


@dataclass
class AnalysisConfig:
    """Measurement filters appended to a pass."""

    enabled: bool = True


@dataclass
class ResampleConfig:
    """Output sample rate, sample format and frame size."""

    enabled: bool = True
    sample_rate: int = config.DEFAULT_SAMPLE_RATE
    sample_format: str = config.DEFAULT_SAMPLE_FORMAT
    frame_size: int = config.DEFAULT_FRAME_SIZE


@dataclass
class HighpassConfig:
    """Rumble removal with an optional mains hum notch."""

    enabled: bool = True
    frequency: float = config.HIGHPASS_DEFAULT_FREQ
    poles: int = config.HIGHPASS_DEFAULT_POLES
    width: float = config.HIGHPASS_DEFAULT_WIDTH
    mix: float = config.HIGHPASS_DEFAULT_MIX
    transform: str = config.HIGHPASS_DEFAULT_TRANSFORM
    hum_notch_enabled: bool = False
    hum_frequency: float = config.HUM_DEFAULT_FREQUENCY
    hum_harmonics: int = config.HUM_DEFAULT_HARMONICS
    hum_width: float = config.HUM_DEFAULT_WIDTH


class ContentType(Enum):
    """Broad classification of programme material."""

    UNKNOWN = "unknown"
    SPEECH = "speech"
    MUSIC = "music"
    MIXED = "mixed"


@dataclass
class LowpassConfig:
    """Ultrasonic and high-frequency noise removal."""

    enabled: bool = True
    frequency: float = config.LOWPASS_DEFAULT_FREQ
    poles: int = config.LOWPASS_DEFAULT_POLES
    width: float = config.LOWPASS_DEFAULT_WIDTH
    mix: float = config.LOWPASS_DEFAULT_MIX
    transform: str = config.LOWPASS_DEFAULT_TRANSFORM
    content_type: ContentType = ContentType.UNKNOWN
    reason: str = ""


@dataclass
class DeclickConfig:
    """Click and mouth-noise removal."""

    enabled: bool = False
    threshold: float = config.DECLICK_DEFAULT_THRESHOLD
    window: float = config.DECLICK_DEFAULT_WINDOW
    method: str = config.DECLICK_DEFAULT_METHOD
    reason: str = ""


@dataclass
class NoiseReductionConfig:
    """FFT broadband noise reduction."""

    enabled: bool = True
    reduction: float = config.NOISE_REDUCTION_BASE
    noise_floor: float = config.NOISE_REDUCTION_DEFAULT_FLOOR


@dataclass
class ExpanderBand:
    """One band of the multiband expander."""

    crossover: float  # Hz, upper edge of the band
    scale_percent: float  # expansion scaling for this band
    attack: float  # seconds
    decay: float  # seconds
    soft_knee: float  # dB


@dataclass
class MultibandExpanderConfig:
    """Per-band downward expansion for quiet room tone."""

    enabled: bool = False
    threshold_db: float = config.EXPANDER_DEFAULT_THRESHOLD
    expansion_db: float = config.EXPANDER_DEFAULT_EXPANSION
    makeup_gain_db: float = 0.0
    bands: list[ExpanderBand] = field(default_factory=list)


@dataclass
class NeuralDenoiseConfig:
    """RNN noise suppression; needs a resolved model file."""

    enabled: bool = False
    mix: float = config.DENOISE_DEFAULT_MIX
    model_path: Path | None = None


@dataclass
class GateConfig:
    """Noise gate. ``threshold`` and ``range`` are linear amplitudes."""

    enabled: bool = True
    threshold: float = config.GATE_DEFAULT_THRESHOLD
    ratio: float = config.GATE_DEFAULT_RATIO
    attack: float = config.GATE_DEFAULT_ATTACK
    release: float = config.GATE_DEFAULT_RELEASE
    range: float = config.GATE_DEFAULT_RANGE
    knee: float = config.GATE_DEFAULT_KNEE
    makeup: float = config.GATE_DEFAULT_MAKEUP
    detection: str = config.GATE_DEFAULT_DETECTION


@dataclass
class CompressorConfig:
    """Levelling compressor. Threshold and makeup are in dB."""

    enabled: bool = True
    threshold_db: float = config.COMP_DEFAULT_THRESHOLD
    ratio: float = config.COMP_DEFAULT_RATIO
    attack: float = config.COMP_DEFAULT_ATTACK
    release: float = config.COMP_DEFAULT_RELEASE
    makeup_db: float = config.COMP_DEFAULT_MAKEUP
    knee: float = config.COMP_DEFAULT_KNEE
    mix: float = config.COMP_DEFAULT_MIX


@dataclass
class DeesserConfig:
    """Sibilance control. Zero intensity omits the stage."""

    enabled: bool = True
    intensity: float = 0.0
    amount: float = config.DEESS_DEFAULT_AMOUNT
    frequency_keep: float = config.DEESS_DEFAULT_FREQUENCY_KEEP


@dataclass
class SpeechnormConfig:
    """Speech-aware loudness normalisation."""

    enabled: bool = True
    peak: float = config.SPEECHNORM_PEAK
    expansion: float = config.SPEECHNORM_DEFAULT_EXPANSION
    compression: float = config.SPEECHNORM_DEFAULT_COMPRESSION
    threshold: float = config.SPEECHNORM_DEFAULT_THRESHOLD
    raise_: float = config.SPEECHNORM_SMOOTHING
    fall: float = config.SPEECHNORM_SMOOTHING
    rms: float = 0.0


@dataclass
class DynaudnormConfig:
    """Dynamic audio normaliser."""

    enabled: bool = False
    frame_len: int = config.DYNAUDNORM_FRAME_LEN
    filter_size: int = config.DYNAUDNORM_FILTER_SIZE
    peak: float = config.DYNAUDNORM_PEAK
    max_gain: float = config.DYNAUDNORM_DEFAULT_MAX_GAIN
    target_rms: float = 0.0
    compress: float = 0.0
    threshold: float = 0.0


@dataclass
class LimiterConfig:
    """Brick-wall limiter. ``ceiling_db`` is converted to linear on output."""

    enabled: bool = True
    ceiling_db: float = config.LIMITER_DEFAULT_CEILING
    attack: float = config.LIMITER_DEFAULT_ATTACK
    release: float = config.LIMITER_DEFAULT_RELEASE
    asc: bool = True
    asc_level: float = config.LIMITER_DEFAULT_ASC_LEVEL
    level_in: float = 1.0
    level_out: float = 1.0


@dataclass
class FilterChainConfig:
    """All stage settings plus the order they are assembled in."""

    downmix: DownmixConfig = field(default_factory=DownmixConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    resample: ResampleConfig = field(default_factory=ResampleConfig)
    highpass: HighpassConfig = field(default_factory=HighpassConfig)
    lowpass: LowpassConfig = field(default_factory=LowpassConfig)
    declick: DeclickConfig = field(default_factory=DeclickConfig)
    noise_reduction: NoiseReductionConfig = field(default_factory=NoiseReductionConfig)
    multiband_expander: MultibandExpanderConfig = field(
        default_factory=MultibandExpanderConfig
    )
    neural_denoise: NeuralDenoiseConfig = field(default_factory=NeuralDenoiseConfig)
    gate: GateConfig = field(default_factory=GateConfig)
    compressor: CompressorConfig = field(default_factory=CompressorConfig)
    deesser: DeesserConfig = field(default_factory=DeesserConfig)
    speechnorm: SpeechnormConfig = field(default_factory=SpeechnormConfig)
    dynaudnorm: DynaudnormConfig = field(default_factory=DynaudnormConfig)
    limiter: LimiterConfig = field(default_factory=LimiterConfig)

    filter_order: list[FilterID] = field(
        default_factory=lambda: list(PROCESSING_FILTER_ORDER)
    )

    target_i: float = config.DEFAULT_TARGET_I
    target_tp: float = config.DEFAULT_TARGET_TP
    target_lra: float = config.DEFAULT_TARGET_LRA

    # Filled in by adapt_config
    measurements: AudioMeasurements | None = None
    noise_floor: float = 0.0

    def stages(self) -> list[object]:
        """Return every per-stage settings object."""
        return [
            self.downmix,
            self.analysis,
            self.resample,
            self.highpass,
            self.lowpass,
            self.declick,
            self.noise_reduction,
            self.multiband_expander,
            self.neural_denoise,
            self.gate,
            self.compressor,
            self.deesser,
            self.speechnorm,
            self.dynaudnorm,
            self.limiter,
        ]


@dataclass(frozen=True)
class StageDescriptor:
    """A serialised stage: its identifier and filter-graph fragment."""

    filter_id: FilterID
    fragment: str


def default_filter_config() -> FilterChainConfig:
    """Create a configuration with default settings and processing order."""
    return FilterChainConfig()
