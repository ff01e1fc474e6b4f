"""Adaptive tuning of filter chain parameters from analysis measurements."""

from .. import config
from ..logging_utils import get_logger
from ..models import AudioMeasurements
from .conversions import clamp, db_to_linear
from .models import ContentType, ExpanderBand, FilterChainConfig
from .sanitizer import sanitize_config

logger = get_logger(__name__)


def calculate_lufs_gap(target_i: float, input_i: float) -> float:
    """
    Get the loudness shortfall between the target and the measured input.

    Args:
        target_i: Target integrated loudness in LUFS
        input_i: Measured integrated loudness in LUFS, 0 when not measured

    Returns:
        ``target_i - input_i``, or 0.0 when the input was not measured
    """
    if input_i != 0.0:
        return target_i - input_i
    return 0.0


def adapt_config(
    chain: FilterChainConfig,
    measurements: AudioMeasurements,
    mains_frequency: float | None = None,
) -> FilterChainConfig:
    """
    Tune every stage of ``chain`` in place from the analysis measurements.

    The tuners are independent of each other; the sanitizer runs last so
    no non-finite value survives.

    Args:
        chain: Configuration to tune
        measurements: Results of the analysis pass
        mains_frequency: Local mains frequency in Hz for the hum notch,
            the configured frequency is kept when None

    Returns:
        The same configuration object
    """
    chain.measurements = measurements
    chain.noise_floor = measurements.noise_floor

    lufs_gap = calculate_lufs_gap(chain.target_i, measurements.input_i)
    logger.debug(
        f"Adapting chain: input {measurements.input_i:.1f} LUFS, "
        f"target {chain.target_i:.1f} LUFS, gap {lufs_gap:.1f} dB"
    )

    tune_highpass(chain, measurements)
    tune_lowpass(chain, measurements)
    tune_hum_notch(chain, measurements, mains_frequency)
    tune_declick(chain, measurements)
    tune_noise_reduction(chain, measurements, lufs_gap)
    tune_multiband_expander(chain, measurements)
    tune_deesser(chain, measurements)
    tune_gate(chain, measurements)
    tune_compression(chain, measurements)
    tune_dynaudnorm(chain)
    tune_speechnorm(chain, measurements, lufs_gap)
    tune_limiter(chain, measurements)

    return sanitize_config(chain)


def tune_noise_reduction(
    chain: FilterChainConfig, measurements: AudioMeasurements, lufs_gap: float
) -> None:
    """Scale noise reduction with how much gain the recording will receive."""
    stage = chain.noise_reduction

    if measurements.input_i == 0.0:
        stage.reduction = config.NOISE_REDUCTION_BASE
    else:
        stage.reduction = clamp(
            config.NOISE_REDUCTION_BASE + lufs_gap,
            config.NOISE_REDUCTION_MIN,
            config.NOISE_REDUCTION_MAX,
        )

    if measurements.noise_floor != 0.0:
        stage.noise_floor = clamp(
            measurements.noise_floor,
            config.AFFTDN_NOISE_FLOOR_MIN,
            config.AFFTDN_NOISE_FLOOR_MAX,
        )

    logger.trace(f"Noise reduction: {stage.reduction:.1f} dB, floor {stage.noise_floor:.1f} dB")


def tune_highpass(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """
    Pick the highpass cutoff and slope from voice brightness and warmth.

    Darker voices get lower cutoffs, broadband room noise raises the cutoff,
    and warm or bass-heavy voices get a gentle, partially mixed slope.
    """
    centroid = measurements.spectral_centroid
    if centroid <= 0:
        return

    stage = chain.highpass

    if centroid > config.HIGHPASS_BRIGHT_CENTROID:
        frequency = config.HIGHPASS_BRIGHT_VOICE_FREQ
    elif centroid > config.HIGHPASS_NORMAL_CENTROID:
        frequency = config.HIGHPASS_NORMAL_VOICE_FREQ
    else:
        frequency = config.HIGHPASS_DARK_VOICE_FREQ

    profile = measurements.noise_profile
    if profile is not None and profile.entropy >= config.HIGHPASS_BROADBAND_ENTROPY:
        if profile.measured_noise_floor > config.HIGHPASS_NOISY_FLOOR:
            frequency += config.HIGHPASS_NOISY_BOOST
        elif profile.measured_noise_floor > config.HIGHPASS_MODERATE_FLOOR:
            frequency += config.HIGHPASS_MODERATE_BOOST
    frequency = min(frequency, config.HIGHPASS_MAX_FREQ)

    stage.poles = config.HIGHPASS_DEFAULT_POLES
    stage.width = config.HIGHPASS_DEFAULT_WIDTH
    stage.mix = config.HIGHPASS_DEFAULT_MIX

    decrease = measurements.spectral_decrease
    if decrease < config.HIGHPASS_VERY_WARM_DECREASE:
        frequency = config.HIGHPASS_VERY_WARM_FREQ
        stage.poles = config.HIGHPASS_GENTLE_POLES
        stage.width = config.HIGHPASS_GENTLE_WIDTH
        stage.mix = config.HIGHPASS_VERY_WARM_MIX
    elif measurements.spectral_skewness > config.HIGHPASS_BASS_SKEWNESS:
        frequency = config.HIGHPASS_SKEWED_FREQ
        stage.poles = config.HIGHPASS_GENTLE_POLES
        stage.width = config.HIGHPASS_GENTLE_WIDTH
        stage.mix = config.HIGHPASS_SKEWED_MIX
    elif decrease < config.HIGHPASS_WARM_DECREASE:
        frequency = min(frequency, config.HIGHPASS_WARM_MAX_FREQ)

    stage.frequency = frequency
    logger.trace(
        f"Highpass: {stage.frequency:.0f} Hz, poles {stage.poles}, "
        f"width {stage.width:.3f}, mix {stage.mix:.2f}"
    )


def detect_content_type(measurements: AudioMeasurements) -> ContentType:
    """
    Classify the recording as speech, music or a mix of both.

    Speech is peaky (high kurtosis and crest), tonal and steady; music is
    flatter and changes more between frames. Each of the four indicators
    votes for one side, and a side needs three votes to win.

    Args:
        measurements: Results of the analysis pass

    Returns:
        SPEECH, MUSIC, or MIXED when neither side has enough votes
    """
    speech_votes = sum([
        measurements.spectral_kurtosis > config.CONTENT_SPEECH_KURTOSIS,
        measurements.spectral_flatness < config.CONTENT_SPEECH_FLATNESS,
        measurements.spectral_flux < config.CONTENT_SPEECH_FLUX,
        measurements.spectral_crest > config.CONTENT_SPEECH_CREST,
    ])
    music_votes = sum([
        measurements.spectral_kurtosis < config.CONTENT_MUSIC_KURTOSIS,
        measurements.spectral_flatness > config.CONTENT_MUSIC_FLATNESS,
        measurements.spectral_flux > config.CONTENT_MUSIC_FLUX,
        measurements.spectral_crest < config.CONTENT_MUSIC_CREST,
    ])

    if speech_votes >= config.CONTENT_SCORE_THRESHOLD:
        return ContentType.SPEECH
    if music_votes >= config.CONTENT_SCORE_THRESHOLD:
        return ContentType.MUSIC
    return ContentType.MIXED


def tune_lowpass(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """
    Enable the lowpass only for speech with ultrasonic or HF noise content.

    Music and mixed material keep their full spectrum, and dark voices have
    nothing up top worth removing.
    """
    rolloff = measurements.spectral_rolloff
    centroid = measurements.spectral_centroid
    if centroid <= 0 or rolloff <= 0:
        return

    stage = chain.lowpass
    stage.content_type = detect_content_type(measurements)
    stage.enabled = False

    if stage.content_type == ContentType.MUSIC:
        stage.reason = "music content detected"
    elif stage.content_type == ContentType.MIXED:
        stage.reason = "mixed content, conservative"
    elif rolloff < config.LOWPASS_DARK_ROLLOFF:
        stage.reason = "voice already dark (rolloff < 8kHz)"
    elif rolloff > config.LOWPASS_ULTRASONIC_ROLLOFF:
        stage.enabled = True
        stage.frequency = min(
            rolloff + config.LOWPASS_ULTRASONIC_MARGIN, config.LOWPASS_MAX_FREQ
        )
        stage.reason = "ultrasonic cleanup (rolloff > 14kHz)"
    elif (
        measurements.zero_crossings_rate > config.LOWPASS_HF_NOISE_ZCR
        and centroid < config.LOWPASS_HF_NOISE_CENTROID
    ):
        stage.enabled = True
        stage.frequency = config.LOWPASS_HF_NOISE_FREQ
        stage.reason = "high ZCR with low centroid (HF noise)"
    else:
        stage.reason = "no HF issues detected"

    if stage.enabled:
        logger.debug(f"Lowpass enabled at {stage.frequency:.0f} Hz: {stage.reason}")
    else:
        logger.debug(f"Lowpass disabled: {stage.reason} ({stage.content_type.value})")


def tune_hum_notch(
    chain: FilterChainConfig,
    measurements: AudioMeasurements,
    mains_frequency: float | None = None,
) -> None:
    """Enable the mains hum notch when the noise is tonal and audible."""
    profile = measurements.noise_profile
    stage = chain.highpass
    if mains_frequency is not None:
        stage.hum_frequency = mains_frequency

    stage.hum_notch_enabled = (
        profile is not None
        and profile.entropy < config.HUM_TONAL_ENTROPY
        and profile.measured_noise_floor > config.HUM_MIN_FLOOR
    )
    if stage.hum_notch_enabled:
        logger.debug(
            f"Hum notch enabled at {stage.hum_frequency:.0f} Hz "
            f"with {stage.hum_harmonics} harmonics"
        )


def tune_deesser(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """Set de-esser intensity from brightness and high-frequency extension."""
    centroid = measurements.spectral_centroid
    if centroid <= 0:
        return

    if centroid > config.DEESS_BRIGHT_CENTROID:
        intensity = config.DEESS_BRIGHT_INTENSITY
    elif centroid > config.DEESS_NORMAL_CENTROID:
        intensity = config.DEESS_NORMAL_INTENSITY
    else:
        intensity = config.DEESS_DARK_INTENSITY

    rolloff = measurements.spectral_rolloff
    if rolloff <= 0:
        chain.deesser.intensity = intensity
        logger.trace(f"De-esser (centroid only): intensity {intensity:.2f}")
        return

    if rolloff < config.DEESS_NO_SIBILANCE_ROLLOFF:
        intensity = 0.0
    elif rolloff < config.DEESS_LIMITED_ROLLOFF:
        intensity *= config.DEESS_LIMITED_FACTOR
    elif rolloff > config.DEESS_EXTENSIVE_ROLLOFF:
        intensity *= config.DEESS_EXTENSIVE_FACTOR

    if intensity < config.DEESS_MIN_INTENSITY:
        intensity = 0.0
    else:
        intensity = min(intensity, config.DEESS_MAX_INTENSITY)

    chain.deesser.intensity = intensity
    logger.trace(f"De-esser: intensity {intensity:.2f} (rolloff {rolloff:.0f} Hz)")


def _gate_threshold_db(measurements: AudioMeasurements) -> float:
    profile = measurements.noise_profile

    if profile is not None and profile.crest_factor > config.GATE_CREST_FACTOR_THRESHOLD:
        return profile.peak_level + config.GATE_PEAK_HEADROOM

    if profile is not None and profile.measured_noise_floor < 0:
        reference = profile.measured_noise_floor
    else:
        reference = measurements.noise_floor

    if reference < config.GATE_NOISY_REFERENCE:
        headroom = config.GATE_NOISY_HEADROOM
    elif reference < config.GATE_MODERATE_REFERENCE:
        headroom = config.GATE_MODERATE_HEADROOM
    else:
        headroom = config.GATE_CLEAN_HEADROOM
    return reference + headroom


def _gate_detection(measurements: AudioMeasurements) -> str:
    profile = measurements.noise_profile
    if profile is None:
        return "rms"
    if profile.entropy < config.GATE_TONAL_ENTROPY or profile.crest_factor >= config.GATE_BLEED_CREST:
        return "rms"
    if profile.entropy > config.GATE_BROADBAND_ENTROPY and profile.crest_factor < config.GATE_CLEAN_CREST:
        return "peak"
    return "rms"


def _gate_release(measurements: AudioMeasurements) -> float:
    release = config.GATE_BASE_RELEASE + config.GATE_HOLD_COMPENSATION

    profile = measurements.noise_profile
    if profile is not None:
        if profile.entropy < config.GATE_VERY_TONAL_ENTROPY:
            release += config.GATE_VERY_TONAL_RELEASE_ADJ
        elif profile.entropy < config.GATE_TONAL_RELEASE_ENTROPY:
            release += config.GATE_TONAL_RELEASE_ADJ
        elif profile.entropy < config.GATE_SEMI_TONAL_ENTROPY:
            release += config.GATE_SEMI_TONAL_RELEASE_ADJ
        else:
            release += config.GATE_BROADBAND_RELEASE_ADJ

    lra = measurements.input_lra
    if 0 < lra < config.GATE_NARROW_LRA:
        release += config.GATE_NARROW_LRA_EXTENSION
    elif 0 < lra < config.GATE_MODERATE_LRA:
        release += config.GATE_LRA_EXTENSION_SCALE * (config.GATE_MODERATE_LRA - lra) / 2

    return release


def tune_gate(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """
    Tune the noise gate threshold, ratio, timing, detection and depth.

    A missing noise profile is fine: the threshold falls back to the overall
    noise floor, detection to RMS, and the depth keeps its default.
    """
    stage = chain.gate
    profile = measurements.noise_profile

    threshold_db = clamp(
        _gate_threshold_db(measurements),
        config.GATE_THRESHOLD_MIN_DB,
        config.GATE_THRESHOLD_MAX_DB,
    )
    stage.threshold = db_to_linear(threshold_db)

    lra = measurements.input_lra
    if lra >= config.GATE_WIDE_LRA:
        stage.ratio = config.GATE_WIDE_RATIO
    elif lra >= config.GATE_MODERATE_LRA:
        stage.ratio = config.GATE_MODERATE_RATIO
    else:
        stage.ratio = config.GATE_TIGHT_RATIO

    if measurements.max_difference >= config.GATE_HIGH_TRANSIENT:
        attack = config.GATE_FAST_ATTACK
    elif measurements.max_difference >= config.GATE_MODERATE_TRANSIENT:
        attack = config.GATE_MEDIUM_ATTACK
    else:
        attack = config.GATE_SLOW_ATTACK
    if measurements.spectral_flux > config.GATE_HIGH_FLUX:
        attack *= config.GATE_FLUX_ATTACK_FACTOR
    stage.attack = attack

    stage.release = _gate_release(measurements)
    stage.detection = _gate_detection(measurements)

    if profile is not None:
        if profile.entropy < config.GATE_TONAL_ENTROPY:
            range_db = config.GATE_TONAL_RANGE_DB
        elif profile.entropy < config.GATE_MIXED_ENTROPY:
            range_db = config.GATE_MIXED_RANGE_DB
        else:
            range_db = config.GATE_BROADBAND_RANGE_DB
        stage.range = db_to_linear(range_db)

    logger.trace(
        f"Gate: threshold {threshold_db:.1f} dB, ratio {stage.ratio:.1f}, "
        f"attack {stage.attack:.1f} ms, release {stage.release:.0f} ms, "
        f"detection {stage.detection}"
    )


def tune_compression(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """Tune the levelling compressor from dynamic range, LRA and noise floor."""
    stage = chain.compressor
    dynamic_range = measurements.dynamic_range

    if dynamic_range > 0:
        if dynamic_range > config.COMP_WIDE_DR:
            settings = config.COMP_WIDE_SETTINGS
        elif dynamic_range > config.COMP_MODERATE_DR:
            settings = config.COMP_MODERATE_SETTINGS
        else:
            settings = config.COMP_NARROW_SETTINGS
        stage.ratio, stage.threshold_db, stage.makeup_db = settings

    lra = measurements.input_lra
    if lra > config.COMP_WIDE_LRA:
        stage.attack, stage.release = config.COMP_WIDE_TIMING
    elif lra > config.COMP_MODERATE_LRA:
        stage.attack, stage.release = config.COMP_MODERATE_TIMING
    else:
        stage.attack, stage.release = config.COMP_NARROW_TIMING

    if measurements.noise_floor < config.COMP_CLEAN_FLOOR:
        mix = config.COMP_CLEAN_MIX
    elif measurements.noise_floor < config.COMP_MODERATE_FLOOR:
        mix = config.COMP_MODERATE_MIX
    else:
        mix = config.COMP_NOISY_MIX

    # Wide dynamics keep more of the dry signal, squashed material gets more wet
    if dynamic_range > config.COMP_WIDE_DR:
        mix += config.COMP_WIDE_DR_MIX_ADJ
    elif dynamic_range <= config.COMP_MODERATE_DR:
        mix += config.COMP_NARROW_DR_MIX_ADJ
    stage.mix = min(1.0, mix)

    logger.trace(
        f"Compressor: ratio {stage.ratio:.1f}, threshold {stage.threshold_db:.0f} dB, "
        f"attack {stage.attack:.0f} ms, release {stage.release:.0f} ms, mix {stage.mix:.2f}"
    )


def tune_dynaudnorm(chain: FilterChainConfig) -> None:
    """Apply fixed conservative dynamic normaliser settings."""
    stage = chain.dynaudnorm
    stage.frame_len = config.DYNAUDNORM_FRAME_LEN
    stage.filter_size = config.DYNAUDNORM_FILTER_SIZE
    stage.peak = config.DYNAUDNORM_PEAK
    stage.max_gain = config.DYNAUDNORM_MAX_GAIN
    stage.target_rms = 0.0
    stage.compress = 0.0
    stage.threshold = 0.0


def tune_speechnorm(
    chain: FilterChainConfig, measurements: AudioMeasurements, lufs_gap: float
) -> None:
    """Set speechnorm expansion from the loudness gap and RMS from the target."""
    if measurements.input_i == 0.0:
        return

    stage = chain.speechnorm
    expansion = clamp(
        db_to_linear(lufs_gap),
        config.SPEECHNORM_MIN_EXPANSION,
        config.SPEECHNORM_MAX_EXPANSION,
    )
    stage.expansion = expansion
    stage.rms = clamp(db_to_linear(chain.target_i + config.LUFS_RMS_OFFSET), 0.0, 1.0)
    stage.peak = config.SPEECHNORM_PEAK
    stage.compression = config.SPEECHNORM_COMPRESSION
    stage.threshold = config.SPEECHNORM_THRESHOLD
    stage.raise_ = config.SPEECHNORM_SMOOTHING
    stage.fall = config.SPEECHNORM_SMOOTHING

    tune_speechnorm_denoise(chain, expansion)
    logger.trace(f"Speechnorm: expansion {stage.expansion:.2f}, rms {stage.rms:.3f}")


def tune_speechnorm_denoise(chain: FilterChainConfig, expansion: float) -> None:
    """
    Leave the neural denoise flag as configured.

    Heavy expansion used to switch neural denoise on automatically. The
    stage is now enabled explicitly, so this intentionally changes nothing.
    """
    return None


def tune_declick(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """Enable click removal from transient and crest measurements."""
    stage = chain.declick
    max_diff = measurements.max_difference
    crest = measurements.spectral_crest

    if max_diff > config.DECLICK_SEVERE_TRANSIENT:
        threshold = config.DECLICK_AGGRESSIVE_THRESHOLD
        reason = f"severe transients (max diff {max_diff:.2f})"
    elif crest > config.DECLICK_MOUTH_NOISE_CREST:
        threshold = config.DECLICK_MOUTH_NOISE_THRESHOLD
        reason = f"mouth noise (crest {crest:.1f} dB)"
    elif max_diff > config.DECLICK_MODERATE_TRANSIENT and crest > config.DECLICK_PRESENT_CREST:
        threshold = config.DECLICK_MILD_THRESHOLD
        reason = f"transients with peaky spectrum (max diff {max_diff:.2f}, crest {crest:.1f} dB)"
    elif crest > config.DECLICK_PRESENT_CREST:
        threshold = config.DECLICK_CONSERVATIVE_THRESHOLD
        reason = f"peaky spectrum (crest {crest:.1f} dB)"
    elif max_diff > config.DECLICK_MODERATE_TRANSIENT:
        threshold = config.DECLICK_MILD_THRESHOLD
        reason = f"moderate transients (max diff {max_diff:.2f})"
    else:
        stage.enabled = False
        stage.reason = "no clicks detected"
        return

    # Noisy or already compressed material hides clicks, so detect less eagerly
    if measurements.spectral_flatness > config.DECLICK_NOISY_FLATNESS:
        threshold += config.DECLICK_FLATNESS_OFFSET
    if 0 < measurements.dynamic_range < config.DECLICK_COMPRESSED_DR:
        threshold += config.DECLICK_COMPRESSED_OFFSET

    centroid = measurements.spectral_centroid
    if centroid > config.DECLICK_BRIGHT_CENTROID:
        window = config.DECLICK_BRIGHT_WINDOW
    elif 0 < centroid < config.DECLICK_DARK_CENTROID:
        window = config.DECLICK_DARK_WINDOW
    else:
        window = config.DECLICK_DEFAULT_WINDOW

    stage.enabled = True
    stage.threshold = threshold
    stage.window = window
    stage.reason = reason
    logger.debug(f"Declick enabled: {reason}, threshold {threshold:.1f}, window {window:.0f} ms")


def tune_multiband_expander(
    chain: FilterChainConfig, measurements: AudioMeasurements
) -> None:
    """Choose expander depth from the room tone level and install the bands."""
    stage = chain.multiband_expander
    if not stage.enabled:
        return

    trough = measurements.rms_trough
    if trough < config.EXPANDER_DEEP_TROUGH:
        stage.threshold_db, stage.expansion_db = config.EXPANDER_DEEP_SETTINGS
    elif trough < config.EXPANDER_MODERATE_TROUGH:
        stage.threshold_db, stage.expansion_db = config.EXPANDER_MODERATE_SETTINGS
    else:
        stage.threshold_db, stage.expansion_db = config.EXPANDER_NOISY_SETTINGS

    stage.bands = [ExpanderBand(*band) for band in config.EXPANDER_BANDS]
    logger.trace(
        f"Multiband expander: threshold {stage.threshold_db:.0f} dB, "
        f"expansion {stage.expansion_db:.0f} dB (trough {trough:.1f} dB)"
    )


def tune_limiter(chain: FilterChainConfig, measurements: AudioMeasurements) -> None:
    """Tune limiter attack, release and auto soft clipping."""
    stage = chain.limiter
    max_diff = measurements.max_difference
    crest = measurements.spectral_crest
    flux = measurements.spectral_flux
    lra = measurements.input_lra
    dynamic_range = measurements.dynamic_range

    if max_diff > config.LIMITER_SEVERE_TRANSIENT or crest > config.LIMITER_EXTREME_CREST:
        stage.attack = config.LIMITER_FASTEST_ATTACK
    elif max_diff > config.LIMITER_HIGH_TRANSIENT or crest > config.LIMITER_HIGH_CREST:
        stage.attack = config.LIMITER_FAST_ATTACK
    elif max_diff > config.LIMITER_MODERATE_TRANSIENT:
        stage.attack = config.LIMITER_MEDIUM_ATTACK
    else:
        stage.attack = config.LIMITER_SLOW_ATTACK

    if flux > config.LIMITER_HIGH_FLUX and lra > config.LIMITER_WIDE_LRA:
        release = config.LIMITER_SLOW_RELEASE
    elif flux < config.LIMITER_LOW_FLUX and lra < config.LIMITER_NARROW_LRA:
        release = config.LIMITER_FAST_RELEASE
    else:
        release = config.LIMITER_MEDIUM_RELEASE
    if dynamic_range > config.LIMITER_EXTREME_DR:
        release += config.LIMITER_EXTREME_DR_RELEASE_ADJ
    stage.release = release

    if dynamic_range > config.LIMITER_WIDE_DR or crest > config.LIMITER_WIDE_CREST:
        asc_level = config.LIMITER_WIDE_ASC
    elif dynamic_range > config.LIMITER_MODERATE_DR:
        asc_level = config.LIMITER_MODERATE_ASC
    else:
        asc_level = 0.0

    if asc_level > 0:
        if measurements.noise_floor > config.LIMITER_CLEAN_FLOOR:
            asc_level += config.LIMITER_NOISY_ASC_ADJ
        stage.asc = True
        stage.asc_level = min(asc_level, 1.0)
    else:
        stage.asc = False

    logger.trace(
        f"Limiter: attack {stage.attack:.1f} ms, release {stage.release:.0f} ms, "
        f"asc {stage.asc} ({stage.asc_level:.2f})"
    )
