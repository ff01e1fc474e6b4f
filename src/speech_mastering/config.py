"""Configuration constants for adaptive speech mastering."""

# Loudness Targets
DEFAULT_TARGET_I = -16.0  # LUFS, podcast/spoken-word integrated loudness
DEFAULT_TARGET_TP = -1.0  # dBTP, true peak ceiling
DEFAULT_TARGET_LRA = 7.0  # LU, loudness range target
LUFS_RMS_OFFSET = 23.0  # dB, offset mapping LUFS target to speechnorm RMS target

# Noise Reduction (afftdn)
NOISE_REDUCTION_BASE = 12.0  # dB, reduction for material already at target
NOISE_REDUCTION_MIN = 6.0  # dB, never lighter than this
NOISE_REDUCTION_MAX = 40.0  # dB, never heavier than this
NOISE_REDUCTION_DEFAULT_FLOOR = -50.0  # dB, afftdn noise floor when unmeasured
AFFTDN_NOISE_FLOOR_MIN = -80.0  # dB, lower bound accepted by afftdn
AFFTDN_NOISE_FLOOR_MAX = -20.0  # dB, upper bound accepted by afftdn

# Highpass
HIGHPASS_DEFAULT_FREQ = 80.0  # Hz
HIGHPASS_DARK_VOICE_FREQ = 60.0  # Hz, centroid at or below the normal threshold
HIGHPASS_NORMAL_VOICE_FREQ = 80.0  # Hz
HIGHPASS_BRIGHT_VOICE_FREQ = 100.0  # Hz
HIGHPASS_BRIGHT_CENTROID = 6000.0  # Hz, centroid above this is a bright voice
HIGHPASS_NORMAL_CENTROID = 4000.0  # Hz, centroid above this is a normal voice
HIGHPASS_MAX_FREQ = 120.0  # Hz, cap after noise boost
HIGHPASS_NOISY_FLOOR = -55.0  # dB, floor above this gets the large boost
HIGHPASS_MODERATE_FLOOR = -70.0  # dB, floor above this gets the small boost
HIGHPASS_NOISY_BOOST = 20.0  # Hz
HIGHPASS_MODERATE_BOOST = 10.0  # Hz
HIGHPASS_BROADBAND_ENTROPY = 0.5  # boost only for broadband noise
HIGHPASS_DEFAULT_POLES = 2  # 12 dB/oct
HIGHPASS_DEFAULT_WIDTH = 0.707  # Q, Butterworth
HIGHPASS_DEFAULT_MIX = 1.0
HIGHPASS_DEFAULT_TRANSFORM = "tdii"  # transposed direct form II

# Highpass warm-voice protection
HIGHPASS_VERY_WARM_DECREASE = -0.08  # spectral decrease below this is very warm
HIGHPASS_WARM_DECREASE = -0.05  # spectral decrease below this is warm
HIGHPASS_BASS_SKEWNESS = 1.0  # skewness above this is bass-concentrated
HIGHPASS_VERY_WARM_FREQ = 60.0  # Hz
HIGHPASS_VERY_WARM_MIX = 0.8
HIGHPASS_SKEWED_FREQ = 70.0  # Hz
HIGHPASS_SKEWED_MIX = 0.9
HIGHPASS_WARM_MAX_FREQ = 80.0  # Hz
HIGHPASS_GENTLE_POLES = 1  # 6 dB/oct
HIGHPASS_GENTLE_WIDTH = 0.5  # Q

# Hum notch (bandreject)
HUM_TONAL_ENTROPY = 0.5  # entropy below this indicates tonal noise
HUM_MIN_FLOOR = -70.0  # dB, floor must be above this for hum to matter
HUM_DEFAULT_FREQUENCY = 50.0  # Hz, mains fundamental
HUM_DEFAULT_HARMONICS = 4  # fundamental plus overtones
HUM_DEFAULT_WIDTH = 1.0  # Hz

# Mains frequency
MAINS_DEFAULT_FREQUENCY = 50.0  # Hz, most of the world and unknown zones
MAINS_60HZ_FREQUENCY = 60.0  # Hz
# ISO 3166 codes of countries on 60 Hz mains
MAINS_60HZ_COUNTRIES = frozenset({
    "US", "CA", "MX",  # North America
    "BZ", "CR", "SV", "GT", "HN", "NI", "PA",  # Central America
    "BS", "BB", "KY", "CU", "DO", "HT", "JM", "PR", "TT", "VI",  # Caribbean
    "BR", "CO", "EC", "GY", "PE", "SR", "VE",  # South America
    "KR", "TW", "PH", "SA",  # Asia
    "GU", "AS", "MH", "FM", "PW",  # Pacific
})

# Lowpass
LOWPASS_DEFAULT_FREQ = 16000.0  # Hz, keeps all audible content
LOWPASS_DEFAULT_POLES = 2  # 12 dB/oct
LOWPASS_DEFAULT_WIDTH = 0.707  # Q, Butterworth
LOWPASS_DEFAULT_MIX = 1.0
LOWPASS_DEFAULT_TRANSFORM = "tdii"
LOWPASS_DARK_ROLLOFF = 8000.0  # Hz, rolloff below this needs no lowpass
LOWPASS_ULTRASONIC_ROLLOFF = 14000.0  # Hz, rolloff above this has ultrasonic content
LOWPASS_ULTRASONIC_MARGIN = 2000.0  # Hz above rolloff
LOWPASS_MAX_FREQ = 20000.0  # Hz
LOWPASS_HF_NOISE_ZCR = 0.10  # zero crossing rate above this with a low centroid is noise
LOWPASS_HF_NOISE_CENTROID = 4000.0  # Hz
LOWPASS_HF_NOISE_FREQ = 12000.0  # Hz

# Content type detection
CONTENT_SPEECH_KURTOSIS = 6.0  # speech above
CONTENT_MUSIC_KURTOSIS = 5.0  # music below
CONTENT_SPEECH_FLATNESS = 0.45  # speech below
CONTENT_MUSIC_FLATNESS = 0.55  # music above
CONTENT_SPEECH_FLUX = 0.003  # speech below
CONTENT_MUSIC_FLUX = 0.005  # music above
CONTENT_SPEECH_CREST = 30.0  # speech above
CONTENT_MUSIC_CREST = 25.0  # music below
CONTENT_SCORE_THRESHOLD = 3  # matching indicators needed to classify

# De-esser
DEESS_BRIGHT_CENTROID = 7000.0  # Hz
DEESS_NORMAL_CENTROID = 6000.0  # Hz
DEESS_BRIGHT_INTENSITY = 0.6
DEESS_NORMAL_INTENSITY = 0.5
DEESS_DARK_INTENSITY = 0.4
DEESS_NO_SIBILANCE_ROLLOFF = 6000.0  # Hz, rolloff below this disables de-essing
DEESS_LIMITED_ROLLOFF = 8000.0  # Hz
DEESS_EXTENSIVE_ROLLOFF = 12000.0  # Hz
DEESS_LIMITED_FACTOR = 0.7
DEESS_EXTENSIVE_FACTOR = 1.2
DEESS_MIN_INTENSITY = 0.3  # below this the de-esser is switched off
DEESS_MAX_INTENSITY = 0.8
DEESS_DEFAULT_AMOUNT = 0.5
DEESS_DEFAULT_FREQUENCY_KEEP = 0.5

# Gate
GATE_DEFAULT_THRESHOLD = 0.01  # linear, about -40 dBFS
GATE_THRESHOLD_MIN_DB = -70.0  # dB
GATE_THRESHOLD_MAX_DB = -25.0  # dB
GATE_CREST_FACTOR_THRESHOLD = 20.0  # dB, above this use peak reference
GATE_PEAK_HEADROOM = 10.0  # dB
GATE_NOISY_REFERENCE = -50.0  # dB
GATE_MODERATE_REFERENCE = -25.0  # dB
GATE_NOISY_HEADROOM = 10.0  # dB
GATE_MODERATE_HEADROOM = 6.0  # dB
GATE_CLEAN_HEADROOM = 3.0  # dB
GATE_WIDE_LRA = 15.0  # LU
GATE_MODERATE_LRA = 10.0  # LU
GATE_WIDE_RATIO = 1.5
GATE_MODERATE_RATIO = 2.0
GATE_TIGHT_RATIO = 2.5
GATE_HIGH_TRANSIENT = 0.25  # max difference
GATE_MODERATE_TRANSIENT = 0.10  # max difference
GATE_FAST_ATTACK = 7.0  # ms
GATE_MEDIUM_ATTACK = 12.0  # ms
GATE_SLOW_ATTACK = 17.0  # ms
GATE_HIGH_FLUX = 0.05
GATE_FLUX_ATTACK_FACTOR = 0.8
GATE_TONAL_ENTROPY = 0.3
GATE_MIXED_ENTROPY = 0.6
GATE_BROADBAND_ENTROPY = 0.7
GATE_BLEED_CREST = 25.0  # dB, crest at or above forces rms detection
GATE_CLEAN_CREST = 15.0  # dB, crest below allows peak detection
GATE_TONAL_RANGE_DB = -16.0  # dB
GATE_MIXED_RANGE_DB = -21.0  # dB
GATE_BROADBAND_RANGE_DB = -27.0  # dB
GATE_DEFAULT_RATIO = 2.0
GATE_DEFAULT_ATTACK = 12.0  # ms
GATE_DEFAULT_RELEASE = 350.0  # ms
GATE_DEFAULT_RANGE = 0.0625  # linear, about -24 dB
GATE_DEFAULT_KNEE = 3.0
GATE_DEFAULT_MAKEUP = 1.0
GATE_DEFAULT_DETECTION = "rms"

# Gate release
GATE_BASE_RELEASE = 250.0  # ms
GATE_HOLD_COMPENSATION = 50.0  # ms, agate has no hold parameter
GATE_VERY_TONAL_ENTROPY = 0.10
GATE_TONAL_RELEASE_ENTROPY = 0.12
GATE_SEMI_TONAL_ENTROPY = 0.16
GATE_VERY_TONAL_RELEASE_ADJ = 75.0  # ms
GATE_TONAL_RELEASE_ADJ = 52.5  # ms
GATE_SEMI_TONAL_RELEASE_ADJ = -30.0  # ms
GATE_BROADBAND_RELEASE_ADJ = -100.0  # ms
GATE_NARROW_LRA = 8.0  # LU
GATE_NARROW_LRA_EXTENSION = 150.0  # ms
GATE_LRA_EXTENSION_SCALE = 100.0  # ms per 2 LU below moderate

# Compressor (LA-2A style)
COMP_DEFAULT_THRESHOLD = -18.0  # dB
COMP_DEFAULT_RATIO = 3.0
COMP_DEFAULT_ATTACK = 10.0  # ms
COMP_DEFAULT_RELEASE = 200.0  # ms
COMP_DEFAULT_MAKEUP = 0.0  # dB
COMP_DEFAULT_KNEE = 4.0
COMP_DEFAULT_MIX = 1.0
COMP_WIDE_DR = 30.0  # dB
COMP_MODERATE_DR = 20.0  # dB
COMP_WIDE_SETTINGS = (2.0, -16.0, 1.0)  # ratio, threshold dB, makeup dB
COMP_MODERATE_SETTINGS = (3.0, -18.0, 2.0)
COMP_NARROW_SETTINGS = (4.0, -20.0, 3.0)
COMP_WIDE_LRA = 15.0  # LU
COMP_MODERATE_LRA = 10.0  # LU
COMP_WIDE_TIMING = (25.0, 150.0)  # attack ms, release ms
COMP_MODERATE_TIMING = (20.0, 100.0)
COMP_NARROW_TIMING = (15.0, 80.0)
COMP_CLEAN_FLOOR = -50.0  # dB
COMP_MODERATE_FLOOR = -40.0  # dB
COMP_CLEAN_MIX = 0.95
COMP_MODERATE_MIX = 0.85
COMP_NOISY_MIX = 0.75
COMP_WIDE_DR_MIX_ADJ = -0.10
COMP_NARROW_DR_MIX_ADJ = 0.10

# Click removal (adeclick)
DECLICK_SEVERE_TRANSIENT = 0.25  # max difference
DECLICK_MODERATE_TRANSIENT = 0.12  # max difference
DECLICK_MOUTH_NOISE_CREST = 50.0  # dB
DECLICK_PRESENT_CREST = 35.0  # dB
DECLICK_AGGRESSIVE_THRESHOLD = 2.0
DECLICK_MOUTH_NOISE_THRESHOLD = 5.0
DECLICK_MILD_THRESHOLD = 4.0
DECLICK_CONSERVATIVE_THRESHOLD = 6.0
DECLICK_NOISY_FLATNESS = 0.3
DECLICK_FLATNESS_OFFSET = 2.0
DECLICK_COMPRESSED_DR = 10.0  # dB
DECLICK_COMPRESSED_OFFSET = 1.0
DECLICK_BRIGHT_CENTROID = 3000.0  # Hz
DECLICK_DARK_CENTROID = 1500.0  # Hz
DECLICK_BRIGHT_WINDOW = 45.0  # ms
DECLICK_DARK_WINDOW = 70.0  # ms
DECLICK_DEFAULT_WINDOW = 55.0  # ms
DECLICK_DEFAULT_THRESHOLD = 6.0
DECLICK_DEFAULT_METHOD = "s"  # overlap-save

# Multiband expander (mcompand)
EXPANDER_DEEP_TROUGH = -85.0  # dB, quiet room
EXPANDER_MODERATE_TROUGH = -80.0  # dB
EXPANDER_DEEP_SETTINGS = (-50.0, 16.0)  # threshold dB, expansion dB
EXPANDER_MODERATE_SETTINGS = (-45.0, 20.0)
EXPANDER_NOISY_SETTINGS = (-40.0, 24.0)
EXPANDER_DEFAULT_THRESHOLD = -50.0  # dB
EXPANDER_DEFAULT_EXPANSION = 16.0  # dB
EXPANDER_CURVE_POINTS = (-90.0, -75.0)  # dB, expanded points below threshold
EXPANDER_UNITY_POINTS = (-30.0, 0.0)  # dB, unity points above threshold
# (crossover Hz, scale percent, attack s, decay s, soft knee dB)
EXPANDER_BANDS = (
    (100.0, 100.0, 0.006, 0.095, 6.0),
    (300.0, 100.0, 0.005, 0.100, 8.0),
    (800.0, 105.0, 0.005, 0.100, 10.0),
    (3300.0, 103.0, 0.005, 0.100, 12.0),
    (8000.0, 100.0, 0.002, 0.085, 10.0),
    (20500.0, 95.0, 0.002, 0.080, 6.0),
)

# Neural denoise (arnndn)
DENOISE_DEFAULT_MIX = 0.8
DENOISE_MODEL_FILENAME = "speech.rnnn"  # bundled RNNoise model resource

# Speech normalisation (speechnorm)
SPEECHNORM_MAX_EXPANSION = 10.0
SPEECHNORM_MIN_EXPANSION = 1.0
SPEECHNORM_PEAK = 0.95
SPEECHNORM_COMPRESSION = 1.0  # expansion only
SPEECHNORM_SMOOTHING = 0.001  # raise and fall
SPEECHNORM_THRESHOLD = 0.0  # expand all audio
SPEECHNORM_DEFAULT_EXPANSION = 3.0
SPEECHNORM_DEFAULT_COMPRESSION = 2.0
SPEECHNORM_DEFAULT_THRESHOLD = 0.10

# Dynamic normalisation (dynaudnorm)
DYNAUDNORM_FRAME_LEN = 500  # ms
DYNAUDNORM_FILTER_SIZE = 31  # frames, must be odd
DYNAUDNORM_PEAK = 0.95
DYNAUDNORM_MAX_GAIN = 5.0  # conservative
DYNAUDNORM_DEFAULT_MAX_GAIN = 10.0

# Limiter (1176 style)
LIMITER_DEFAULT_CEILING = -1.0  # dBTP
LIMITER_DEFAULT_ATTACK = 0.8  # ms
LIMITER_DEFAULT_RELEASE = 150.0  # ms
LIMITER_DEFAULT_ASC_LEVEL = 0.5
LIMITER_SEVERE_TRANSIENT = 0.25
LIMITER_HIGH_TRANSIENT = 0.15
LIMITER_MODERATE_TRANSIENT = 0.08
LIMITER_EXTREME_CREST = 50.0  # dB
LIMITER_HIGH_CREST = 35.0  # dB
LIMITER_FASTEST_ATTACK = 0.1  # ms
LIMITER_FAST_ATTACK = 0.5  # ms
LIMITER_MEDIUM_ATTACK = 0.8  # ms
LIMITER_SLOW_ATTACK = 1.0  # ms
LIMITER_HIGH_FLUX = 0.03
LIMITER_LOW_FLUX = 0.01
LIMITER_WIDE_LRA = 15.0  # LU
LIMITER_NARROW_LRA = 10.0  # LU
LIMITER_SLOW_RELEASE = 200.0  # ms
LIMITER_FAST_RELEASE = 100.0  # ms
LIMITER_MEDIUM_RELEASE = 150.0  # ms
LIMITER_EXTREME_DR = 35.0  # dB
LIMITER_EXTREME_DR_RELEASE_ADJ = 50.0  # ms
LIMITER_WIDE_DR = 30.0  # dB
LIMITER_MODERATE_DR = 20.0  # dB
LIMITER_WIDE_CREST = 40.0  # dB
LIMITER_WIDE_ASC = 0.7
LIMITER_MODERATE_ASC = 0.5
LIMITER_CLEAN_FLOOR = -50.0  # dB, floor above this raises ASC
LIMITER_NOISY_ASC_ADJ = 0.2

# Output format
DEFAULT_SAMPLE_RATE = 44100  # Hz
DEFAULT_SAMPLE_FORMAT = "s16"
DEFAULT_FRAME_SIZE = 4096  # samples per frame

# Analysis
ANALYSIS_WINDOW_SIZE = 2048  # aspectralstats window
ANALYSIS_WINDOW_FUNC = "hann"

# Conversions
LINEAR_SILENCE_DB = -120.0  # dB reported for zero or negative amplitude

# File naming
PROCESSED_SUFFIX = "-processed"
