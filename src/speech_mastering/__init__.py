"""Adaptive mastering for spoken-word audio."""

from .denoise_model import DenoiseModelService
from .exceptions import AnalysisError, DenoiseModelError, MasteringError, ProcessingError
from .logging_utils import set_log_level
from .mains import detect_mains_frequency, frequency_for_timezone
from .models import AudioMeasurements, NoiseProfile
from .pipeline import MasteringPipeline, MasteringResult, generate_output_path

__all__ = [
    "AudioMeasurements",
    "NoiseProfile",
    "MasteringPipeline",
    "MasteringResult",
    "generate_output_path",
    "detect_mains_frequency",
    "frequency_for_timezone",
    "set_log_level",
    "DenoiseModelService",
    "MasteringError",
    "AnalysisError",
    "ProcessingError",
    "DenoiseModelError",
]
