"""Two-pass mastering: analyse, tune the chain, then process."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from . import config
from .denoise_model import DenoiseModelService
from .exceptions import AnalysisError, ProcessingError
from .filter_chain.adaptive import adapt_config
from .filter_chain.assembler import FilterChainAssembler
from .filter_chain.interfaces import FilterEngineInterface
from .filter_chain.models import (
    ANALYSIS_FILTER_ORDER,
    FilterChainConfig,
    default_filter_config,
)
from .logging_utils import get_logger
from .mains import detect_mains_frequency
from .models import AudioMeasurements

logger = get_logger(__name__)

# Called with (pass number, pass name) as each pass starts
PassCallback = Callable[[int, str], None]


@dataclass
class MasteringResult:
    """Outcome of mastering one recording."""

    output_path: Path
    measurements: AudioMeasurements
    config: FilterChainConfig
    filter_spec: str


def generate_output_path(input_path: Path) -> Path:
    """Get ``<stem>-processed<suffix>`` next to the input file."""
    return input_path.with_name(
        f"{input_path.stem}{config.PROCESSED_SUFFIX}{input_path.suffix}"
    )


class MasteringPipeline:
    """Runs the analysis pass, adapts the chain and runs the processing pass."""

    def __init__(
        self,
        engine: FilterEngineInterface,
        denoise_models: DenoiseModelService | None = None,
        assembler: FilterChainAssembler | None = None,
        config_factory: Callable[[], FilterChainConfig] = default_filter_config,
        on_pass: PassCallback | None = None,
        mains_frequency: float | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            engine: Engine that executes filter chains
            denoise_models: Model provider for the neural denoise stage
            assembler: Chain serialiser, defaults to all known stages
            config_factory: Creates the starting configuration per run
            on_pass: Optional progress callback
            mains_frequency: Hum notch fundamental in Hz, detected from the
                local timezone when not given
        """
        self.engine = engine
        self.denoise_models = denoise_models or DenoiseModelService()
        self.assembler = assembler or FilterChainAssembler()
        self.config_factory = config_factory
        self.on_pass = on_pass
        self.mains_frequency = mains_frequency or detect_mains_frequency()

    def analyze(self, input_path: Path, chain: FilterChainConfig) -> AudioMeasurements:
        """
        Measure a recording with the analysis chain.

        Raises:
            AnalysisError: If the engine fails to analyse the recording
        """
        self._notify(1, "Analysis")
        filter_spec = self.assembler.build_filter_spec(chain, ANALYSIS_FILTER_ORDER)
        logger.debug(f"Analysis chain: {filter_spec}")

        try:
            measurements = self.engine.analyze(input_path, filter_spec)
        except Exception as e:
            raise AnalysisError(f"Analysis of {input_path} failed: {e}") from e

        logger.info(
            f"Analysed {input_path.name}: {measurements.input_i:.1f} LUFS, "
            f"LRA {measurements.input_lra:.1f} LU, floor {measurements.noise_floor:.1f} dB"
        )
        return measurements

    def run(self, input_path: Path, output_path: Path | None = None) -> MasteringResult:
        """
        Master one recording.

        Args:
            input_path: Recording to master
            output_path: Destination, defaults to ``<stem>-processed<suffix>``

        Returns:
            MasteringResult with the tuned configuration and chain used

        Raises:
            AnalysisError: If the analysis pass fails
            ProcessingError: If the processing pass fails
        """
        input_path = Path(input_path)
        output_path = Path(output_path) if output_path else generate_output_path(input_path)

        chain = self.config_factory()
        measurements = self.analyze(input_path, chain)

        adapt_config(chain, measurements, self.mains_frequency)
        if chain.neural_denoise.enabled:
            chain.neural_denoise.model_path = self.denoise_models.resolve()

        filter_spec = self.assembler.build_filter_spec(chain)
        logger.debug(f"Processing chain: {filter_spec}")

        self._notify(2, "Processing")
        try:
            self.engine.process(input_path, output_path, filter_spec)
        except Exception as e:
            raise ProcessingError(f"Processing of {input_path} failed: {e}") from e

        logger.info(f"Wrote {output_path}")
        return MasteringResult(
            output_path=output_path,
            measurements=measurements,
            config=chain,
            filter_spec=filter_spec,
        )

    def _notify(self, pass_number: int, pass_name: str) -> None:
        if self.on_pass is not None:
            self.on_pass(pass_number, pass_name)
