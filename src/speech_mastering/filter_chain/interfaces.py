"""Abstract interface for the engine that runs filter chains."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import AudioMeasurements


class FilterEngineInterface(ABC):
    """Interface for engines that decode, filter and encode audio."""

    @abstractmethod
    def analyze(self, input_path: Path, filter_spec: str) -> AudioMeasurements:
        """
        Run an analysis pass over a recording.

        Args:
            input_path: Recording to measure
            filter_spec: Filter-graph description ending in the analysis stage

        Returns:
            AudioMeasurements collected by the analysis filters
        """
        pass

    @abstractmethod
    def process(self, input_path: Path, output_path: Path, filter_spec: str) -> None:
        """
        Run a processing pass and write the result.

        Args:
            input_path: Recording to process
            output_path: Where the processed audio is written
            filter_spec: Filter-graph description to apply
        """
        pass
