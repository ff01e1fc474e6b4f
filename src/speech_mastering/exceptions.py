"""Custom exceptions for speech mastering."""


class MasteringError(Exception):
    """Base exception for speech mastering errors."""

    pass


class AnalysisError(MasteringError):
    """Exception raised when the analysis pass fails."""

    pass


class ProcessingError(MasteringError):
    """Exception raised when the processing pass fails."""

    pass


class DenoiseModelError(MasteringError):
    """Exception raised when a neural denoise model cannot be provided."""

    pass
