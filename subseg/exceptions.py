"""Custom exceptions for the subseg package."""


class InputValidationError(Exception):
    """Raised when an input file is missing, empty or of an unsupported type."""


class InputFormatError(Exception):
    """Raised when an input file cannot be parsed into transcript data."""


class GpuError(Exception):
    """Raised when GPU is unavailable or fails."""


class CudaOomError(GpuError):
    """Raised when CUDA runs out of memory during transcription."""


class ModelError(Exception):
    """Raised when model loading fails."""


class TranscriptionError(Exception):
    """Raised when speech recognition fails at runtime."""
