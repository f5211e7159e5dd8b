"""
Custom exceptions for run_reporter.
"""


class RunReporterError(Exception):
    """Base exception for all run_reporter errors."""
    pass


class ConfigurationError(RunReporterError):
    """Raised when configuration is invalid."""
    pass


class UnknownFormatError(ConfigurationError):
    """Raised when a report format name is not registered."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown report format '{name}' (available: {', '.join(self.available)})"
        )


class ModelValidationError(RunReporterError, ValueError):
    """Raised when a result model violates its invariants."""
    pass


class RenderError(RunReporterError):
    """Base class for failures while rendering a report."""
    pass


class SinkWriteError(RenderError):
    """Raised when writing to the output sink fails.

    The underlying I/O error is available as ``__cause__``.
    """
    pass


class EncodingError(RenderError):
    """Raised when the model cannot be serialized in the target format."""
    pass
