"""
Core modules for run_reporter.
"""

from run_reporter.core.config import RenderConfig
from run_reporter.core.errors import (
    RunReporterError,
    ConfigurationError,
    UnknownFormatError,
    ModelValidationError,
    RenderError,
    SinkWriteError,
    EncodingError,
)
from run_reporter.core.logging import setup_logger, get_logger

__all__ = [
    "RenderConfig",
    "RunReporterError",
    "ConfigurationError",
    "UnknownFormatError",
    "ModelValidationError",
    "RenderError",
    "SinkWriteError",
    "EncodingError",
    "setup_logger",
    "get_logger",
]
