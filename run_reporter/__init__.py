"""
run_reporter Package

Render test run results as JSON, JUnit XML, HTML, Markdown or console text.
"""

__version__ = "0.1.0"

from run_reporter.core.config import RenderConfig
from run_reporter.reporting.models import TestStatus, TestCaseResult, RunSummary, ResultModel
from run_reporter.reporting.registry import create_reporter

__all__ = [
    "RenderConfig",
    "TestStatus",
    "TestCaseResult",
    "RunSummary",
    "ResultModel",
    "create_reporter",
]
