"""
Test reporting module for run_reporter.

This module provides:
- The immutable result model (summary + per-test results)
- The Reporter contract and one encoder per output format
  (JSON, JUnit XML, HTML, Markdown, console)
- A format registry, a multi-format file generator and a result loader
"""

from run_reporter.reporting.models import TestStatus, TestCaseResult, RunSummary, ResultModel
from run_reporter.reporting.base import Reporter
from run_reporter.reporting.style import StyleProvider, PlainStyle, AnsiStyle, HtmlStyle
from run_reporter.reporting.json_encoder import JSONEncoder
from run_reporter.reporting.junit_encoder import JUnitXMLEncoder
from run_reporter.reporting.html_encoder import HTMLEncoder
from run_reporter.reporting.markdown_encoder import MarkdownEncoder
from run_reporter.reporting.console_encoder import ConsoleEncoder
from run_reporter.reporting.registry import available_formats, create_reporter, normalize_format
from run_reporter.reporting.generator import ReportGenerator
from run_reporter.reporting.loader import load_result_model, parse_result_model

__all__ = [
    "TestStatus",
    "TestCaseResult",
    "RunSummary",
    "ResultModel",
    "Reporter",
    "StyleProvider",
    "PlainStyle",
    "AnsiStyle",
    "HtmlStyle",
    "JSONEncoder",
    "JUnitXMLEncoder",
    "HTMLEncoder",
    "MarkdownEncoder",
    "ConsoleEncoder",
    "available_formats",
    "create_reporter",
    "normalize_format",
    "ReportGenerator",
    "load_result_model",
    "parse_result_model",
]
