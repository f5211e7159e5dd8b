"""
Report generator for multiple output formats.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Optional

from run_reporter.core.errors import SinkWriteError
from run_reporter.core.logging import get_logger
from run_reporter.reporting.models import ResultModel
from run_reporter.reporting.registry import create_reporter, file_extension, normalize_format

DEFAULT_FORMATS = ("json", "html", "markdown")


def _slug(text: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9_.-]+", "_", text).strip("_.")
    return slug or "tests"


class ReportGenerator:
    """Write test reports in multiple formats to a directory."""

    def __init__(self, output_dir: Path = Path("reports"), logger: Optional[logging.Logger] = None):
        self.output_dir = Path(output_dir)
        self.logger = logger or get_logger(__name__)

    def report_path(self, model: ResultModel, format_name: str) -> Path:
        """Return the file path used for a format."""
        key = normalize_format(format_name)
        if key == "junit":
            return self.output_dir / "junit.xml"
        timestamp = model.summary.started_at.strftime("%Y%m%d_%H%M%S")
        filename = f"test_report_{_slug(model.summary.suite_name)}_{timestamp}.{file_extension(key)}"
        return self.output_dir / filename

    def generate_reports(
        self,
        model: ResultModel,
        formats: Optional[Iterable[str]] = None,
    ) -> Dict[str, Path]:
        """
        Generate reports in specified formats.

        Args:
            model: ResultModel to render
            formats: Format names (json, junit, html, markdown, console)

        Returns:
            Dictionary mapping format to output file path
        """
        if formats is None:
            formats = DEFAULT_FORMATS
        keys = []
        for name in formats:
            key = normalize_format(name)
            if key not in keys:
                keys.append(key)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SinkWriteError(f"Cannot create report directory {self.output_dir}: {e}") from e

        generated_files = {}
        for key in keys:
            # Files never get ANSI colors
            reporter = create_reporter(key, color_enabled=False, logger=self.logger)
            file_path = self.report_path(model, key)
            try:
                with open(file_path, "wb") as f:
                    reporter.report(f, model)
            except OSError as e:
                raise SinkWriteError(f"Cannot write {file_path}: {e}") from e
            self.logger.info(f"Wrote {key} report: {file_path}")
            generated_files[key] = file_path

        return generated_files
