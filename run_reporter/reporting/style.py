"""
Style providers for console and HTML output.

Encoders ask a provider for titles, status markers and progress bars, so
rendering logic never depends on a specific terminal or markup style.
"""

import html
from abc import ABC, abstractmethod

from run_reporter.reporting.models import TestStatus

GLYPHS = {
    TestStatus.PASSED: "✓",
    TestStatus.FAILED: "✗",
    TestStatus.ERRORED: "!",
    TestStatus.SKIPPED: "⊘",
}

LABELS = {
    TestStatus.PASSED: "PASSED",
    TestStatus.FAILED: "FAILED",
    TestStatus.ERRORED: "ERRORED",
    TestStatus.SKIPPED: "SKIPPED",
}


class StyleProvider(ABC):
    """Capability set used by encoders to decorate output."""

    @abstractmethod
    def title(self, text: str) -> str:
        """Render a heading."""

    @abstractmethod
    def marker(self, status: TestStatus) -> str:
        """Render the short success/failure marker for a status."""

    @abstractmethod
    def label(self, status: TestStatus) -> str:
        """Render the status name."""

    def progress(self, done: int, total: int, width: int = 20) -> str:
        """Render a fixed-width progress bar."""
        filled = 0 if total <= 0 else int(width * done / total)
        filled = max(0, min(width, filled))
        return "[" + "█" * filled + "░" * (width - filled) + "]"


class PlainStyle(StyleProvider):
    """Undecorated text, safe for files and non-terminal sinks."""

    def title(self, text: str) -> str:
        return text

    def marker(self, status: TestStatus) -> str:
        return GLYPHS[status]

    def label(self, status: TestStatus) -> str:
        return LABELS[status]


class AnsiStyle(PlainStyle):
    """ANSI-colored text for color-capable terminals."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    COLORS = {
        TestStatus.PASSED: "\033[32m",   # Green
        TestStatus.FAILED: "\033[31m",   # Red
        TestStatus.ERRORED: "\033[91m",  # Bright red
        TestStatus.SKIPPED: "\033[33m",  # Yellow
    }

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{self.RESET}"

    def title(self, text: str) -> str:
        return self._paint(self.BOLD, text)

    def marker(self, status: TestStatus) -> str:
        return self._paint(self.COLORS[status], GLYPHS[status])

    def label(self, status: TestStatus) -> str:
        return self._paint(self.COLORS[status], LABELS[status])

    def progress(self, done: int, total: int, width: int = 20) -> str:
        bar = super().progress(done, total, width)
        color = self.COLORS[TestStatus.PASSED if done >= total else TestStatus.FAILED]
        return self._paint(color, bar)


class HtmlStyle(StyleProvider):
    """Inline HTML badges matching the classes in the report stylesheet."""

    def title(self, text: str) -> str:
        return f"<h1>{html.escape(text)}</h1>"

    def marker(self, status: TestStatus) -> str:
        return (
            f'<span class="marker status-{status.value}" title="{LABELS[status]}">'
            f"{GLYPHS[status]}</span>"
        )

    def label(self, status: TestStatus) -> str:
        return f'<span class="badge status-{status.value}">{LABELS[status]}</span>'

    def progress(self, done: int, total: int, width: int = 20) -> str:
        percent = 0.0 if total <= 0 else done / total * 100
        return (
            f'<div class="progress"><div class="progress-bar" '
            f'style="width: {percent:.1f}%"></div></div>'
        )
