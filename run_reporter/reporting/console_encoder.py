"""
Console report encoder.
"""

import logging
import re
from typing import List, Optional

from run_reporter.reporting.base import Reporter
from run_reporter.reporting.models import ResultModel, TestCaseResult
from run_reporter.reporting.style import AnsiStyle, PlainStyle, StyleProvider

RULE = "━" * 52
NAME_WIDTH = 50

# C0 and C1 control characters, ESC included
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_CONTROL_CHARS_BUT_LAYOUT = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def _escape_control(match: "re.Match") -> str:
    return f"\\x{ord(match.group()):02x}"


def printable(text: str, keep_newlines: bool = False) -> str:
    """
    Replace terminal control characters in ``text`` with visible ``\\xNN`` escapes.

    Test names and failure messages come from the code under test; written
    raw they could carry their own escape sequences into the terminal.
    Tabs and newlines survive only with ``keep_newlines``.
    """
    pattern = _CONTROL_CHARS_BUT_LAYOUT if keep_newlines else _CONTROL_CHARS
    return pattern.sub(_escape_control, text)


def _display_name(result: TestCaseResult) -> str:
    name = f"{result.class_name}::{result.name}" if result.class_name else result.name
    return printable(name)


class ConsoleEncoder(Reporter):
    """
    Render the model as terminal text.

    Whether the target is a color-capable terminal is the caller's decision;
    pass ``color_enabled=False`` for plain output. ``verbose`` adds the
    failure message of each failed or errored test below its line. Failed
    and errored tests are always recapped after the summary.
    """

    format_name = "console"
    extension = "txt"

    def __init__(
        self,
        color_enabled: bool = True,
        verbose: bool = False,
        style: Optional[StyleProvider] = None,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.color_enabled = color_enabled
        self.verbose = verbose
        if style is None:
            style = AnsiStyle() if color_enabled else PlainStyle()
        self.style = style

    def render(self, model: ResultModel) -> str:
        summary = model.summary
        lines = [
            "",
            RULE,
            self.style.title(f"Test Results: {printable(summary.suite_name)}"),
            RULE,
        ]

        if not model.results:
            lines.append("No test cases were recorded.")
        for result in model.results:
            lines.append(
                f"{self.style.marker(result.status)} {_display_name(result):<{NAME_WIDTH}} "
                f"{result.duration_seconds:6.2f}s"
            )
            if self.verbose and result.is_failure:
                for message_line in (result.failure_message or "").splitlines():
                    lines.append(f"    └─ {printable(message_line)}")

        lines += [
            RULE,
            (
                f"{self.style.progress(summary.passed_count, summary.total_count)} "
                f"{summary.passed_count}/{summary.total_count} passed ({summary.pass_rate:.1f}%) · "
                f"{summary.failed_count} failed · {summary.errored_count} errored · "
                f"{summary.skipped_count} skipped · {summary.total_duration_seconds:.2f}s"
            ),
            RULE,
        ]
        lines += self._render_failures(model)
        return "\n".join(lines) + "\n"

    def _render_failures(self, model: ResultModel) -> List[str]:
        failed = model.get_failed_tests()
        if not failed:
            return []

        lines = ["", self.style.title(f"Failed tests ({len(failed)}):"), ""]
        for result in failed:
            lines.append(f"  • {_display_name(result)} [{self.style.label(result.status)}]")
            lines.append(f"    Duration: {result.duration_seconds:.2f}s")
            message_lines = printable(result.failure_message or "", keep_newlines=True).splitlines()
            if message_lines:
                lines.append(f"    Message: {message_lines[0]}")
                lines.extend(f"             {line}" for line in message_lines[1:])
            if result.failure_detail:
                lines.append("    Detail:")
                for detail_line in printable(result.failure_detail, keep_newlines=True).rstrip().splitlines():
                    lines.append(f"      {detail_line}")
            lines.append("")
        return lines
