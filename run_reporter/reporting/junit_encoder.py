"""
JUnit XML report encoder.

Produces a single ``<testsuite>`` document in the common JUnit schema read
by CI dashboards (Jenkins, GitLab, GitHub annotations).
"""

import re
import xml.etree.ElementTree as ET

from run_reporter.reporting.base import Reporter
from run_reporter.reporting.models import ResultModel, TestStatus

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Everything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)

FAILURE_TYPES = {
    TestStatus.FAILED: "failure",
    TestStatus.ERRORED: "error",
}


def _replace_invalid(match) -> str:
    code = ord(match.group(0))
    if code <= 0xFF:
        return f"\\x{code:02x}"
    return f"\\u{code:04x}"


def xml_safe(text: str) -> str:
    """Replace characters XML cannot carry with a visible escape."""
    return _INVALID_XML_CHARS.sub(_replace_invalid, text)


def _seconds(value: float) -> str:
    return f"{value:.3f}"


class JUnitXMLEncoder(Reporter):
    """Render the model as JUnit XML."""

    format_name = "junit"
    extension = "xml"

    def build_tree(self, model: ResultModel) -> ET.Element:
        """Build the ``<testsuite>`` element for ``model``."""
        summary = model.summary
        testsuite = ET.Element(
            "testsuite",
            {
                "name": xml_safe(summary.suite_name),
                "tests": str(summary.total_count),
                "failures": str(summary.failed_count),
                "errors": str(summary.errored_count),
                "skipped": str(summary.skipped_count),
                "time": _seconds(summary.total_duration_seconds),
                "timestamp": summary.started_at.isoformat(timespec="seconds"),
            },
        )

        if model.properties:
            props = ET.SubElement(testsuite, "properties")
            for key, value in model.properties.items():
                ET.SubElement(props, "property", {"name": xml_safe(key), "value": xml_safe(value)})

        for result in model.results:
            testcase = ET.SubElement(
                testsuite,
                "testcase",
                {
                    "name": xml_safe(result.name),
                    "classname": xml_safe(result.class_name),
                    "time": _seconds(result.duration_seconds),
                },
            )

            if result.is_failure:
                failure = ET.SubElement(
                    testcase,
                    "failure",
                    {
                        "message": xml_safe(result.failure_message or ""),
                        "type": FAILURE_TYPES[result.status],
                    },
                )
                if result.failure_detail:
                    failure.text = xml_safe(result.failure_detail)
            elif result.status == TestStatus.SKIPPED:
                ET.SubElement(testcase, "skipped")

        return testsuite

    def render(self, model: ResultModel) -> str:
        testsuite = self.build_tree(model)
        ET.indent(testsuite, space="  ")
        return XML_DECLARATION + ET.tostring(testsuite, encoding="unicode") + "\n"
