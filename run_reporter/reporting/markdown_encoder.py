"""
Markdown report encoder.
"""

from run_reporter.reporting.base import Reporter
from run_reporter.reporting.models import ResultModel


def _cell(text: str) -> str:
    """Make text safe for a single Markdown table cell."""
    text = text.replace("\\", "\\\\").replace("|", "\\|")
    return " ".join(text.split())


def _fence_for(text: str) -> str:
    """Pick a code fence longer than any backtick run inside ``text``."""
    longest = run = 0
    for char in text:
        run = run + 1 if char == "`" else 0
        longest = max(longest, run)
    return "`" * max(3, longest + 1)


class MarkdownEncoder(Reporter):
    """Render the model as a Markdown document."""

    format_name = "markdown"
    extension = "md"

    def render(self, model: ResultModel) -> str:
        summary = model.summary

        md = "# Test Report\n\n"
        md += "## Summary\n\n"
        md += "| Field | Value |\n"
        md += "|-------|-------|\n"
        md += f"| Suite | {_cell(summary.suite_name)} |\n"
        md += f"| Started | {summary.started_at.isoformat(sep=' ', timespec='seconds')} |\n"
        md += f"| Total | {summary.total_count} |\n"
        md += f"| Passed | {summary.passed_count} |\n"
        md += f"| Failed | {summary.failed_count} |\n"
        md += f"| Errored | {summary.errored_count} |\n"
        md += f"| Skipped | {summary.skipped_count} |\n"
        md += f"| Duration | {summary.total_duration_seconds:.2f}s |\n"
        md += f"| Pass rate | {summary.pass_rate:.1f}% |\n"
        for key, value in model.properties.items():
            md += f"| {_cell(key)} | {_cell(value)} |\n"

        md += "\n## Results\n\n"
        if not model.results:
            md += "_No test cases were recorded._\n"
        else:
            md += "| Test | Group | Status | Duration (s) | Failure Message |\n"
            md += "|------|-------|--------|--------------|-----------------|\n"
            for result in model.results:
                md += (
                    f"| {_cell(result.name)} | {_cell(result.class_name)} "
                    f"| {result.status.value.upper()} | {result.duration_seconds:.3f} "
                    f"| {_cell(result.failure_message or '')} |\n"
                )

        detailed = [r for r in model.get_failed_tests() if r.failure_detail]
        if detailed:
            md += "\n## Failures\n"
            for result in detailed:
                fence = _fence_for(result.failure_detail)
                md += f"\n### {_cell(result.name)}\n\n"
                md += f"**{result.status.value.upper()}:** {_cell(result.failure_message or '')}\n\n"
                md += f"{fence}\n{result.failure_detail.rstrip()}\n{fence}\n"

        return md
