"""
HTML report encoder.
"""

import html
import logging
from typing import List, Optional

from run_reporter.reporting.base import Reporter
from run_reporter.reporting.models import ResultModel, TestCaseResult
from run_reporter.reporting.style import HtmlStyle, StyleProvider

STYLESHEET = """
        body { font-family: system-ui, Arial, sans-serif; max-width: 1200px; margin: 0 auto; padding: 20px; }
        .header { background-color: #7D56F4; color: white; padding: 20px; border-radius: 8px; }
        .header h1 { margin-top: 0; }
        .summary { display: flex; gap: 20px; margin: 20px 0; flex-wrap: wrap; }
        .summary-card {
            background-color: #f5f5f5;
            padding: 15px;
            border-radius: 5px;
            text-align: center;
            min-width: 120px;
        }
        .summary-card h3 { margin: 0 0 5px 0; }
        .summary-card.passed { background-color: #d4edda; }
        .summary-card.failed { background-color: #f8d7da; }
        .summary-card.errored { background-color: #f5c6cb; }
        .summary-card.skipped { background-color: #fff3cd; }
        .progress { background-color: #f8d7da; border-radius: 4px; height: 10px; margin: 10px 0; }
        .progress-bar { background-color: #04B575; border-radius: 4px; height: 10px; }
        .results-table { width: 100%; border-collapse: collapse; margin: 20px 0; }
        .results-table th, .results-table td {
            border: 1px solid #ddd;
            padding: 8px;
            text-align: left;
            vertical-align: top;
        }
        .results-table th { background-color: #f2f2f2; }
        tr.passed td:first-child { border-left: 4px solid #04B575; }
        tr.failed td:first-child { border-left: 4px solid #FF0000; }
        tr.errored td:first-child { border-left: 4px solid #8B0000; }
        tr.skipped td:first-child { border-left: 4px solid #FFA500; }
        .status-passed { color: green; font-weight: bold; }
        .status-failed { color: red; font-weight: bold; }
        .status-errored { color: darkred; font-weight: bold; }
        .status-skipped { color: orange; font-weight: bold; }
        .failure-details {
            background-color: #f8d7da;
            padding: 10px;
            border-left: 4px solid #dc3545;
            margin: 5px 0;
            font-family: monospace;
            white-space: pre-wrap;
        }
        .empty { color: gray; font-style: italic; }
"""


def _esc(text: str) -> str:
    return html.escape(text, quote=True)


class HTMLEncoder(Reporter):
    """Render the model as one self-contained HTML page."""

    format_name = "html"
    extension = "html"

    def __init__(self, logger: Optional[logging.Logger] = None, style: Optional[StyleProvider] = None):
        super().__init__(logger)
        self.style = style or HtmlStyle()

    def render(self, model: ResultModel) -> str:
        summary = model.summary
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Test Report - {_esc(summary.suite_name)}</title>
    <style>{STYLESHEET}    </style>
</head>
<body>
{self._render_header(model)}
{self._render_summary(model)}
{self._render_results(model)}
</body>
</html>
"""

    def _render_header(self, model: ResultModel) -> str:
        summary = model.summary
        lines = [
            '    <div class="header">',
            f"        {self.style.title('Test Report')}",
            f"        <p><strong>Suite:</strong> {_esc(summary.suite_name)}</p>",
            f"        <p><strong>Started:</strong> {_esc(summary.started_at.isoformat(sep=' ', timespec='seconds'))}</p>",
        ]
        for key, value in model.properties.items():
            lines.append(f"        <p><strong>{_esc(key)}:</strong> {_esc(value)}</p>")
        lines.append("    </div>")
        return "\n".join(lines)

    def _render_summary(self, model: ResultModel) -> str:
        summary = model.summary
        cards = [("total", "Total", summary.total_count)]
        cards += [
            (name, name.title(), count) for name, count in summary.status_counts().items()
        ]

        lines = [
            '    <div class="summary-section">',
            "        <h2>Summary</h2>",
            '        <div class="summary">',
        ]
        for css_class, title, count in cards:
            lines.append(
                f'            <div class="summary-card {css_class}"><h3>{count}</h3><p>{title}</p></div>'
            )
        lines += [
            "        </div>",
            f"        <p><strong>Duration:</strong> {summary.total_duration_seconds:.2f} seconds</p>",
            f"        <p><strong>Pass rate:</strong> {summary.pass_rate:.1f}%</p>",
            f"        {self.style.progress(summary.passed_count, summary.total_count)}",
            "    </div>",
        ]
        return "\n".join(lines)

    def _render_results(self, model: ResultModel) -> str:
        lines = [
            '    <div class="results">',
            "        <h2>Results</h2>",
            '        <table class="results-table">',
            "            <thead>",
            "                <tr>",
            "                    <th></th>",
            "                    <th>Test</th>",
            "                    <th>Group</th>",
            "                    <th>Status</th>",
            "                    <th>Duration (s)</th>",
            "                    <th>Failure Message</th>",
            "                </tr>",
            "            </thead>",
            "            <tbody>",
        ]
        if not model.results:
            lines.append('                <tr><td colspan="6" class="empty">No test cases were recorded.</td></tr>')
        for result in model.results:
            lines.extend(self._render_row(result))
        lines += [
            "            </tbody>",
            "        </table>",
            "    </div>",
        ]
        return "\n".join(lines)

    def _render_row(self, result: TestCaseResult) -> List[str]:
        status = result.status
        rows = [
            f'                <tr class="{status.value}">',
            f"                    <td>{self.style.marker(status)}</td>",
            f"                    <td><strong>{_esc(result.name)}</strong></td>",
            f"                    <td>{_esc(result.class_name)}</td>",
            f"                    <td>{self.style.label(status)}</td>",
            f"                    <td>{result.duration_seconds:.3f}</td>",
            f"                    <td>{_esc(result.failure_message or '')}</td>",
            "                </tr>",
        ]
        if result.failure_detail:
            rows += [
                f'                <tr class="{status.value} detail">',
                '                    <td colspan="6">',
                f'                        <div class="failure-details">{_esc(result.failure_detail)}</div>',
                "                    </td>",
                "                </tr>",
            ]
        return rows
