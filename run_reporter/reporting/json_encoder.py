"""
JSON report encoder.
"""

import json

from run_reporter.reporting.base import Reporter
from run_reporter.reporting.models import ResultModel


class JSONEncoder(Reporter):
    """Render the model as a pretty-printed JSON document.

    Top-level keys are ``summary`` and ``results`` (plus ``properties`` when
    the run carries metadata). Optional failure fields are omitted rather
    than written as null.
    """

    format_name = "json"
    extension = "json"

    def render(self, model: ResultModel) -> str:
        return json.dumps(model.to_dict(), indent=2, ensure_ascii=False, allow_nan=False) + "\n"
