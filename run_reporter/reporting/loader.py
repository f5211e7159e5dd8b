"""
Load a ResultModel from a JSON or YAML document.

The accepted schema is the one written by the JSON encoder. A document
without a ``summary`` block gets one derived from its results.
"""

import json
from pathlib import Path
from typing import Union

import yaml

from run_reporter.core.errors import ModelValidationError
from run_reporter.core.logging import get_logger
from run_reporter.reporting.models import ResultModel

logger = get_logger(__name__)


def parse_result_model(text: str, source: str = "<string>") -> ResultModel:
    """Parse a JSON or YAML document into a ResultModel."""
    # JSON first: YAML 1.1 reads exponent floats such as 1e-05 as strings
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ModelValidationError(f"{source}: not valid JSON or YAML: {e}") from e
    if not isinstance(data, dict):
        raise ModelValidationError(f"{source}: expected a mapping at the top level")
    try:
        model = ResultModel.from_dict(data)
    except ModelValidationError as e:
        raise ModelValidationError(f"{source}: {e}") from e
    logger.debug("Loaded %d results from %s", len(model.results), source)
    return model


def load_result_model(path: Union[str, Path]) -> ResultModel:
    """Load a ResultModel from a file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ModelValidationError(f"Cannot read results file {path}: {e}") from e
    return parse_result_model(text, source=str(path))
