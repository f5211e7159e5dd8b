import io
import json

from run_reporter.reporting.json_encoder import JSONEncoder


def _decode(model):
    sink = io.BytesIO()
    JSONEncoder().report(sink, model)
    return sink.getvalue().decode("utf-8")


def test_summary_and_results_match_model(mixed_model):
    data = json.loads(_decode(mixed_model))
    assert set(data) == {"summary", "results", "properties"}
    assert data["summary"]["totalCount"] == len(mixed_model.results)
    assert [r["name"] for r in data["results"]] == [r.name for r in mixed_model.results]
    assert data["summary"]["suiteName"] == "checkout service"
    assert data["summary"]["erroredCount"] == 1
    assert data["properties"] == {"branch": "main", "commit": "abc123"}


def test_numbers_stay_numbers(scenario_model):
    data = json.loads(_decode(scenario_model))
    assert data["summary"]["totalDurationSeconds"] == 0.03
    assert data["results"][0]["durationSeconds"] == 0.01
    assert isinstance(data["summary"]["passedCount"], int)


def test_optional_failure_fields_are_omitted(scenario_model):
    text = _decode(scenario_model)
    data = json.loads(text)
    assert "failureMessage" not in data["results"][0]
    assert data["results"][1] == {
        "name": "B",
        "className": "",
        "status": "failed",
        "durationSeconds": 0.02,
        "failureMessage": "assertion failed",
    }
    assert "null" not in text


def test_two_space_indentation(scenario_model):
    lines = _decode(scenario_model).splitlines()
    assert lines[0] == "{"
    assert lines[1] == '  "summary": {'
    assert lines[2].startswith('    "suiteName"')


def test_empty_model(empty_model):
    data = json.loads(_decode(empty_model))
    assert data["results"] == []
    assert data["summary"]["totalCount"] == 0
