from datetime import datetime

import pytest

from run_reporter.core.errors import ModelValidationError
from run_reporter.reporting.models import ResultModel, RunSummary, TestCaseResult, TestStatus

from conftest import STARTED_AT


def test_from_results_derives_summary(mixed_model):
    summary = mixed_model.summary
    assert summary.total_count == 4
    assert summary.passed_count == 1
    assert summary.failed_count == 1
    assert summary.errored_count == 1
    assert summary.skipped_count == 1
    assert summary.total_duration_seconds == pytest.approx(1.85)
    assert [r.name for r in mixed_model.results] == ["test_login", "test_refund", "test_db", "test_slow"]


def test_pass_rate(scenario_model, empty_model):
    assert scenario_model.summary.pass_rate == 50.0
    assert empty_model.summary.pass_rate == 0.0


def test_status_strings_are_coerced():
    result = TestCaseResult(name="t", status="skipped")
    assert result.status is TestStatus.SKIPPED


def test_unknown_status_rejected():
    with pytest.raises(ModelValidationError):
        TestCaseResult(name="t", status="flaky")


def test_failed_result_requires_message():
    with pytest.raises(ModelValidationError):
        TestCaseResult(name="t", status=TestStatus.FAILED)


def test_passed_result_rejects_failure_fields():
    with pytest.raises(ModelValidationError):
        TestCaseResult(name="t", status=TestStatus.PASSED, failure_message="boom")
    with pytest.raises(ModelValidationError):
        TestCaseResult(name="t", status=TestStatus.SKIPPED, failure_detail="trace")


@pytest.mark.parametrize("duration", [-0.1, float("nan"), float("inf")])
def test_invalid_duration_rejected(duration):
    with pytest.raises(ModelValidationError):
        TestCaseResult(name="t", status=TestStatus.PASSED, duration_seconds=duration)


def test_summary_counts_must_add_up():
    with pytest.raises(ModelValidationError):
        RunSummary(suite_name="s", started_at=STARTED_AT, total_count=3, passed_count=1)


def test_summary_must_match_results():
    summary = RunSummary(suite_name="s", started_at=STARTED_AT, total_count=1, passed_count=1)
    with pytest.raises(ModelValidationError):
        ResultModel(summary=summary, results=())
    failed = TestCaseResult(name="t", status=TestStatus.FAILED, failure_message="x")
    with pytest.raises(ModelValidationError):
        ResultModel(summary=summary, results=(failed,))


def test_model_is_immutable(scenario_model):
    with pytest.raises(AttributeError):
        scenario_model.summary = None
    with pytest.raises(TypeError):
        scenario_model.properties["x"] = "y"
    assert isinstance(scenario_model.results, tuple)


def test_to_dict_omits_absent_failure_fields(scenario_model):
    data = scenario_model.to_dict()
    assert "failureMessage" not in data["results"][0]
    assert "failureDetail" not in data["results"][0]
    assert data["results"][1]["failureMessage"] == "assertion failed"
    assert data["summary"]["startedAt"] == "2026-01-02T03:04:05+00:00"
    assert "properties" not in data


def test_from_dict_round_trip(mixed_model):
    restored = ResultModel.from_dict(mixed_model.to_dict())
    assert restored.to_dict() == mixed_model.to_dict()


def test_from_dict_accepts_zulu_timestamp():
    model = ResultModel.from_dict({
        "summary": {"suiteName": "s", "totalCount": 0, "startedAt": "2026-01-02T03:04:05Z"},
        "results": [],
    })
    assert model.summary.started_at.utcoffset().total_seconds() == 0
    assert isinstance(model.summary.started_at, datetime)


def test_from_dict_reports_missing_field():
    with pytest.raises(ModelValidationError, match="name"):
        ResultModel.from_dict({"startedAt": "2026-01-02T03:04:05", "results": [{"status": "passed"}]})


@pytest.mark.parametrize("field", ["failure_message", "failure_detail"])
def test_non_string_failure_fields_rejected(field):
    fields = {"failure_message": "boom", field: 404}
    with pytest.raises(ModelValidationError, match="must be a string"):
        TestCaseResult(name="t", status=TestStatus.FAILED, **fields)


def test_non_string_suite_name_rejected():
    with pytest.raises(ModelValidationError, match="suite name"):
        RunSummary(suite_name=2024, started_at=STARTED_AT)
    with pytest.raises(ModelValidationError):
        ResultModel.from_results(suite_name=None, results=[], started_at=STARTED_AT)


def test_from_dict_stringifies_numeric_text_fields():
    result = TestCaseResult.from_dict(
        {"name": 7, "className": 3, "status": "failed", "failureMessage": 404, "failureDetail": 1.5}
    )
    assert result.name == "7"
    assert result.class_name == "3"
    assert result.failure_message == "404"
    assert result.failure_detail == "1.5"

    summary = RunSummary.from_dict({"suiteName": 2024, "startedAt": "2026-01-02T03:04:05Z", "totalCount": 0})
    assert summary.suite_name == "2024"


def test_from_dict_rejects_structured_text_fields():
    with pytest.raises(ModelValidationError):
        TestCaseResult.from_dict({"name": "t", "status": "failed", "failureMessage": {"code": 404}})
    with pytest.raises(ModelValidationError):
        TestCaseResult.from_dict({"name": "t", "status": "errored", "failureMessage": "x", "failureDetail": True})
