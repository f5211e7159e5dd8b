from datetime import datetime, timezone

import pytest

from run_reporter.reporting.models import ResultModel, RunSummary, TestCaseResult, TestStatus

STARTED_AT = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class FailingSink:
    """Byte sink that raises OSError on the n-th write."""

    def __init__(self, fail_on: int = 3):
        self.fail_on = fail_on
        self.writes = 0
        self.data = bytearray()

    def write(self, chunk) -> int:
        self.writes += 1
        if self.writes == self.fail_on:
            raise OSError("disk full")
        self.data.extend(bytes(chunk))
        return len(chunk)


class TrickleSink:
    """Byte sink that accepts at most ``limit`` bytes per write."""

    def __init__(self, limit: int = 3):
        self.limit = limit
        self.writes = 0
        self.data = bytearray()

    def write(self, chunk) -> int:
        self.writes += 1
        accepted = bytes(chunk[:self.limit])
        self.data.extend(accepted)
        return len(accepted)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.delenv("RUN_REPORTER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def scenario_model() -> ResultModel:
    summary = RunSummary(
        suite_name="scenario",
        started_at=STARTED_AT,
        total_count=2,
        passed_count=1,
        failed_count=1,
        errored_count=0,
        skipped_count=0,
        total_duration_seconds=0.03,
    )
    results = (
        TestCaseResult(name="A", status=TestStatus.PASSED, duration_seconds=0.01),
        TestCaseResult(
            name="B",
            status=TestStatus.FAILED,
            duration_seconds=0.02,
            failure_message="assertion failed",
        ),
    )
    return ResultModel(summary=summary, results=results)


@pytest.fixture
def mixed_model() -> ResultModel:
    results = [
        TestCaseResult(name="test_login", class_name="auth", status=TestStatus.PASSED, duration_seconds=0.5),
        TestCaseResult(
            name="test_refund",
            class_name="billing",
            status=TestStatus.FAILED,
            duration_seconds=1.25,
            failure_message="expected 200, got 500",
            failure_detail="Traceback (most recent call last):\n  File \"billing.py\", line 3\nAssertionError",
        ),
        TestCaseResult(
            name="test_db",
            class_name="storage",
            status=TestStatus.ERRORED,
            duration_seconds=0.1,
            failure_message="connection refused",
            failure_detail="ConnectionRefusedError: [Errno 111]",
        ),
        TestCaseResult(name="test_slow", class_name="storage", status=TestStatus.SKIPPED),
    ]
    return ResultModel.from_results(
        suite_name="checkout service",
        results=results,
        started_at=STARTED_AT,
        properties={"branch": "main", "commit": "abc123"},
    )


@pytest.fixture
def empty_model() -> ResultModel:
    return ResultModel.from_results(suite_name="empty", results=[], started_at=STARTED_AT)
