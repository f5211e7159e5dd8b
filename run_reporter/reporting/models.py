"""
Data models for test reporting.

A ``ResultModel`` is an immutable snapshot of one test run: a ``RunSummary``
plus the ordered ``TestCaseResult`` sequence it summarizes. Every encoder
renders from this model and never mutates it.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from run_reporter.core.errors import ModelValidationError


class TestStatus(Enum):
    """Test execution status."""
    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    ERRORED = "errored"

    @property
    def is_failure(self) -> bool:
        return self in (TestStatus.FAILED, TestStatus.ERRORED)


def _check_duration(value: float, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ModelValidationError(f"{what} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ModelValidationError(f"{what} must be a finite non-negative number, got {value!r}")
    return float(value)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ModelValidationError(f"startedAt must be an ISO-8601 string, got {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise ModelValidationError(f"startedAt is not a valid ISO-8601 timestamp: {value!r}") from e


def _scalar_text(value: Any) -> Any:
    # YAML reads bare numbers in name and message fields as int or float
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _require(data: Mapping[str, Any], key: str, what: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ModelValidationError(f"{what} is missing required field '{key}'") from None


@dataclass(frozen=True)
class TestCaseResult:
    """Individual test result."""
    __test__ = False

    name: str
    status: TestStatus
    duration_seconds: float = 0.0
    class_name: str = ""
    failure_message: Optional[str] = None
    failure_detail: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ModelValidationError(f"test name must be a string, got {self.name!r}")
        if not isinstance(self.class_name, str):
            raise ModelValidationError(f"class name of '{self.name}' must be a string")
        for label, value in (("failure message", self.failure_message), ("failure detail", self.failure_detail)):
            if value is not None and not isinstance(value, str):
                raise ModelValidationError(f"{label} of '{self.name}' must be a string, got {value!r}")
        if not isinstance(self.status, TestStatus):
            try:
                object.__setattr__(self, "status", TestStatus(self.status))
            except ValueError:
                raise ModelValidationError(
                    f"unknown status {self.status!r} for test '{self.name}'"
                ) from None
        object.__setattr__(
            self, "duration_seconds",
            _check_duration(self.duration_seconds, f"duration of '{self.name}'"),
        )

        if self.status.is_failure:
            if not self.failure_message:
                raise ModelValidationError(
                    f"{self.status.value} test '{self.name}' requires a failure message"
                )
        elif self.failure_message is not None or self.failure_detail is not None:
            raise ModelValidationError(
                f"{self.status.value} test '{self.name}' must not carry failure information"
            )

    @property
    def is_failure(self) -> bool:
        return self.status.is_failure

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, omitting absent failure fields."""
        result = {
            "name": self.name,
            "className": self.class_name,
            "status": self.status.value,
            "durationSeconds": self.duration_seconds,
        }
        if self.failure_message is not None:
            result["failureMessage"] = self.failure_message
        if self.failure_detail is not None:
            result["failureDetail"] = self.failure_detail
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TestCaseResult":
        if not isinstance(data, Mapping):
            raise ModelValidationError(f"test case entry must be a mapping, got {data!r}")
        return cls(
            name=_scalar_text(_require(data, "name", "test case")),
            status=_require(data, "status", "test case"),
            duration_seconds=data.get("durationSeconds", 0.0),
            class_name=_scalar_text(data.get("className") or ""),
            failure_message=_scalar_text(data.get("failureMessage")),
            failure_detail=_scalar_text(data.get("failureDetail")),
        )


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counts and timing for one test run."""
    suite_name: str
    started_at: datetime
    total_count: int = 0
    passed_count: int = 0
    failed_count: int = 0
    errored_count: int = 0
    skipped_count: int = 0
    total_duration_seconds: float = 0.0

    def __post_init__(self):
        if not isinstance(self.suite_name, str):
            raise ModelValidationError(f"suite name must be a string, got {self.suite_name!r}")
        if not isinstance(self.started_at, datetime):
            raise ModelValidationError(f"started_at must be a datetime, got {self.started_at!r}")
        for name, value in self.status_counts().items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ModelValidationError(f"{name} count must be a non-negative integer, got {value!r}")
        if isinstance(self.total_count, bool) or not isinstance(self.total_count, int):
            raise ModelValidationError(f"total count must be an integer, got {self.total_count!r}")
        object.__setattr__(
            self, "total_duration_seconds",
            _check_duration(self.total_duration_seconds, "total duration"),
        )
        counted = sum(self.status_counts().values())
        if self.total_count != counted:
            raise ModelValidationError(
                f"total count {self.total_count} does not match sum of status counts {counted}"
            )

    @property
    def pass_rate(self) -> float:
        """Percentage of passed tests, 0.0 for an empty run."""
        if self.total_count == 0:
            return 0.0
        return self.passed_count / self.total_count * 100

    def status_counts(self) -> Dict[str, int]:
        """Get count of tests by status."""
        return {
            "passed": self.passed_count,
            "failed": self.failed_count,
            "errored": self.errored_count,
            "skipped": self.skipped_count,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "suiteName": self.suite_name,
            "totalCount": self.total_count,
            "passedCount": self.passed_count,
            "failedCount": self.failed_count,
            "erroredCount": self.errored_count,
            "skippedCount": self.skipped_count,
            "totalDurationSeconds": self.total_duration_seconds,
            "startedAt": self.started_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RunSummary":
        if not isinstance(data, Mapping):
            raise ModelValidationError(f"summary must be a mapping, got {data!r}")
        return cls(
            suite_name=_scalar_text(_require(data, "suiteName", "summary")),
            started_at=_parse_timestamp(_require(data, "startedAt", "summary")),
            total_count=_require(data, "totalCount", "summary"),
            passed_count=data.get("passedCount", 0),
            failed_count=data.get("failedCount", 0),
            errored_count=data.get("erroredCount", 0),
            skipped_count=data.get("skippedCount", 0),
            total_duration_seconds=data.get("totalDurationSeconds", 0.0),
        )


def _count_statuses(results: Iterable[TestCaseResult]) -> Dict[TestStatus, int]:
    counts = {status: 0 for status in TestStatus}
    for result in results:
        counts[result.status] += 1
    return counts


@dataclass(frozen=True)
class ResultModel:
    """Complete, immutable test run report."""
    summary: RunSummary
    results: Tuple[TestCaseResult, ...] = ()
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        results = tuple(self.results)
        for result in results:
            if not isinstance(result, TestCaseResult):
                raise ModelValidationError(f"results must contain TestCaseResult items, got {result!r}")
        object.__setattr__(self, "results", results)

        properties = {}
        for key, value in dict(self.properties or {}).items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ModelValidationError(f"property {key!r} must map a string to a string")
            properties[key] = value
        object.__setattr__(self, "properties", MappingProxyType(properties))

        if self.summary.total_count != len(results):
            raise ModelValidationError(
                f"summary reports {self.summary.total_count} tests but {len(results)} results were given"
            )
        counts = _count_statuses(results)
        expected = {
            TestStatus.PASSED: self.summary.passed_count,
            TestStatus.FAILED: self.summary.failed_count,
            TestStatus.ERRORED: self.summary.errored_count,
            TestStatus.SKIPPED: self.summary.skipped_count,
        }
        for status, count in expected.items():
            if counts[status] != count:
                raise ModelValidationError(
                    f"summary reports {count} {status.value} tests but results contain {counts[status]}"
                )

    @classmethod
    def from_results(
        cls,
        suite_name: str,
        results: Iterable[TestCaseResult],
        started_at: datetime,
        total_duration_seconds: Optional[float] = None,
        properties: Optional[Mapping[str, str]] = None,
    ) -> "ResultModel":
        """Build a model whose summary is derived from the result sequence."""
        results = tuple(results)
        counts = _count_statuses(results)
        if total_duration_seconds is None:
            total_duration_seconds = sum(r.duration_seconds for r in results)
        summary = RunSummary(
            suite_name=suite_name,
            started_at=started_at,
            total_count=len(results),
            passed_count=counts[TestStatus.PASSED],
            failed_count=counts[TestStatus.FAILED],
            errored_count=counts[TestStatus.ERRORED],
            skipped_count=counts[TestStatus.SKIPPED],
            total_duration_seconds=total_duration_seconds,
        )
        return cls(summary=summary, results=results, properties=properties or {})

    def get_failed_tests(self) -> Tuple[TestCaseResult, ...]:
        """Get failed and errored results in model order."""
        return tuple(r for r in self.results if r.is_failure)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "summary": self.summary.to_dict(),
            "results": [r.to_dict() for r in self.results],
        }
        if self.properties:
            result["properties"] = dict(self.properties)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResultModel":
        """Create a model from the dictionary produced by ``to_dict``."""
        if not isinstance(data, Mapping):
            raise ModelValidationError("report document must be a mapping")
        raw_results = data.get("results") or []
        if not isinstance(raw_results, (list, tuple)):
            raise ModelValidationError("'results' must be a list")
        results = [TestCaseResult.from_dict(item) for item in raw_results]
        properties = data.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise ModelValidationError("'properties' must be a mapping")
        properties = {str(k): str(v) for k, v in properties.items()}

        summary = data.get("summary")
        if summary is None:
            return cls.from_results(
                suite_name=str(data.get("suiteName", "tests")),
                results=results,
                started_at=_parse_timestamp(_require(data, "startedAt", "report")),
                properties=properties,
            )
        return cls(summary=RunSummary.from_dict(summary), results=results, properties=properties)
