# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core result types for robot-stats."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from robot_stats.core.errors import ThresholdExceeded, UnstableWarning


@dataclass(frozen=True)
class FailedTestDetail:
    """One failed test, reported after aggregation.

    Attributes:
        name: Test name
        suite: Name of the suite owning the test
        status: Literal outcome label (always ``FAIL``)
        error_message: Last ERROR-level status message, empty if none
    """

    name: str
    suite: str
    status: str
    error_message: str = ""


@dataclass
class StatsResult:
    """Statistics accumulated over one report file or a merged set of files.

    Counters only ever grow while a tree is folded in or results are merged.
    The two rates are derived from the counters on access and are exactly 0
    when no test was counted.

    Attributes:
        total_suites: Suites holding at least one test or sub-suite
        total_tests: Counted tests (see ``compute_stats`` for skip handling)
        passed_tests / failed_tests / skipped_tests: Test outcome buckets
        total_keywords: Keywords under counted tests, at any depth
        passed_keywords / failed_keywords / skipped_keywords: Keyword buckets
        total_critical: Counted tests flagged critical
        critical_passed / critical_failed: Critical outcome buckets
        execution_time: Summed suite and test durations in milliseconds
        invalid_timestamps: Nodes whose timing could not be used
        failed_tests_details: One entry per failed test, in no meaningful order
    """

    total_suites: int = 0
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    skipped_tests: int = 0
    total_keywords: int = 0
    passed_keywords: int = 0
    failed_keywords: int = 0
    skipped_keywords: int = 0
    total_critical: int = 0
    critical_passed: int = 0
    critical_failed: int = 0
    execution_time: int = 0
    invalid_timestamps: int = 0
    failed_tests_details: list[FailedTestDetail] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "StatsResult":
        """Zero-valued result, the contribution of an empty or failed file."""
        return cls()

    @property
    def failure_rate(self) -> float:
        """Failed tests as a percentage of counted tests (0.0-100.0)."""
        if self.total_tests > 0:
            return (self.failed_tests / self.total_tests) * 100
        return 0.0

    @property
    def skipped_rate(self) -> float:
        """Skipped tests as a percentage of counted tests (0.0-100.0)."""
        if self.total_tests > 0:
            return (self.skipped_tests / self.total_tests) * 100
        return 0.0

    @property
    def is_empty(self) -> bool:
        return self.total_tests == 0 and self.total_suites == 0

    def add(self, other: "StatsResult") -> None:
        """Fold another result into this one."""
        self.total_suites += other.total_suites
        self.total_tests += other.total_tests
        self.passed_tests += other.passed_tests
        self.failed_tests += other.failed_tests
        self.skipped_tests += other.skipped_tests
        self.total_keywords += other.total_keywords
        self.passed_keywords += other.passed_keywords
        self.failed_keywords += other.failed_keywords
        self.skipped_keywords += other.skipped_keywords
        self.total_critical += other.total_critical
        self.critical_passed += other.critical_passed
        self.critical_failed += other.critical_failed
        self.execution_time += other.execution_time
        self.invalid_timestamps += other.invalid_timestamps
        self.failed_tests_details.extend(other.failed_tests_details)

    def counters(self) -> dict[str, int | float]:
        """All counters and rates by field name, without the failure details."""
        return {
            "total_suites": self.total_suites,
            "total_tests": self.total_tests,
            "passed_tests": self.passed_tests,
            "failed_tests": self.failed_tests,
            "skipped_tests": self.skipped_tests,
            "total_keywords": self.total_keywords,
            "passed_keywords": self.passed_keywords,
            "failed_keywords": self.failed_keywords,
            "skipped_keywords": self.skipped_keywords,
            "total_critical": self.total_critical,
            "critical_passed": self.critical_passed,
            "critical_failed": self.critical_failed,
            "execution_time": self.execution_time,
            "invalid_timestamps": self.invalid_timestamps,
            "failure_rate": self.failure_rate,
            "skipped_rate": self.skipped_rate,
        }

    def __str__(self) -> str:
        """Concise string representation: total/passed/failed/skipped."""
        return (
            f"{self.total_tests}/{self.passed_tests}/"
            f"{self.failed_tests}/{self.skipped_tests}"
        )


class ExecutionState(str, Enum):
    """Outcome of processing a single report file.

    SUCCESS: Statistics were computed from a non-empty tree
    EMPTY: Zero-length file or a tree without tests and sub-suites
    ERROR: The file could not be read or parsed
    """

    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class FileResult:
    """Statistics of one report file together with how they were obtained."""

    path: Path
    stats: StatsResult = field(default_factory=StatsResult.empty)
    state: ExecutionState = ExecutionState.SUCCESS
    reason: str | None = None

    @classmethod
    def empty(cls, path: Path, reason: str | None = None) -> "FileResult":
        return cls(path=path, state=ExecutionState.EMPTY, reason=reason)

    @classmethod
    def from_error(cls, path: Path, reason: str) -> "FileResult":
        """Zero contribution for a file whose processing failed."""
        return cls(path=path, state=ExecutionState.ERROR, reason=reason)

    @property
    def has_error(self) -> bool:
        return self.state == ExecutionState.ERROR


class ThresholdOutcome(str, Enum):
    PASS = "pass"
    UNSTABLE = "unstable"
    FAIL = "fail"


@dataclass(frozen=True)
class ThresholdResult:
    """Decision of the threshold validator.

    Attributes:
        outcome: PASS, UNSTABLE or FAIL
        failed_tests: Merged failed test count the decision is based on
        pass_threshold: Configured pass ceiling
        unstable_threshold: Configured unstable ceiling
    """

    outcome: ThresholdOutcome
    failed_tests: int
    pass_threshold: int
    unstable_threshold: int

    @property
    def condition(self) -> ThresholdExceeded | UnstableWarning | None:
        """Typed condition describing a non-passing outcome."""
        if self.outcome == ThresholdOutcome.FAIL:
            return ThresholdExceeded(self.failed_tests, self.pass_threshold)
        if self.outcome == ThresholdOutcome.UNSTABLE:
            return UnstableWarning(self.failed_tests, self.unstable_threshold)
        return None

    def raise_for_outcome(self) -> None:
        """Raise ThresholdExceeded when the outcome is FAIL."""
        condition = self.condition
        if isinstance(condition, ThresholdExceeded):
            raise condition
