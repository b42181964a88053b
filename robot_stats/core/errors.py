# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Error taxonomy for robot-stats.

Run-level errors (invalid configuration, no report files, pass threshold
exceeded) propagate to the caller. File-level errors (``ReportParseError``)
are scoped to one report file and are absorbed by the orchestrator.
"""

from pathlib import Path


class RobotStatsError(Exception):
    """Base class for all robot-stats errors."""


class InputError(RobotStatsError):
    """Invalid configuration, rejected before any file is processed."""


class NoReportsFoundError(RobotStatsError):
    """No readable report file matched the configured directory and pattern."""


class ReportParseError(RobotStatsError):
    """A report file does not contain well-formed XML."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        location = str(path) if path is not None else "<bytes>"
        super().__init__(f"failed to parse {location}: {reason}")


class ThresholdExceeded(RobotStatsError):
    """Merged failure count is above the pass threshold."""

    def __init__(self, failed_tests: int, threshold: int) -> None:
        self.failed_tests = failed_tests
        self.threshold = threshold
        super().__init__(
            f"failed tests count ({failed_tests}) exceeds the pass threshold ({threshold})"
        )


class UnstableWarning(UserWarning):
    """Merged failure count is above the unstable threshold only.

    Non-fatal: logged by the orchestrator, never raised.
    """

    def __init__(self, failed_tests: int, threshold: int) -> None:
        self.failed_tests = failed_tests
        self.threshold = threshold
        super().__init__(
            f"failed tests count ({failed_tests}) exceeds the unstable threshold ({threshold})"
        )
