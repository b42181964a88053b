# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Run configuration for robot-stats."""

from dataclasses import dataclass
from pathlib import Path

from robot_stats.core.constants import DEFAULT_MAX_WORKERS, DEFAULT_REPORT_FILE_PATTERN
from robot_stats.core.errors import InputError


@dataclass
class RunConfig:
    """Settings for one statistics run.

    Attributes:
        report_directory: Directory searched for report files
        report_file_pattern: Glob pattern matched inside report_directory
        pass_threshold: Failed test count above which the run fails
        unstable_threshold: Failed test count above which the run is unstable
        count_skipped: Count SKIP tests in the skipped bucket
        only_critical: Ignore tests not flagged critical
        max_workers: Maximum number of report files processed concurrently
        output_file: Key-value sink for the aggregated statistics
    """

    report_directory: Path
    report_file_pattern: str = DEFAULT_REPORT_FILE_PATTERN
    pass_threshold: int = 0
    unstable_threshold: int = 0
    count_skipped: bool = False
    only_critical: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS
    output_file: Path | None = None

    def validate(self) -> None:
        """Reject invalid settings before any report file is touched.

        Raises:
            InputError: If a threshold is negative, the pattern is empty or
                the worker count is not positive.
        """
        if not self.report_file_pattern.strip():
            raise InputError("report file name pattern must not be empty")
        if self.pass_threshold < 0 or self.unstable_threshold < 0:
            raise InputError("threshold values must be non-negative")
        if self.max_workers < 1:
            raise InputError("max workers must be at least 1")
