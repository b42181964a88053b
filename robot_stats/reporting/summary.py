# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Human-readable summary of the aggregated statistics."""

import logging
from collections.abc import Sequence

from robot_stats.core.types import FileResult, StatsResult

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 47
DETAIL_SEPARATOR = "-" * 47


def format_summary(stats: StatsResult) -> list[str]:
    """Summary lines for the merged statistics, rates with two decimals."""
    lines = [
        SEPARATOR,
        "Robot Framework Test Report Summary",
        SEPARATOR,
        f"Total Test Suites: {stats.total_suites}",
        f"Total Test Cases: {stats.total_tests}",
        f"Passed Tests: {stats.passed_tests}",
        f"Failed Tests: {stats.failed_tests}",
        f"Skipped Tests: {stats.skipped_tests}",
        f"Critical Tests: {stats.total_critical}",
        f"Critical Passed: {stats.critical_passed}",
        f"Critical Failed: {stats.critical_failed}",
        f"Total Keywords: {stats.total_keywords}",
        f"Passed Keywords: {stats.passed_keywords}",
        f"Failed Keywords: {stats.failed_keywords}",
        f"Skipped Keywords: {stats.skipped_keywords}",
        f"Failure Rate: {stats.failure_rate:.2f}%",
        f"Skipped Rate: {stats.skipped_rate:.2f}%",
        f"Total Execution Time: {stats.execution_time} ms",
    ]
    if stats.invalid_timestamps:
        lines.append(f"Unparseable Timestamps: {stats.invalid_timestamps}")
    lines.append(SEPARATOR)

    if stats.failed_tests_details:
        lines.append("Failed Test Details:")
        lines.append(DETAIL_SEPARATOR)
        for i, test in enumerate(stats.failed_tests_details, start=1):
            lines.append(f"{i}. Test Name: {test.name}")
            lines.append(f"   Suite: {test.suite}")
            lines.append(f"   Status: {test.status}")
            lines.append(f"   Error Message: {test.error_message}")
            lines.append(DETAIL_SEPARATOR)

    return lines


def log_aggregated_results(
    stats: StatsResult, file_results: Sequence[FileResult] = ()
) -> None:
    """Log the summary and any files that did not contribute statistics."""
    for line in format_summary(stats):
        logger.info(line)

    for result in file_results:
        if result.has_error:
            logger.info(f"Not included (error): {result.path}: {result.reason}")
        elif result.reason:
            logger.info(f"Not included (empty): {result.path}: {result.reason}")
