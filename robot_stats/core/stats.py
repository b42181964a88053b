# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Statistics engine: folds one report tree into a StatsResult.

The walk is single-threaded and touches no shared state, so concurrent
callers each own their result and the merge happens afterwards (see
``robot_stats.core.aggregator``).
"""

import logging
import re
from datetime import datetime, timedelta

from robot_stats.core.constants import ROBOT_TIMESTAMP_FORMAT, ROBOT_TIMESTAMP_PATTERN
from robot_stats.core.models import Keyword, Outcome, RobotOutput, Suite, Test
from robot_stats.core.types import FailedTestDetail, StatsResult

logger = logging.getLogger(__name__)

_TIMESTAMP_RE: re.Pattern[str] = re.compile(ROBOT_TIMESTAMP_PATTERN)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def parse_robot_timestamp(timestamp: str) -> datetime | None:
    """Parse a Robot Framework timestamp such as '20250101 12:00:00.000'.

    Args:
        timestamp: Raw timestamp string from output.xml

    Returns:
        datetime object or None if the string is empty or malformed
    """
    if not timestamp or not _TIMESTAMP_RE.match(timestamp):
        return None
    try:
        return datetime.strptime(timestamp, ROBOT_TIMESTAMP_FORMAT)
    except ValueError:
        # e.g. month 13
        return None


class StatsCollector:
    """Walks a report tree and accumulates counters into one StatsResult.

    Attributes:
        only_critical: Tests without the critical flag are skipped entirely
        count_skipped: SKIP tests go to the skipped bucket; when False they
            are still part of ``total_tests`` but of no outcome bucket
        stats: The result being accumulated
    """

    def __init__(self, only_critical: bool = False, count_skipped: bool = False) -> None:
        self.only_critical = only_critical
        self.count_skipped = count_skipped
        self.stats = StatsResult()

    def visit_suite(self, suite: Suite) -> None:
        """Count a suite, its tests and every suite nested below it."""
        pending = [suite]
        while pending:
            current = pending.pop()
            # Structural wrappers without tests or sub-suites are not counted
            if current.has_content:
                self.stats.total_suites += 1

            self._add_elapsed(current.start_time, current.end_time)

            for test in current.tests:
                if self.only_critical and not test.critical:
                    continue
                self.visit_test(test)

            pending.extend(reversed(current.suites))

    def visit_test(self, test: Test) -> None:
        stats = self.stats
        stats.total_tests += 1
        if test.critical:
            stats.total_critical += 1

        self._add_elapsed(test.start_time, test.end_time)

        if test.outcome == Outcome.PASS:
            stats.passed_tests += 1
            if test.critical:
                stats.critical_passed += 1
        elif test.outcome == Outcome.FAIL:
            stats.failed_tests += 1
            if test.critical:
                stats.critical_failed += 1
            stats.failed_tests_details.append(
                FailedTestDetail(
                    name=test.name,
                    suite=test.suite_name,
                    status=Outcome.FAIL.value,
                    error_message=test.last_error_message,
                )
            )
        elif test.outcome == Outcome.SKIP and self.count_skipped:
            stats.skipped_tests += 1

        for keyword in test.keywords:
            self.visit_keyword(keyword)

    def visit_keyword(self, keyword: Keyword) -> None:
        """Count a keyword and every keyword nested below it.

        Uses an explicit stack so arbitrarily deep keyword nesting cannot hit
        the interpreter recursion limit.
        """
        stats = self.stats
        pending = [keyword]
        while pending:
            current = pending.pop()
            stats.total_keywords += 1
            if current.outcome == Outcome.PASS:
                stats.passed_keywords += 1
            elif current.outcome == Outcome.FAIL:
                stats.failed_keywords += 1
            elif current.outcome == Outcome.SKIP:
                stats.skipped_keywords += 1
            pending.extend(current.keywords)

    def _add_elapsed(self, start_time: str, end_time: str) -> None:
        """Add end - start in milliseconds; unusable timing contributes zero."""
        if not start_time and not end_time:
            return

        start = parse_robot_timestamp(start_time)
        end = parse_robot_timestamp(end_time)
        if start is None or end is None:
            logger.debug(f"Ignoring unparseable timestamps: {start_time!r} - {end_time!r}")
            self.stats.invalid_timestamps += 1
            return

        elapsed_ms = (end - start) // _ONE_MILLISECOND
        if elapsed_ms < 0:
            logger.debug(f"Ignoring negative elapsed time: {start_time} - {end_time}")
            self.stats.invalid_timestamps += 1
            return

        self.stats.execution_time += elapsed_ms


def compute_stats(
    output: RobotOutput | Suite,
    only_critical: bool = False,
    count_skipped: bool = False,
) -> StatsResult:
    """Compute statistics for one parsed report.

    Args:
        output: Parsed output.xml, or a suite to use as the root
        only_critical: Count only tests flagged critical
        count_skipped: Count SKIP tests in ``skipped_tests``

    Returns:
        StatsResult scoped to the given tree; all zero for an empty tree
    """
    root = output.suite if isinstance(output, RobotOutput) else output
    if not root.has_content:
        return StatsResult.empty()

    collector = StatsCollector(only_critical=only_critical, count_skipped=count_skipped)
    collector.visit_suite(root)

    status = root.outcome.value if root.outcome is not None else "unknown"
    logger.debug(
        f"Computed stats for suite '{root.name}' (status {status}): {collector.stats} "
        f"(total/passed/failed/skipped)"
    )
    return collector.stats
