# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Export aggregated statistics to the Drone ``DRONE_OUTPUT`` file.

Drone reads ``KEY=VALUE`` lines from this file and exposes them to later
pipeline steps.
"""

import logging
from pathlib import Path

from robot_stats.core.types import StatsResult

logger = logging.getLogger(__name__)


def stats_to_env(stats: StatsResult) -> dict[str, str]:
    """Map statistics to output keys; rates are rendered with two decimals."""
    return {
        "TOTAL_SUITES": str(stats.total_suites),
        "TOTAL_TESTS": str(stats.total_tests),
        "PASSED_TESTS": str(stats.passed_tests),
        "FAILED_TESTS": str(stats.failed_tests),
        "SKIPPED_TESTS": str(stats.skipped_tests),
        "TOTAL_KEYWORDS": str(stats.total_keywords),
        "PASSED_KEYWORDS": str(stats.passed_keywords),
        "FAILED_KEYWORDS": str(stats.failed_keywords),
        "SKIPPED_KEYWORDS": str(stats.skipped_keywords),
        "TOTAL_CRITICAL": str(stats.total_critical),
        "CRITICAL_PASSED": str(stats.critical_passed),
        "CRITICAL_FAILED": str(stats.critical_failed),
        "FAILURE_RATE": f"{stats.failure_rate:.2f}",
        "SKIPPED_RATE": f"{stats.skipped_rate:.2f}",
        "EXECUTION_TIME": str(stats.execution_time),
    }


def write_test_stats(stats: StatsResult, output_file: Path | None) -> Path | None:
    """Append the statistics to the output file as KEY=VALUE lines.

    Args:
        stats: Merged statistics of the run
        output_file: Sink path, usually taken from DRONE_OUTPUT

    Returns:
        The file written to, or None if no sink is configured

    Raises:
        OSError: If the sink cannot be written.
    """
    if output_file is None:
        logger.debug("No output file configured, skipping statistics export")
        return None

    output_file.parent.mkdir(parents=True, exist_ok=True)
    with output_file.open("a", encoding="utf-8") as f:
        for key, value in stats_to_env(stats).items():
            f.write(f"{key}={value}\n")

    logger.debug(f"Wrote test statistics to {output_file}")
    return output_file
