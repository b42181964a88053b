# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Pass/unstable/fail decision against configured failure ceilings."""

from robot_stats.core.errors import InputError
from robot_stats.core.types import StatsResult, ThresholdOutcome, ThresholdResult


def validate_thresholds(
    stats: StatsResult, pass_threshold: int, unstable_threshold: int
) -> ThresholdResult:
    """Decide the run outcome from the merged failed test count.

    Rules, in order:
        1. failed_tests > pass_threshold -> FAIL
        2. failed_tests > unstable_threshold -> UNSTABLE
        3. otherwise -> PASS

    The thresholds are independent. With unstable_threshold >= pass_threshold
    the UNSTABLE outcome is unreachable.

    Args:
        stats: Merged statistics of the whole run
        pass_threshold: Maximum failed tests for a non-failing run
        unstable_threshold: Maximum failed tests for a stable run

    Returns:
        ThresholdResult carrying the outcome and the numbers it was based on

    Raises:
        InputError: If a threshold is negative.
    """
    if pass_threshold < 0 or unstable_threshold < 0:
        raise InputError("threshold values must be non-negative")

    failed = stats.failed_tests
    if failed > pass_threshold:
        outcome = ThresholdOutcome.FAIL
    elif failed > unstable_threshold:
        outcome = ThresholdOutcome.UNSTABLE
    else:
        outcome = ThresholdOutcome.PASS

    return ThresholdResult(
        outcome=outcome,
        failed_tests=failed,
        pass_threshold=pass_threshold,
        unstable_threshold=unstable_threshold,
    )
