# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Merge per-file statistics into one global StatsResult."""

import logging
from collections.abc import Iterable

from robot_stats.core.types import StatsResult

logger = logging.getLogger(__name__)


def merge_stats(results: Iterable[StatsResult]) -> StatsResult:
    """Merge per-file results into a new StatsResult.

    Counters and execution time are summed and failure details concatenated;
    the inputs are left untouched. Rates are never averaged: they are derived
    from the merged counters, so the merge is associative and commutative.

    Args:
        results: Per-file statistics, in any order

    Returns:
        Aggregated statistics; zero-valued if ``results`` is empty
    """
    merged = StatsResult()
    merged_count = 0
    for result in results:
        merged.add(result)
        merged_count += 1

    logger.debug(
        f"Merged {merged_count} results: {merged.total_tests} tests, "
        f"{merged.failed_tests} failed, {merged.skipped_tests} skipped"
    )
    return merged
