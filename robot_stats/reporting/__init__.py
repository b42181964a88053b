# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Reporting of aggregated statistics: log summary and key-value export."""

from robot_stats.reporting.drone_output import stats_to_env, write_test_stats
from robot_stats.reporting.summary import log_aggregated_results

__all__ = ["log_aggregated_results", "stats_to_env", "write_test_stats"]
