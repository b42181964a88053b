# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core components of robot-stats: report tree, statistics engine, merge and thresholds."""

from robot_stats.core.aggregator import merge_stats
from robot_stats.core.config import RunConfig
from robot_stats.core.errors import (
    InputError,
    NoReportsFoundError,
    ReportParseError,
    RobotStatsError,
    ThresholdExceeded,
    UnstableWarning,
)
from robot_stats.core.models import Keyword, Message, Outcome, RobotOutput, Suite, Test
from robot_stats.core.stats import StatsCollector, compute_stats
from robot_stats.core.thresholds import validate_thresholds
from robot_stats.core.types import (
    ExecutionState,
    FailedTestDetail,
    FileResult,
    StatsResult,
    ThresholdOutcome,
    ThresholdResult,
)

__all__ = [
    # Report tree
    "Outcome",
    "Message",
    "Keyword",
    "Test",
    "Suite",
    "RobotOutput",
    # Results
    "StatsResult",
    "FailedTestDetail",
    "ExecutionState",
    "FileResult",
    "ThresholdOutcome",
    "ThresholdResult",
    # Operations
    "StatsCollector",
    "compute_stats",
    "merge_stats",
    "validate_thresholds",
    "RunConfig",
    # Errors
    "RobotStatsError",
    "InputError",
    "NoReportsFoundError",
    "ReportParseError",
    "ThresholdExceeded",
    "UnstableWarning",
]
