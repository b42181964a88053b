# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Utility modules for robot-stats."""

from robot_stats.utils.logging import VerbosityLevel, configure_logging
from robot_stats.utils.terminal import terminal

__all__ = ["VerbosityLevel", "configure_logging", "terminal"]
