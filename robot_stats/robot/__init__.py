# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Robot Framework output.xml parsing."""

from robot_stats.robot.output_parser import parse_output, parse_output_file

__all__ = ["parse_output", "parse_output_file"]
