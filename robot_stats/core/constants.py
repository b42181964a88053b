# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core constants shared across robot-stats."""

# Robot Framework (pre 7.0) output.xml timestamps: '20250101 12:00:00.000'
ROBOT_TIMESTAMP_FORMAT = "%Y%m%d %H:%M:%S.%f"
ROBOT_TIMESTAMP_PATTERN = r"^\d{8} \d{2}:\d{2}:\d{2}\.\d{3}$"

# Value of the status 'critical' attribute marking a critical test
CRITICAL_FLAG = "yes"

# Only ERROR messages are reported as the failure reason
ERROR_MESSAGE_LEVEL = "ERROR"

# Discovery
DEFAULT_REPORT_FILE_PATTERN = "*.xml"

# Concurrency limit for per-file processing
DEFAULT_MAX_WORKERS = 8

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGS = 2
EXIT_NO_REPORTS = 3
