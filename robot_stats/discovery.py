# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Locate Robot Framework report files by directory and glob pattern."""

import logging
import os
from pathlib import Path

from robot_stats.core.errors import NoReportsFoundError

logger = logging.getLogger(__name__)


def locate_files(directory: Path, pattern: str) -> list[Path]:
    """Find readable report files matching a glob pattern.

    Args:
        directory: Directory to search in
        pattern: Glob pattern relative to ``directory`` (e.g. "output*.xml")

    Returns:
        Sorted list of readable regular files

    Raises:
        NoReportsFoundError: If nothing matches, or no match is readable.
    """
    matches = sorted(directory.glob(pattern)) if directory.is_dir() else []
    logger.info(f"Found {len(matches)} files matching the pattern: {pattern}")

    if not matches:
        raise NoReportsFoundError(
            f"no files found matching the report filename pattern '{pattern}' in {directory}"
        )

    readable: list[Path] = []
    for path in matches:
        if not path.is_file():
            logger.debug(f"Skipping non-file match: {path}")
        elif not os.access(path, os.R_OK):
            logger.warning(f"File found but not readable: {path}")
        else:
            readable.append(path)

    logger.info(f"Number of readable files: {len(readable)}")

    if not readable:
        raise NoReportsFoundError(
            f"no readable files found matching the report filename pattern '{pattern}' in {directory}"
        )

    return readable
