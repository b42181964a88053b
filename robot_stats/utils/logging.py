# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Logging setup for the robot-stats CLI."""

import logging
import sys
from enum import Enum

import errorhandler

_HANDLER_NAME = "robot-stats"


class VerbosityLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(
    level: VerbosityLevel | str, error_handler: errorhandler.ErrorHandler
) -> None:
    """Route log records to stdout at the given level and reset error tracking.

    Any record at ERROR or above fires ``error_handler``, which the CLI turns
    into a non-zero exit code.

    Args:
        level: Verbosity level name
        error_handler: Handler tracking whether an error was logged
    """
    lev = getattr(logging, VerbosityLevel(level).value)

    logger = logging.getLogger()
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(lev)
    error_handler.reset()
