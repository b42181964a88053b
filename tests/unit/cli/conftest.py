# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Fixtures for CLI tests."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Drop the stdout handler installed by the CLI.

    CliRunner closes its captured stream after each invocation, so a handler
    left on the root logger would write to a closed file in later tests.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == "robot-stats":
            root.removeHandler(handler)
    root.setLevel(level)
