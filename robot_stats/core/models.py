# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Report tree built from a Robot Framework output.xml.

The tree is produced once per file by the output parser and is never mutated
afterwards; all nodes are frozen dataclasses holding tuples of children.
"""

from dataclasses import dataclass, field
from enum import Enum

from robot_stats.core.constants import ERROR_MESSAGE_LEVEL


class Outcome(str, Enum):
    """Outcome of a test or keyword.

    Any other status found in output.xml (e.g. ``NOT RUN``) is rejected by
    the parser and never reaches the tree.
    """

    PASS = "PASS"
    FAIL = "FAIL"
    SKIP = "SKIP"

    @classmethod
    def parse(cls, value: str | None) -> "Outcome | None":
        """Return the matching outcome, or None for an unknown status string."""
        if value is None:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


@dataclass(frozen=True)
class Message:
    """A status message with its log level."""

    level: str
    text: str


@dataclass(frozen=True)
class Keyword:
    name: str
    outcome: Outcome
    keywords: tuple["Keyword", ...] = ()


@dataclass(frozen=True)
class Test:
    """A single test case.

    Attributes:
        name: Test name
        suite_name: Name of the suite directly owning the test
        outcome: PASS, FAIL or SKIP
        critical: True when the status carries ``critical="yes"``
        start_time: Raw start timestamp, empty when absent
        end_time: Raw end timestamp, empty when absent
        messages: Status messages in document order
        keywords: Top-level keywords of the test
    """

    # not a pytest test class
    __test__ = False

    name: str
    suite_name: str
    outcome: Outcome
    critical: bool = False
    start_time: str = ""
    end_time: str = ""
    messages: tuple[Message, ...] = ()
    keywords: tuple[Keyword, ...] = ()

    @property
    def last_error_message(self) -> str:
        """Text of the last ERROR-level status message, or an empty string."""
        for message in reversed(self.messages):
            if message.level == ERROR_MESSAGE_LEVEL:
                return message.text
        return ""


@dataclass(frozen=True)
class Suite:
    """A test suite containing tests, keywords and nested suites."""

    name: str
    outcome: Outcome | None = None
    start_time: str = ""
    end_time: str = ""
    tests: tuple[Test, ...] = ()
    keywords: tuple[Keyword, ...] = ()
    suites: tuple["Suite", ...] = ()

    @property
    def has_content(self) -> bool:
        """True if the suite directly holds tests or sub-suites."""
        return bool(self.tests) or bool(self.suites)


@dataclass(frozen=True)
class RobotOutput:
    """Root of a parsed output.xml: the top-level suite and execution errors."""

    suite: Suite = field(default_factory=lambda: Suite(name=""))
    errors: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.suite.has_content
