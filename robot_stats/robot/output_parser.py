# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Robot Framework output.xml parser.

Builds the immutable report tree (``robot_stats.core.models``) from the raw
bytes of an output.xml. Extraction is best effort: unknown elements are
ignored, missing attributes fall back to empty values, and tests or keywords
with a status other than PASS/FAIL/SKIP are logged and left out.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

# lxml.etree is 2-5x faster than stdlib xml.etree.ElementTree for large output.xml files
from lxml import etree as ET

from robot_stats.core.constants import CRITICAL_FLAG
from robot_stats.core.errors import ReportParseError
from robot_stats.core.models import Keyword, Message, Outcome, RobotOutput, Suite, Test

logger = logging.getLogger(__name__)

_Node = TypeVar("_Node", Keyword, Suite)


def _new_parser() -> ET.XMLParser:
    # output.xml is not trusted to be well-behaved: no entities, no network
    return ET.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)


def _status_element(element: ET._Element) -> ET._Element | None:
    return element.find("status")


def _build_bottom_up(
    elements: list[ET._Element],
    tag: str,
    build: Callable[[ET._Element, tuple[_Node, ...]], _Node | None],
) -> tuple[_Node, ...]:
    """Build nodes for ``elements`` and their nested ``tag`` children, children first.

    Walks with an explicit stack, so nesting depth is not bounded by the
    interpreter recursion limit. ``build`` receives the already built child
    nodes in document order; returning None drops the node with its subtree.
    """
    # pre-order: (element, index of the parent entry, -1 for a root)
    order: list[tuple[ET._Element, int]] = []
    pending = [(element, -1) for element in reversed(elements)]
    while pending:
        element, parent = pending.pop()
        order.append((element, parent))
        index = len(order) - 1
        pending.extend((child, index) for child in reversed(element.findall(tag)))

    # reverse pre-order visits every child before its parent
    children: list[list[_Node]] = [[] for _ in order]
    roots: list[_Node] = []
    for index in range(len(order) - 1, -1, -1):
        element, parent = order[index]
        node = build(element, tuple(reversed(children[index])))
        if node is None:
            continue
        if parent < 0:
            roots.append(node)
        else:
            children[parent].append(node)
    return tuple(reversed(roots))


def _parse_messages(status: ET._Element | None) -> tuple[Message, ...]:
    if status is None:
        return ()
    return tuple(
        Message(level=msg.get("level", ""), text=msg.text or "")
        for msg in status.findall("msg")
    )


def _build_keyword(element: ET._Element, keywords: tuple[Keyword, ...]) -> Keyword | None:
    name = element.get("name", "")
    status = _status_element(element)
    raw_status = status.get("status") if status is not None else None
    outcome = Outcome.parse(raw_status)
    if outcome is None:
        logger.debug(f"Skipping keyword '{name}' with unsupported status {raw_status!r}")
        return None
    return Keyword(name=name, outcome=outcome, keywords=keywords)


def _parse_keywords(element: ET._Element) -> tuple[Keyword, ...]:
    return _build_bottom_up(element.findall("kw"), "kw", _build_keyword)


def _parse_test(element: ET._Element, suite_name: str) -> Test | None:
    name = element.get("name", "")
    status = _status_element(element)
    raw_status = status.get("status") if status is not None else None
    outcome = Outcome.parse(raw_status)
    if outcome is None:
        logger.warning(
            f"Skipping test '{name}' in suite '{suite_name}' with unsupported status {raw_status!r}"
        )
        return None

    return Test(
        name=name,
        suite_name=suite_name,
        outcome=outcome,
        critical=status.get("critical") == CRITICAL_FLAG,
        start_time=status.get("starttime", ""),
        end_time=status.get("endtime", ""),
        messages=_parse_messages(status),
        keywords=_parse_keywords(element),
    )


def _build_suite(element: ET._Element, suites: tuple[Suite, ...]) -> Suite:
    name = element.get("name", "")
    status = _status_element(element)

    tests = (_parse_test(child, name) for child in element.findall("test"))
    return Suite(
        name=name,
        outcome=Outcome.parse(status.get("status")) if status is not None else None,
        start_time=status.get("starttime", "") if status is not None else "",
        end_time=status.get("endtime", "") if status is not None else "",
        tests=tuple(test for test in tests if test is not None),
        keywords=_parse_keywords(element),
        suites=suites,
    )


def _parse_suite(element: ET._Element) -> Suite:
    (suite,) = _build_bottom_up([element], "suite", _build_suite)
    return suite


def parse_output(content: bytes, source: Path | None = None) -> RobotOutput | None:
    """Parse the bytes of an output.xml into a report tree.

    Args:
        content: Raw file content
        source: Originating file, used in error messages only

    Returns:
        RobotOutput, or None if the content is empty

    Raises:
        ReportParseError: If the content is not well-formed XML.
    """
    if not content.strip():
        return None

    try:
        root = ET.fromstring(content, parser=_new_parser())  # nosec B320
    except ET.XMLSyntaxError as e:
        raise ReportParseError(source, str(e)) from e

    suite_element = root.find("suite")
    if suite_element is None:
        logger.warning(f"No top-level suite in {source or 'report'} (root <{root.tag}>)")
        return RobotOutput()

    errors = tuple((msg.text or "").strip() for msg in root.findall("errors/msg"))
    return RobotOutput(suite=_parse_suite(suite_element), errors=errors)


def parse_output_file(path: Path) -> RobotOutput | None:
    """Read and parse one output.xml file.

    Raises:
        OSError: If the file cannot be read.
        ReportParseError: If the file is not well-formed XML.
    """
    logger.info(f"Processing file: {path}")
    return parse_output(path.read_bytes(), source=path)
