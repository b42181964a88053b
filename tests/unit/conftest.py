# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Shared fixtures for unit tests.

Provides Robot Framework output.xml samples in the pre-4.0 format, which
carries the ``critical`` attribute on test status elements.
"""

import os
import re
from collections.abc import Callable
from pathlib import Path

import pytest

# One suite, four tests:
#   - critical PASS (1000 ms, 2 keywords, nested)
#   - critical FAIL (2000 ms, 1 FAIL keyword, two ERROR messages)
#   - non-critical FAIL (500 ms, FAIL keyword with nested PASS keyword)
#   - non-critical SKIP (no timestamps, 1 SKIP keyword)
# Suite runs 5000 ms and has a setup keyword, which is never counted.
ADVANCED_SUITE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<robot generator="Robot 3.2.2 (Python 3.8.10 on linux)" generated="20250101 12:00:00.000" rpa="false">
<suite id="s1" name="Advanced Test Suite" source="/tests/advanced.robot">
<kw name="Suite Setup Keyword" type="setup">
<status status="PASS" starttime="20250101 12:00:00.000" endtime="20250101 12:00:00.010"/>
</kw>
<test id="s1-t1" name="Test Case 1 - Critical Pass">
<kw name="Open Session">
<kw name="Log">
<status status="PASS" starttime="20250101 12:00:00.100" endtime="20250101 12:00:00.200"/>
</kw>
<status status="PASS" starttime="20250101 12:00:00.050" endtime="20250101 12:00:00.300"/>
</kw>
<status status="PASS" critical="yes" starttime="20250101 12:00:00.000" endtime="20250101 12:00:01.000"/>
</test>
<test id="s1-t2" name="Test Case 2 - Critical Fail">
<kw name="Should Be Equal">
<status status="FAIL" starttime="20250101 12:00:01.000" endtime="20250101 12:00:03.000"/>
</kw>
<status status="FAIL" critical="yes" starttime="20250101 12:00:01.000" endtime="20250101 12:00:03.000">
<msg level="INFO">Connecting to device</msg>
<msg level="ERROR">First error</msg>
<msg level="ERROR">Critical test failed: Major issue detected</msg>
<msg level="WARN">Retry exhausted</msg>
</status>
</test>
<test id="s1-t3" name="Test Case 3 - Non-Critical Fail">
<kw name="Verify Interface">
<kw name="Log">
<status status="PASS" starttime="20250101 12:00:03.000" endtime="20250101 12:00:03.100"/>
</kw>
<status status="FAIL" starttime="20250101 12:00:03.000" endtime="20250101 12:00:03.500"/>
</kw>
<status status="FAIL" critical="no" starttime="20250101 12:00:03.000" endtime="20250101 12:00:03.500">
<msg level="ERROR">Non-critical test failed</msg>
</status>
</test>
<test id="s1-t4" name="Test Case 4 - Skipped">
<kw name="Skip">
<status status="SKIP"/>
</kw>
<status status="SKIP"/>
</test>
<status status="FAIL" starttime="20250101 12:00:00.000" endtime="20250101 12:00:05.000"/>
</suite>
<errors>
<msg timestamp="20250101 12:00:00.000" level="WARN">Deprecated syntax used</msg>
</errors>
</robot>
"""

# Root suite with two child suites holding one test each and an empty wrapper suite.
NESTED_SUITES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<robot generator="Robot 3.2.2">
<suite id="s1" name="Root">
<suite id="s1-s1" name="Child A">
<test id="s1-s1-t1" name="Child A Test">
<status status="PASS" critical="yes" starttime="20250101 10:00:00.000" endtime="20250101 10:00:00.250"/>
</test>
<status status="PASS" starttime="20250101 10:00:00.000" endtime="20250101 10:00:00.300"/>
</suite>
<suite id="s1-s2" name="Child B">
<test id="s1-s2-t1" name="Child B Test">
<status status="FAIL" critical="yes" starttime="20250101 10:00:00.300" endtime="bogus">
<msg level="ERROR">Child B failed</msg>
</status>
</test>
<status status="FAIL" starttime="20250101 10:00:00.300" endtime="20250101 10:00:01.000"/>
</suite>
<suite id="s1-s3" name="Empty Wrapper">
<status status="PASS"/>
</suite>
<status status="FAIL" starttime="20250101 10:00:00.000" endtime="20250101 10:00:01.000"/>
</suite>
</robot>
"""

# Top-level suite without tests or sub-suites
EMPTY_SUITE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<robot generator="Robot 3.2.2">
<suite id="s1" name="Nothing Here">
<status status="PASS" starttime="20250101 10:00:00.000" endtime="20250101 10:00:01.000"/>
</suite>
</robot>
"""

MALFORMED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<robot generator="Robot 3.2.2">
<suite id="s1" name="Broken">
<test id="s1-t1" name="Unclosed">
"""


@pytest.fixture(autouse=True)
def clear_plugin_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove plugin settings from the environment.

    CLI options fall back to PLUGIN_* and DRONE_OUTPUT environment variables,
    which would otherwise leak from a CI runner into the tests.
    """
    pattern = re.compile(r"^(PLUGIN_[A-Z_]+|DRONE_OUTPUT)$")
    for key in [key for key in os.environ if pattern.match(key)]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing an output.xml sample into a temporary report directory."""
    report_dir = tmp_path / "reports"
    report_dir.mkdir()

    def _write(name: str, content: str) -> Path:
        path = report_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def report_dir(write_report: Callable[[str, str], Path]) -> Path:
    """Report directory holding the advanced and nested suite samples."""
    write_report("output_advanced.xml", ADVANCED_SUITE_XML)
    return write_report("output_nested.xml", NESTED_SUITES_XML).parent


@pytest.fixture
def advanced_suite_xml() -> str:
    return ADVANCED_SUITE_XML


@pytest.fixture
def nested_suites_xml() -> str:
    return NESTED_SUITES_XML


@pytest.fixture
def empty_suite_xml() -> str:
    return EMPTY_SUITE_XML


@pytest.fixture
def malformed_xml() -> str:
    return MALFORMED_XML
