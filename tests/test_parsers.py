# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the scss-lint XML report parser."""

from __future__ import annotations

import pytest

from pyscsslint.errors import ParseError, ScssLintError
from pyscsslint.models import Issue
from pyscsslint.parsers import PARSE_ERROR_PREFIX, parse_xml_report

REPORT = """<?xml version="1.0" encoding="utf-8"?>
<lint>
  <file name="styles/error.scss">
    <issue linter="ColorKeyword" line="2" column="10" length="3" severity="error" reason="Color `red` should be hex" />
    <issue linter="HexLength" line="5" column="3" length="7" severity="warning" reason="Prefer short hex" />
  </file>
  <file name="styles/warning.scss">
    <issue linter="BorderZero" line="3" column="11" length="4" severity="warning" reason="`border: 0` is preferred" />
  </file>
</lint>
"""


@pytest.mark.parametrize("payload", [None, "", "   \n", b""])
def test_parse_empty_output_yields_empty_report(payload: str | bytes | None) -> None:
    assert parse_xml_report(payload) == {}


def test_parse_report_maps_files_to_issues_in_document_order() -> None:
    report = parse_xml_report(REPORT)

    assert list(report) == ["styles/error.scss", "styles/warning.scss"]
    first, second = report["styles/error.scss"]
    assert isinstance(first, Issue)
    assert (first.line, first.column, first.severity) == (2, 10, "error")
    assert first.reason == "Color `red` should be hex"
    assert first.linter == "ColorKeyword"
    assert second.line == 5
    assert report["styles/warning.scss"][0].to_dict() == {
        "linter": "BorderZero",
        "line": 3,
        "column": 11,
        "length": 4,
        "severity": "warning",
        "reason": "`border: 0` is preferred",
    }


def test_parse_accepts_bytes() -> None:
    report = parse_xml_report(REPORT.encode("utf-8"))
    assert len(report["styles/error.scss"]) == 2


def test_files_without_issues_have_no_entry() -> None:
    xml = '<lint><file name="clean.scss"></file><file name="dirty.scss"><issue line="1" /></file></lint>'
    report = parse_xml_report(xml)
    assert "clean.scss" not in report
    assert [issue.line for issue in report["dirty.scss"]] == [1]


def test_repeated_file_entries_are_concatenated() -> None:
    xml = (
        "<lint>"
        '<file name="a.scss"><issue line="1" reason="first" /></file>'
        '<file name="a.scss"><issue line="4" reason="second" /></file>'
        "</lint>"
    )
    report = parse_xml_report(xml)
    assert [issue.reason for issue in report["a.scss"]] == ["first", "second"]


def test_unknown_attributes_are_preserved() -> None:
    xml = '<lint><file name="a.scss"><issue line="7" rule="custom" /></file></lint>'
    (issue,) = parse_xml_report(xml)["a.scss"]
    assert issue.to_dict() == {"line": 7, "rule": "custom"}


def test_unexpected_root_yields_empty_report() -> None:
    assert parse_xml_report('<checkstyle><file name="a.scss" /></checkstyle>') == {}


def test_malformed_xml_raises_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_xml_report("<lint><file name='a.scss'>")

    error = excinfo.value
    assert isinstance(error, ScssLintError)
    assert str(error).startswith(PARSE_ERROR_PREFIX)
    assert error.__cause__ is not None


def test_invalid_issue_attribute_raises_parse_error() -> None:
    with pytest.raises(ParseError, match="Parsing SCSS-Lint XML output failed"):
        parse_xml_report('<lint><file name="a.scss"><issue line="three" /></file></lint>')
