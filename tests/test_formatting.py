# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for turning a report into per-file annotations."""

from __future__ import annotations

from pyscsslint.formatting import format_output
from pyscsslint.models import Annotation, Issue, LintFile
from pyscsslint.parsers import parse_xml_report


def test_missing_file_passes() -> None:
    file = LintFile(path="styles/pass.scss")
    report = {"styles/other.scss": (Issue(line=1),)}
    assert format_output(file, report) == Annotation(success=True)


def test_empty_issue_sequence_passes() -> None:
    file = LintFile(path="styles/pass.scss")
    assert format_output(file, {"styles/pass.scss": ()}).to_dict() == {"success": True}


def test_issues_produce_failure_in_report_order() -> None:
    issues = (Issue(line=2, severity="error"), Issue(line=9, severity="warning"))
    file = LintFile(path="styles/error.scss")

    annotation = format_output(file, {"styles/error.scss": issues})

    assert annotation.success is False
    assert annotation.error_count == 2
    assert annotation.results == issues


def test_file_without_path_is_looked_up_as_stdin() -> None:
    file = LintFile(contents=b".a { color: red; }")
    annotation = format_output(file, {"stdin": (Issue(line=1),)})
    assert annotation.error_count == 1


def test_empty_report_always_passes() -> None:
    report = parse_xml_report(None)
    files = [LintFile(path="a.scss"), LintFile(path="b.scss"), LintFile()]
    assert all(format_output(file, report).success for file in files)
