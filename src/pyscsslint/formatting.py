# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Attach pass/fail annotations to files from a parsed report."""

from __future__ import annotations

from .models import Annotation, LintFile, Report


def format_output(file: LintFile, report: Report) -> Annotation:
    """Return the annotation for ``file`` given the issues in ``report``.

    Files are looked up by their path, or ``stdin`` when they have none. A file
    missing from the report passed.
    """

    issues = report.get(file.report_key)
    if not issues:
        return Annotation.passed()
    return Annotation.failed(issues)


__all__ = ["format_output"]
