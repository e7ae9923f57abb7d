# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser converting the scss-lint XML report into a :data:`Report`."""

from __future__ import annotations

from typing import Final
from xml.etree.ElementTree import Element
from xml.etree.ElementTree import ParseError as XmlParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring
from pydantic import ValidationError

from .errors import ParseError
from .models import Issue, Report

ROOT_TAG: Final[str] = "lint"
FILE_TAG: Final[str] = "file"
ISSUE_TAG: Final[str] = "issue"
NAME_ATTR: Final[str] = "name"
PARSE_ERROR_PREFIX: Final[str] = "Parsing SCSS-Lint XML output failed: "


def _parse_document(xml: str | bytes) -> Element:
    """Parse ``xml`` with defusedxml.

    Args:
        xml: Raw scss-lint output.

    Returns:
        Element: Root element of the document.

    Raises:
        ParseError: If the document is malformed or uses forbidden XML constructs.
    """

    try:
        return fromstring(xml)
    except (XmlParseError, DefusedXmlException) as exc:
        raise ParseError(f"{PARSE_ERROR_PREFIX}{exc}") from exc


def _issues_for(file_element: Element) -> list[Issue]:
    """Return the ``<issue>`` children of ``file_element`` as models.

    Args:
        file_element: ``<file>`` element of the report.

    Returns:
        list[Issue]: Issues in document order.

    Raises:
        ParseError: If an attribute cannot be coerced to its field type.
    """

    issues: list[Issue] = []
    for issue_element in file_element.findall(ISSUE_TAG):
        try:
            issues.append(Issue.model_validate(dict(issue_element.attrib)))
        except ValidationError as exc:
            raise ParseError(f"{PARSE_ERROR_PREFIX}{exc}") from exc
    return issues


def parse_xml_report(xml: str | bytes | None) -> Report:
    """Convert scss-lint XML output into a mapping of file path to issues.

    The report has the shape ``<lint><file name="..."><issue .../></file></lint>``.
    Files without issues are omitted, and issues keep document order.

    Args:
        xml: Raw stdout captured from scss-lint. ``None`` or blank means no issues.

    Returns:
        Report: Issues keyed by the ``name`` attribute of each ``<file>``.

    Raises:
        ParseError: If the XML is malformed or an issue attribute has an invalid value.
    """

    if not xml or not xml.strip():
        return {}

    root = _parse_document(xml)
    if root.tag != ROOT_TAG:
        return {}

    collected: dict[str, list[Issue]] = {}
    for file_element in root.findall(FILE_TAG):
        name = file_element.get(NAME_ATTR)
        if name is None:
            continue
        issues = _issues_for(file_element)
        if not issues:
            continue
        collected.setdefault(name, []).extend(issues)
    return {name: tuple(issues) for name, issues in collected.items()}


__all__ = ["PARSE_ERROR_PREFIX", "parse_xml_report"]
