# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pipeline stages that inspect the ``scsslint`` annotation of each file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

from .console import stdout_console
from .errors import LintFailureError
from .models import Issue, LintFile

ReporterName = Literal["default", "fail"]

INVALID_CSS_HEADER: Final[str] = "Invalid CSS"

_SEVERITY_STYLES: Final[dict[str, str]] = {
    "error": "red",
    "warning": "yellow",
}


def _failed(file: LintFile) -> bool:
    return file.scsslint is not None and not file.scsslint.success


def _issue_line(file: LintFile, issue: Issue) -> Text:
    """Render one issue as ``path:line[:column] [severity] reason``.

    Args:
        file: File the issue was reported for.
        issue: Issue taken from the file's annotation.

    Returns:
        Text: Indented, styled line ready for the console.
    """

    severity = issue.severity or "warning"
    location = file.path or file.relative
    if issue.line is not None:
        location = f"{location}:{issue.line}"
        if issue.column is not None:
            location = f"{location}:{issue.column}"
    return Text.assemble(
        "  ",
        (location, "cyan"),
        " ",
        (f"[{severity}]", _SEVERITY_STYLES.get(severity, "yellow")),
        " ",
        issue.reason or "",
    )


@dataclass(slots=True)
class FailReporter:
    """Forward files and raise on the first one that did not pass scss-lint."""

    def __call__(self, files: Iterable[LintFile]) -> Iterator[LintFile]:
        for file in files:
            if _failed(file):
                raise LintFailureError(f"SCSS-Lint failed for: {file.relative}", file=file.relative)
            yield file


@dataclass(slots=True)
class DefaultReporter:
    """Forward files and print the issues of those that did not pass to stdout."""

    use_color: bool | None = None
    console: Console = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.console = stdout_console(color=self.use_color)

    def __call__(self, files: Iterable[LintFile]) -> Iterator[LintFile]:
        for file in files:
            if _failed(file):
                self.report(file)
            yield file

    def report(self, file: LintFile) -> None:
        """Write the ``Invalid CSS`` block for ``file``."""
        annotation = file.scsslint
        if annotation is None or annotation.success:
            return
        count = annotation.error_count or 0
        plural = "" if count == 1 else "s"
        self.console.print(
            Text.assemble(
                (f"{INVALID_CSS_HEADER}: ", "bold red"),
                (file.relative, "magenta"),
                f" ({count} issue{plural})",
            ),
        )
        for issue in annotation.results or ():
            self.console.print(_issue_line(file, issue))


def fail_reporter() -> FailReporter:
    """Return a stage that turns lint failures into :class:`LintFailureError`."""

    return FailReporter()


def default_reporter(*, use_color: bool | None = None) -> DefaultReporter:
    """Return a stage that logs lint failures to stdout."""

    return DefaultReporter(use_color=use_color)


def reporter(name: ReporterName | str = "default") -> FailReporter | DefaultReporter:
    """Return the reporter registered under ``name``.

    Raises:
        ValueError: If ``name`` is not ``default`` or ``fail``.
    """

    if name == "fail":
        return fail_reporter()
    if name == "default":
        return default_reporter()
    raise ValueError(f"Unknown scss-lint reporter '{name}'; expected 'default' or 'fail'")


__all__ = [
    "DefaultReporter",
    "FailReporter",
    "INVALID_CSS_HEADER",
    "ReporterName",
    "default_reporter",
    "fail_reporter",
    "reporter",
]
