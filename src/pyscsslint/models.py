# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the pyscsslint package."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import LINT_ERROR_CODE, STDIN_PATH


class Issue(BaseModel):
    """Single problem reported by scss-lint for a file.

    Attributes mirror the ``<issue>`` element of the scss-lint XML report.
    Attributes the model does not know about are kept verbatim as extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    line: int | None = None
    column: int | None = None
    length: int | None = None
    severity: str | None = None
    reason: str | None = None
    linter: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the issue attributes that were present in the report."""
        return self.model_dump(exclude_none=True)


Report: TypeAlias = dict[str, tuple[Issue, ...]]


class Annotation(BaseModel):
    """Pass/fail status attached to each linted file."""

    model_config = ConfigDict(frozen=True)

    success: bool
    error_count: int | None = Field(default=None, serialization_alias="errorCount")
    results: tuple[Issue, ...] | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> Annotation:
        """Ensure passing annotations carry no issues and failing ones carry all of them."""
        if self.success:
            if self.error_count is not None or self.results is not None:
                raise ValueError("a passing annotation cannot carry results")
            return self
        if self.error_count is None or self.results is None:
            raise ValueError("a failing annotation requires errorCount and results")
        if self.error_count != len(self.results):
            raise ValueError("errorCount must match the number of results")
        return self

    @classmethod
    def passed(cls) -> Annotation:
        """Return the annotation used for files without issues."""
        return cls(success=True)

    @classmethod
    def failed(cls, issues: Sequence[Issue]) -> Annotation:
        """Return a failing annotation carrying ``issues`` in report order."""
        results = tuple(issues)
        return cls(success=False, error_count=len(results), results=results)

    def to_dict(self) -> dict[str, Any]:
        """Return the annotation in its ``{success, errorCount, results}`` shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LintFile(BaseModel):
    """File travelling through the lint pipeline.

    Only ``path`` is consulted by the adapter; ``contents`` belongs to the
    caller and is forwarded untouched. ``scsslint`` receives the annotation.
    """

    model_config = ConfigDict(validate_assignment=True)

    path: str | None = None
    contents: bytes | None = None
    cwd: str = Field(default_factory=os.getcwd)
    base: str | None = None
    scsslint: Annotation | None = None

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        cwd: str | Path | None = None,
        base: str | Path | None = None,
        read: bool = True,
    ) -> LintFile:
        """Build a file from disk, keeping ``path`` exactly as supplied.

        Args:
            path: Location of the file, relative to ``cwd`` or absolute.
            cwd: Working directory the path is relative to. Defaults to the process cwd.
            base: Directory ``relative`` is computed from. Defaults to the path's parent.
            read: Whether to load the file contents.

        Returns:
            LintFile: File ready to be written into a lint stream.
        """

        working_dir = str(cwd) if cwd is not None else os.getcwd()
        raw = str(path)
        file = cls(
            path=raw,
            cwd=working_dir,
            base=str(base) if base is not None else os.path.dirname(raw),
        )
        if read and file.location is not None:
            file.contents = Path(file.location).read_bytes()
        return file

    @property
    def location(self) -> str | None:
        """Return ``path`` resolved against ``cwd``, or ``None`` for anonymous files."""
        if self.path is None:
            return None
        return os.path.join(self.cwd, self.path)

    @property
    def relative(self) -> str:
        """Return the file path relative to ``base``."""
        if self.path is None:
            return STDIN_PATH
        if not self.base:
            return self.path
        return os.path.relpath(self.path, self.base)

    @property
    def report_key(self) -> str:
        """Return the key under which scss-lint reports this file."""
        return self.path or STDIN_PATH


class ExecutionOutcome(str, Enum):
    """Successful completion states of a scss-lint invocation."""

    CLEAN = "clean"
    FINDINGS = "findings"


@dataclass(slots=True, frozen=True)
class ExecutionResult:
    """Captured output of a scss-lint run that completed without execution errors."""

    stdout: str
    returncode: int

    @property
    def outcome(self) -> ExecutionOutcome:
        """Return whether the run reported lint findings."""
        if self.returncode == LINT_ERROR_CODE:
            return ExecutionOutcome.FINDINGS
        return ExecutionOutcome.CLEAN


__all__ = [
    "Annotation",
    "ExecutionOutcome",
    "ExecutionResult",
    "Issue",
    "LintFile",
    "Report",
]
