# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pipeline stage that buffers files, runs scss-lint once and annotates them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, TypeAlias

from .config import LintOptions
from .errors import StreamStateError
from .formatting import format_output
from .models import LintFile, Report
from .parsers import parse_xml_report
from .process import Runner, run_scss_lint

LOGGER = logging.getLogger(__name__)

OptionsInput: TypeAlias = LintOptions | str | Path | Mapping[str, Any] | None
Stage: TypeAlias = Callable[[Iterable[LintFile]], Iterable[LintFile]]


class StreamState(str, Enum):
    """Lifecycle of a :class:`ScssLintStream`."""

    COLLECTING = "collecting"
    DRAINING = "draining"
    DONE = "done"
    ERRORED = "errored"


def _entries_for(file: LintFile, report: Report) -> Report:
    """Return the entries of ``report`` that belong to ``file``.

    scss-lint receives each file's ``location`` and reports it under that name,
    so the issues are re-keyed to the path the file carries.

    Args:
        file: File being annotated.
        report: Report parsed from the scss-lint output of the batch.

    Returns:
        Report: ``{file.report_key: issues}``, or an empty report when the file has none.
    """

    issues = report.get(file.location or file.report_key)
    return {file.report_key: issues} if issues else {}


class ScssLintStream:
    """Buffer files, lint them in one scss-lint run and re-emit them annotated.

    Files are collected with :meth:`write`. :meth:`end` runs scss-lint once over
    every buffered path and returns the files in arrival order, each carrying
    its ``scsslint`` annotation. When scss-lint cannot run, or its report cannot
    be parsed, :meth:`end` raises and no file is emitted. A stream lints a
    single batch and cannot be reused.
    """

    def __init__(self, options: OptionsInput = None, *, runner: Runner = run_scss_lint) -> None:
        self.options = LintOptions.coerce(options)
        self._runner = runner
        self._files: list[LintFile] = []
        self._state = StreamState.COLLECTING

    @property
    def state(self) -> StreamState:
        """Return the current lifecycle state.

        Returns:
            StreamState: ``COLLECTING`` until :meth:`end` runs, then ``DONE``
            or ``ERRORED`` once the batch has been linted or has failed.
        """
        return self._state

    def write(self, file: LintFile | None) -> None:
        """Queue ``file`` for linting. ``None`` is ignored."""
        if self._state is not StreamState.COLLECTING:
            raise StreamStateError(f"cannot write to a lint stream that is {self._state.value}")
        if file is not None:
            self._files.append(file)

    def end(self) -> list[LintFile]:
        """Lint every buffered file and return them annotated.

        Raises:
            ScssLintError: If scss-lint failed to run or produced an unreadable report.
            StreamStateError: If the stream already ended.
        """

        if self._state is not StreamState.COLLECTING:
            raise StreamStateError(f"cannot end a lint stream that is {self._state.value}")
        self._state = StreamState.DRAINING
        files, self._files = self._files, []
        if not files:
            self._state = StreamState.DONE
            return []

        file_paths = [file.location for file in files if file.location is not None]
        report: Report = {}
        try:
            if file_paths:
                result = self._runner(self.options, file_paths)
                report = parse_xml_report(result.stdout)
                LOGGER.debug("scss-lint finished outcome=%s files=%d", result.outcome.value, len(file_paths))
            for file in files:
                file.scsslint = format_output(file, _entries_for(file, report))
        except BaseException:
            self._state = StreamState.ERRORED
            raise
        self._state = StreamState.DONE
        return files

    def __call__(self, files: Iterable[LintFile]) -> Iterator[LintFile]:
        """Use the stream as a pipeline stage over ``files``."""
        for file in files:
            self.write(file)
        yield from self.end()


def run_pipeline(files: Iterable[LintFile], *stages: Stage) -> list[LintFile]:
    """Feed ``files`` through ``stages`` in order and return what comes out."""

    stream: Iterable[LintFile] = files
    for stage in stages:
        stream = stage(stream)
    return list(stream)


__all__ = [
    "OptionsInput",
    "ScssLintStream",
    "Stage",
    "StreamState",
    "run_pipeline",
]
