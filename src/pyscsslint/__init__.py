# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run scss-lint over a batch of files and annotate each with its result."""

from __future__ import annotations

from importlib import metadata

from .config import ConfigError, LintOptions, load_options
from .errors import (
    LintFailureError,
    ParseError,
    ScssLintError,
    StreamStateError,
    ToolExecutionError,
    ToolNotFoundError,
)
from .formatting import format_output
from .models import Annotation, Issue, LintFile, Report
from .parsers import parse_xml_report
from .pipeline import OptionsInput, ScssLintStream, StreamState, run_pipeline
from .reporters import default_reporter, fail_reporter, reporter

try:
    __version__ = metadata.version("py-scsslint")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"


def scss_lint(options: OptionsInput = None) -> ScssLintStream:
    """Return a lint stream configured by ``options``.

    ``options`` may be the path of a scss-lint config file, a mapping with the
    ``config``, ``bin`` and ``exclude`` keys, or a :class:`LintOptions`.
    """

    return ScssLintStream(options)


__all__ = [
    "Annotation",
    "ConfigError",
    "Issue",
    "LintFailureError",
    "LintFile",
    "LintOptions",
    "ParseError",
    "Report",
    "ScssLintError",
    "ScssLintStream",
    "StreamState",
    "StreamStateError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "__version__",
    "default_reporter",
    "fail_reporter",
    "format_output",
    "load_options",
    "parse_xml_report",
    "reporter",
    "run_pipeline",
    "scss_lint",
]
