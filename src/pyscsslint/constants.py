# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across pyscsslint modules."""

from __future__ import annotations

from typing import Final

PLUGIN_NAME: Final[str] = "pyscsslint"

DEFAULT_BIN: Final[str] = "scss-lint"

# Forces scss-lint to emit its XML report on stdout.
XML_FORMAT_FLAG: Final[str] = "-fXML"

# Report key used for files that arrive without a path.
STDIN_PATH: Final[str] = "stdin"

# scss-lint exits with this code when it reported lint errors or warnings.
LINT_ERROR_CODE: Final[int] = 65

# Remaining scss-lint exit codes, unrelated to lint findings (sysexits.h).
SCSS_ERROR_CODES: Final[dict[int, str]] = {
    64: "Command line usage error",
    66: "Input file did not exist or was not readable",
    70: "Internal software error",
    78: "Configuration error",
}

# Shell return code when the executable cannot be resolved.
COMMAND_NOT_FOUND: Final[int] = 127

# Marker used when the spawn itself fails because the executable is missing.
NOT_FOUND_MARKER: Final[str] = "ENOENT"

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pyscsslint"

__all__ = [
    "COMMAND_NOT_FOUND",
    "DEFAULT_BIN",
    "LINT_ERROR_CODE",
    "NOT_FOUND_MARKER",
    "PLUGIN_NAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "SCSS_ERROR_CODES",
    "STDIN_PATH",
    "XML_FORMAT_FLAG",
]
