# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types raised by the scss-lint adapter."""

from __future__ import annotations

from .constants import PLUGIN_NAME


class ScssLintError(RuntimeError):
    """Plugin-level error surfaced through the pipeline's error channel."""

    def __init__(self, message: str, *, plugin: str = PLUGIN_NAME) -> None:
        """Initialise the error with a message and the reporting plugin name.

        Args:
            message: Human-readable description of the failure.
            plugin: Name of the plugin that raised the error.
        """

        super().__init__(message)
        self.plugin = plugin
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParseError(ScssLintError):
    """Raised when scss-lint produced XML that could not be parsed."""


class ToolNotFoundError(ScssLintError):
    """Raised when the configured scss-lint executable cannot be found."""

    def __init__(self, message: str, *, executable: str) -> None:
        """Initialise the error with install instructions and the missing executable.

        Args:
            message: Text naming the executable and how to install scss-lint.
            executable: Configured call signature that could not be spawned.
        """

        super().__init__(message)
        self.executable = executable


class ToolExecutionError(ScssLintError):
    """Raised when scss-lint exits with a code that does not represent lint findings."""

    def __init__(self, message: str, *, code: int | str | None = None) -> None:
        super().__init__(message)
        self.code = code


class LintFailureError(ScssLintError):
    """Raised by the fail reporter when a file did not pass linting."""

    def __init__(self, message: str, *, file: str | None) -> None:
        super().__init__(message)
        self.file = file


class StreamStateError(ScssLintError):
    """Raised when a lint stream is used outside of its valid state."""


__all__ = [
    "LintFailureError",
    "ParseError",
    "ScssLintError",
    "StreamStateError",
    "ToolExecutionError",
    "ToolNotFoundError",
]
