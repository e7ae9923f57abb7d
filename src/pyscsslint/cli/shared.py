# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exit codes, errors and message rendering for the pyscsslint command."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final, Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ..console import stdout_console

PACKAGE_LOGGER: Final[str] = "pyscsslint"

EXIT_LINT_FAILURE: Final[int] = 1
EXIT_TOOL_ERROR: Final[int] = 2

Status = Literal["ok", "warn", "fail"]

# status -> (emoji prefix, style)
_STATUS_MARKS: Final[dict[Status, tuple[str, str]]] = {
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


class CLIError(RuntimeError):
    """Failure that ends the command with ``exit_code``."""

    def __init__(self, message: str, *, exit_code: int = EXIT_TOOL_ERROR) -> None:
        """Store the message shown to the user and the status to exit with.

        Args:
            message: Text printed before exiting.
            exit_code: Process exit status, ``2`` unless a lint failure is reported.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Print run summaries and errors of one pyscsslint invocation."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False

    def _emit(self, status: Status, message: str) -> None:
        """Print ``message`` styled for ``status``, prefixed with its emoji when enabled."""

        prefix, style = _STATUS_MARKS[status]
        text = Text(f"{prefix if self.use_emoji else ''}{message}")
        text.stylize(style)
        self.console.print(text)

    def ok(self, message: str) -> None:
        """Print a success line."""
        self._emit("ok", message)

    def warn(self, message: str) -> None:
        """Print a warning line."""
        self._emit("warn", message)

    def fail(self, message: str) -> None:
        """Print an error line."""
        self._emit("fail", message)

    def debug(self, message: str) -> None:
        """Print ``message`` with a ``[debug]`` tag when ``--debug`` was given."""

        if self.debug_enabled:
            self.console.print(Text.assemble(("[debug] ", "bold cyan"), (message, "dim")))


@contextmanager
def verbose_logging(enabled: bool) -> Iterator[None]:
    """Send the package's debug records to stderr while the block runs.

    The handler, level and propagation of the ``pyscsslint`` logger are
    restored on exit, so nothing carries over to the next invocation.

    Args:
        enabled: When ``False`` the logger is left untouched.

    Yields:
        None: Control returns to the caller with logging configured.
    """

    if not enabled:
        yield
        return
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = RichHandler(console=Console(stderr=True, highlight=False), show_time=False, show_path=False)
    level, propagate = logger.level, logger.propagate
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(level)
        logger.propagate = propagate


def build_cli_logger(*, emoji: bool, debug: bool = False, color: bool | None = None) -> CLILogger:
    """Return the message printer for one invocation.

    Args:
        emoji: Whether status lines start with an emoji.
        debug: Whether :meth:`CLILogger.debug` prints anything.
        color: Forwarded to :func:`~pyscsslint.console.stdout_console`.

    Returns:
        CLILogger: Printer bound to a stdout console.
    """

    return CLILogger(console=stdout_console(color=color), use_emoji=emoji, debug_enabled=debug)


__all__ = [
    "CLIError",
    "CLILogger",
    "EXIT_LINT_FAILURE",
    "EXIT_TOOL_ERROR",
    "build_cli_logger",
    "verbose_logging",
]
