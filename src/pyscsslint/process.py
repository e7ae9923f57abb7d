# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation of the scss-lint executable and exit code classification."""

from __future__ import annotations

import logging
import shlex

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

from .config import LintOptions
from .constants import (
    COMMAND_NOT_FOUND,
    DEFAULT_BIN,
    LINT_ERROR_CODE,
    NOT_FOUND_MARKER,
    SCSS_ERROR_CODES,
    XML_FORMAT_FLAG,
)
from .errors import ScssLintError, ToolExecutionError, ToolNotFoundError
from .models import ExecutionResult

LOGGER = logging.getLogger(__name__)

Runner: TypeAlias = Callable[[LintOptions, Sequence[str]], ExecutionResult]


def build_command(options: LintOptions, file_paths: Sequence[str]) -> list[str]:
    """Return the scss-lint argv for ``file_paths``.

    The shape is ``<bin tokens...> [-c config] [-e exclude] -fXML <paths...>``.
    """

    command = list(options.bin_tokens)
    if options.config:
        command.extend(["-c", options.config])
    if options.exclude:
        command.extend(["-e", options.exclude])
    command.append(XML_FORMAT_FLAG)
    command.extend(file_paths)
    return command


def not_found_message(executable: str) -> str:
    """Return installation instructions for a missing scss-lint executable."""

    return (
        f"{executable} could not be found\n"
        "1. Please make sure you have ruby installed: `ruby -v`\n"
        f"2. Install the `{DEFAULT_BIN}` gem by running:\n"
        f"gem update --system && gem install {DEFAULT_BIN}"
    )


def classify_exit(code: int | str | None, executable: str) -> ScssLintError | None:
    """Translate a scss-lint exit code into an execution error.

    Args:
        code: Process return code, or the ``ENOENT`` marker when spawning failed.
        executable: Configured call signature, used in the not-found message.

    Returns:
        ScssLintError | None: ``None`` when scss-lint ran, with or without
        findings; otherwise the error describing why it could not lint.
    """

    if not code or code == LINT_ERROR_CODE:
        return None
    if code in (NOT_FOUND_MARKER, COMMAND_NOT_FOUND):
        return ToolNotFoundError(not_found_message(executable), executable=executable)
    if isinstance(code, int) and code in SCSS_ERROR_CODES:
        return ToolExecutionError(SCSS_ERROR_CODES[code], code=code)
    return ToolExecutionError(f"{DEFAULT_BIN} exited with code {code}", code=code)


def run_scss_lint(
    options: LintOptions,
    file_paths: Sequence[str],
    *,
    cwd: Path | None = None,
) -> ExecutionResult:
    """Run scss-lint once over ``file_paths`` and capture its XML report.

    Stdout is buffered until the process exits. Stderr is inherited so the
    linter's own messages reach the operator.

    Raises:
        ToolNotFoundError: If the executable cannot be found.
        ToolExecutionError: If scss-lint exits with a code other than 0 or 65.
    """

    command = build_command(options, file_paths)
    LOGGER.debug("running scss-lint command=%s", shlex.join(command))
    try:
        completed: subprocess.CompletedProcess[str] = subprocess.run(  # nosec B603
            command,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=None,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise ToolNotFoundError(not_found_message(options.bin), executable=options.bin) from exc
    except OSError as exc:
        msg = f"{options.bin} could not be started: {exc.strerror or exc}"
        raise ToolExecutionError(msg, code=exc.errno) from exc

    LOGGER.debug("scss-lint exited returncode=%s", completed.returncode)
    error = classify_exit(completed.returncode, options.bin)
    if error is not None:
        raise error
    return ExecutionResult(stdout=completed.stdout or "", returncode=completed.returncode)


__all__ = [
    "Runner",
    "build_command",
    "classify_exit",
    "not_found_message",
    "run_scss_lint",
]
