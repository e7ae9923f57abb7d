# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application running scss-lint over files and reporting the results."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, LintOptions, load_options
from ..errors import LintFailureError, ScssLintError
from ..models import LintFile
from ..pipeline import ScssLintStream, run_pipeline
from ..reporters import DefaultReporter, FailReporter, reporter
from .shared import (
    EXIT_LINT_FAILURE,
    EXIT_TOOL_ERROR,
    CLIError,
    CLILogger,
    build_cli_logger,
    verbose_logging,
)

app = typer.Typer(
    name="pyscsslint",
    help="Run scss-lint over stylesheet files and report per-file results.",
    add_completion=False,
)


def _resolve_options(
    root: Path,
    *,
    config: str | None,
    bin_: str | None,
    exclude: str | None,
) -> LintOptions:
    try:
        return load_options(root).merged(config=config, bin=bin_, exclude=exclude)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def _select_reporter(name: str) -> FailReporter | DefaultReporter:
    try:
        return reporter(name)
    except ValueError as exc:
        raise CLIError(str(exc)) from exc


def _load_files(paths: Sequence[str]) -> list[LintFile]:
    files: list[LintFile] = []
    for path in paths:
        try:
            files.append(LintFile.from_path(path))
        except OSError as exc:
            raise CLIError(f"Unable to read {path}: {exc.strerror or exc}") from exc
    return files


def _summarise(files: Sequence[LintFile], logger: CLILogger) -> None:
    failures = sum(1 for file in files if file.scsslint is not None and not file.scsslint.success)
    total = len(files)
    if failures:
        logger.warn(f"{failures} of {total} file(s) failed scss-lint")
    else:
        logger.ok(f"{total} file(s) passed scss-lint")


@app.command()
def main(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Stylesheet files to lint.", show_default=False),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option("--config", "-c", help="Path to a scss-lint configuration file."),
    ] = None,
    bin_: Annotated[
        str | None,
        typer.Option("--bin", help="scss-lint call signature, e.g. 'bundle exec scss-lint'."),
    ] = None,
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", "-e", help="Glob of files scss-lint should exclude."),
    ] = None,
    reporter_name: Annotated[
        str,
        typer.Option("--reporter", help="Reporter to apply: 'default' or 'fail'."),
    ] = "default",
    root: Annotated[
        Path,
        typer.Option("--root", help="Directory holding the pyproject.toml with [tool.pyscsslint]."),
    ] = Path("."),
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")] = True,
    debug: Annotated[bool, typer.Option("--debug", help="Log the scss-lint invocation.")] = False,
) -> None:
    """Lint FILES with scss-lint and report the files that did not pass."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    with verbose_logging(debug):
        try:
            options = _resolve_options(root, config=config, bin_=bin_, exclude=exclude)
            stage = _select_reporter(reporter_name)
            lint_files = _load_files(files or [])
        except CLIError as exc:
            logger.fail(str(exc))
            raise typer.Exit(code=exc.exit_code) from exc

        if not lint_files:
            logger.warn("No files to lint")
            raise typer.Exit(code=0)

        logger.debug(f"bin={options.bin} config={options.config} exclude={options.exclude}")
        try:
            emitted = run_pipeline(lint_files, ScssLintStream(options), stage)
        except LintFailureError as exc:
            logger.fail(str(exc))
            raise typer.Exit(code=EXIT_LINT_FAILURE) from exc
        except ScssLintError as exc:
            logger.fail(str(exc))
            raise typer.Exit(code=EXIT_TOOL_ERROR) from exc

        _summarise(emitted, logger)
    raise typer.Exit(code=0)


__all__ = ["app", "main"]
