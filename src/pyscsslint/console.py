# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console used for scss-lint results written to standard output."""

from __future__ import annotations

import sys

from rich.console import Console


def stdout_console(*, color: bool | None = None) -> Console:
    """Return a console writing to whatever ``sys.stdout`` is at print time.

    No file is bound, so output captured by pytest or typer's ``CliRunner``
    after construction still receives the text.

    Args:
        color: ``True``/``False`` to force ANSI colour on or off. ``None``
            enables colour only when stdout is a terminal.

    Returns:
        Console: Console with highlighting disabled and soft wrapping enabled.
    """

    if color is None:
        try:
            color = sys.stdout.isatty()
        except (AttributeError, ValueError):
            color = False
    return Console(
        color_system="auto" if color else None,
        force_terminal=color or None,
        no_color=not color,
        highlight=False,
        soft_wrap=True,
    )


__all__ = ["stdout_console"]
