# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

FAKE_SCSS_LINT = Path(__file__).resolve().parent / "fixtures" / "fake_scss_lint.py"

STYLESHEETS: dict[str, str] = {
    "pass.scss": ".pass {\n  color: #fff;\n}\n",
    "pass with spaces.scss": ".spaced {\n  margin: 0;\n}\n",
    "warning.scss": (
        ".warning {\n"
        "  color: #000;\n"
        "  border: none; // WARNING: `border: 0` is preferred over `border: none`\n"
        "}\n"
    ),
    "error.scss": (
        ".error {\n"
        "  color: red; // ERROR: Color `red` should be written in hexadecimal form as `#ff0000`\n"
        "}\n"
    ),
}


@pytest.fixture
def fake_bin() -> str:
    """Return a scss-lint call signature that runs the fake linter script."""
    signature = f"{sys.executable} {FAKE_SCSS_LINT}"
    if len(signature.split()) != 2:
        pytest.skip("interpreter or fixture path contains whitespace")
    return signature


@pytest.fixture
def stylesheets(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write the sample stylesheets under ``styles/`` and chdir into ``tmp_path``."""
    styles = tmp_path / "styles"
    styles.mkdir()
    for name, content in STYLESHEETS.items():
        (styles / name).write_text(content, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    for variable in ("FAKE_SCSS_LINT_EXIT", "FAKE_SCSS_LINT_STDOUT", "FAKE_SCSS_LINT_ARGS"):
        monkeypatch.delenv(variable, raising=False)
    return styles
