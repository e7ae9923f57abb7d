# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""pyscsslint CLI package exports."""

from __future__ import annotations

from .app import app
from .shared import CLIError

__all__ = ["CLIError", "app"]
