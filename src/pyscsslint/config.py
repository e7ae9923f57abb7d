# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation options for scss-lint and their configuration sources."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .constants import DEFAULT_BIN, PYPROJECT_SECTION_KEY, PYPROJECT_TOOL_KEY

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"

_ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintOptions(BaseModel):
    """Options controlling how scss-lint is invoked.

    Attributes:
        config: Path to a ``.scss-lint.yml`` rules file passed with ``-c``.
        bin: Executable call signature, optionally prefixed by wrapper tokens
            such as ``bundle exec scss-lint``.
        exclude: Exclusion glob passed with ``-e``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    config: str | None = None
    bin: str = DEFAULT_BIN
    exclude: str | None = None

    @field_validator("config", "exclude", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, Path):
            return str(value)
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("bin", mode="before")
    @classmethod
    def _default_bin(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_BIN
        return value

    @property
    def bin_tokens(self) -> list[str]:
        """Return the executable and any wrapper tokens preceding it."""
        return self.bin.split()

    @classmethod
    def coerce(cls, value: LintOptions | str | Path | Mapping[str, Any] | None) -> LintOptions:
        """Resolve the accepted option shapes into a :class:`LintOptions`.

        Args:
            value: ``None`` for defaults, a string or path naming the config
                file, a mapping of option fields, or an existing instance.

        Returns:
            LintOptions: Validated options.

        Raises:
            ConfigError: If the mapping contains unknown keys or invalid values.
        """

        if value is None:
            return cls()
        if isinstance(value, LintOptions):
            return value
        if isinstance(value, (str, Path)):
            return cls(config=str(value))
        if isinstance(value, Mapping):
            try:
                return cls.model_validate(dict(value))
            except ValidationError as exc:
                raise ConfigError(f"Invalid scss-lint options: {exc}") from exc
        raise ConfigError(f"Unsupported scss-lint options: {value!r}")

    def merged(self, **overrides: str | None) -> LintOptions:
        """Return a copy with every non-``None`` override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return LintOptions.coerce({**self.model_dump(), **updates})


class PyProjectConfigSource:
    """Read options from ``[tool.pyscsslint]`` within ``pyproject.toml``."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        """Bind the source to ``path``.

        Args:
            path: Location of the ``pyproject.toml`` file, which may not exist.
            env: Variables used for ``$VAR`` expansion. Defaults to ``os.environ``.
        """

        self.path = path
        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        """Return the raw ``[tool.pyscsslint]`` table with variables expanded.

        Returns:
            Mapping[str, Any]: Option values keyed by field name, or an empty
            mapping when the file or the section is absent.

        Raises:
            ConfigError: If the file is not valid TOML or the section is not a table.
        """

        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Unable to parse {self.path}: {exc}") from exc
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {self.path} must be a table")
        return {key: _expand_env_value(value, self._env) for key, value in section.items()}


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    """Expand ``$VAR`` and ``${VAR}`` references in string values.

    Args:
        value: Raw value read from the TOML table.
        env: Variables available for substitution.

    Returns:
        Any: ``value`` with known variables substituted. Unknown references and
        non-string values are returned unchanged.
    """

    if not isinstance(value, str):
        return value

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key is None:
            return match.group(0)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


def load_options(root: Path, *, env: Mapping[str, str] | None = None) -> LintOptions:
    """Return options declared in ``root/pyproject.toml`` or the defaults."""

    source = PyProjectConfigSource(root / PYPROJECT_FILENAME, env=env)
    return LintOptions.coerce(source.load())


__all__ = [
    "ConfigError",
    "LintOptions",
    "PyProjectConfigSource",
    "load_options",
]
