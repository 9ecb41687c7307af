# SPDX-License-Identifier: MIT
"""Comparison settings for semvercomp.

Settings can be built directly or read from the ``[tool.semvercomp]`` table
of a pyproject.toml:

    [tool.semvercomp]
    allow_uppercase_prefix = true
    max_component = 4294967295
    prerelease_tiebreak = "equal"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .semver import MAX_COMPONENT


class ConfigError(Exception):
    """Raised when comparison settings are invalid."""

    pass


TIEBREAK_ORDERED = "ordered"
TIEBREAK_EQUAL = "equal"
TIEBREAKS = (TIEBREAK_ORDERED, TIEBREAK_EQUAL)


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Settings shared by parsing and comparison.

    Attributes:
        allow_uppercase_prefix: Accept "V1.2.3" as well as "v1.2.3"
        max_component: Largest accepted major/minor/patch value, at most
            MAX_COMPONENT
        prerelease_tiebreak: How to order versions that differ only in
            pre-release ("ordered" or "equal")
    """

    allow_uppercase_prefix: bool = False
    max_component: int = MAX_COMPONENT
    prerelease_tiebreak: str = TIEBREAK_ORDERED

    def __post_init__(self) -> None:
        if not isinstance(self.allow_uppercase_prefix, bool):
            raise ConfigError("allow_uppercase_prefix must be a boolean")
        if (
            not isinstance(self.max_component, int)
            or isinstance(self.max_component, bool)
            or not 0 <= self.max_component <= MAX_COMPONENT
        ):
            raise ConfigError(f"max_component must be an integer between 0 and {MAX_COMPONENT}")
        if self.prerelease_tiebreak not in TIEBREAKS:
            raise ConfigError(
                f"prerelease_tiebreak must be one of {', '.join(TIEBREAKS)}, "
                f"got {self.prerelease_tiebreak!r}"
            )

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "CompareConfig":
        """Create a CompareConfig from a pyproject.toml file.

        A missing ``[tool.semvercomp]`` table yields the defaults.

        Raises:
            ConfigError: If the file is not valid TOML or the table is invalid
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "CompareConfig":
        """Create a CompareConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If the table holds unknown keys or invalid values
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")
        table = tool.get("semvercomp", {})
        if not isinstance(table, dict):
            raise ConfigError("[tool.semvercomp] must be a table")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(table) - known)
        if unknown:
            raise ConfigError(f"Unknown [tool.semvercomp] keys: {', '.join(unknown)}")
        return cls(**table)
