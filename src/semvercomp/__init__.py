# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison for release tooling.

This package parses ``v?MAJOR.MINOR.PATCH[-prerelease][+build]`` strings,
compares them on major, minor and patch, and picks the newest entry from a
collection of tags.

Example:
    >>> from semvercomp import parse_version, relationship_from_strings, greatest_version
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> relationship_from_strings("1.0.0", "v1.0.0")
    <Relation.EQUAL: 'Equal'>
    >>>
    >>> greatest_version(["4.4.3", "v8.12.4", "7.3.3"])
    'v8.12.4'
"""

__version__ = "0.1.0"

from .semver import (
    MAX_COMPONENT,
    SEMVER_PATTERN,
    InvalidFormatError,
    NumericOverflowError,
    ParseError,
    ParseErrorKind,
    Version,
    format_version,
    is_valid_semver,
    parse_version,
)
from .config import (
    CompareConfig,
    ConfigError,
)
from .compare import (
    Relation,
    greatest_version,
    relationship,
    relationship_from_strings,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_semver",
    "ParseError",
    "ParseErrorKind",
    "InvalidFormatError",
    "NumericOverflowError",
    "SEMVER_PATTERN",
    "MAX_COMPONENT",
    # Configuration
    "CompareConfig",
    "ConfigError",
    # Version comparison
    "Relation",
    "relationship",
    "relationship_from_strings",
    "greatest_version",
    "version_key",
]
