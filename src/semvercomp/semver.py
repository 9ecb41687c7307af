# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with an optional ``v`` prefix, pre-release
and build metadata:
- Prefix: v1.2.3
- Pre-release: -alpha, -alpha.0, -rc.1, -0.3.7
- Build metadata: +001, +build.123 (validated, then discarded)
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import CompareConfig

logger = logging.getLogger(__name__)

# Largest numeric component accepted by default (64-bit unsigned)
MAX_COMPONENT = 2**64 - 1

_SEMVER_BODY = (
    r"(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant, lowercase v prefix)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(r"^v?" + _SEMVER_BODY + r"$", re.ASCII)

# Same grammar, also accepting an uppercase V prefix
SEMVER_PATTERN_ANY_PREFIX = re.compile(r"^[vV]?" + _SEMVER_BODY + r"$", re.ASCII)

_COMPONENTS = ("major", "minor", "patch")


class ParseErrorKind(enum.Enum):
    """Why a version string could not be parsed."""

    INVALID_FORMAT = "InvalidFormat"
    NUMERIC_OVERFLOW = "NumericOverflow"


class ParseError(Exception):
    """Base class for version parsing failures.

    Raised directly it reports an invalid format.

    Attributes:
        version: The rejected input
        kind: The failure category
        message: Human-readable description
    """

    kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class InvalidFormatError(ParseError):
    """Raised when a string does not match the semantic version grammar."""

    kind = ParseErrorKind.INVALID_FORMAT


class NumericOverflowError(ParseError):
    """Raised when a numeric component exceeds the supported width.

    Attributes:
        component: Which component failed ("major", "minor" or "patch")
        value: The offending digit string
    """

    kind = ParseErrorKind.NUMERIC_OVERFLOW

    def __init__(self, version: str, component: str, value: str, limit: int):
        self.component = component
        self.value = value
        super().__init__(
            version,
            f"{component.capitalize()} component {value} of {version} exceeds {limit}",
        )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Build metadata is not kept: it has no bearing on equality or ordering.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifier (e.g., "alpha.1"), empty if absent
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""

    def __str__(self) -> str:
        return format_version(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _pattern_for(config: Optional[CompareConfig]) -> re.Pattern[str]:
    if config is not None and config.allow_uppercase_prefix:
        return SEMVER_PATTERN_ANY_PREFIX
    return SEMVER_PATTERN


def is_valid_semver(version_string: str, config: Optional[CompareConfig] = None) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        config: Optional comparison settings (prefix handling)

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("v2.3.0")
        True
        >>> is_valid_semver("V2.3.0")
        False
        >>> is_valid_semver("1.0_alpha.1")
        False
    """
    if not isinstance(version_string, str):
        return False
    return _pattern_for(config).fullmatch(version_string) is not None


def parse_version(version_string: str, config: Optional[CompareConfig] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (v?MAJOR.MINOR.PATCH[-prerelease][+build])
        config: Optional comparison settings (prefix handling, numeric limit)

    Returns:
        A Version object with parsed components

    Raises:
        InvalidFormatError: If the string does not follow semantic versioning
        NumericOverflowError: If a numeric component is larger than allowed

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='')

        >>> parse_version("1.0.0-alpha+001")
        Version(major=1, minor=0, patch=0, prerelease='alpha')
    """
    if not isinstance(version_string, str):
        raise InvalidFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = _pattern_for(config).fullmatch(version_string)
    if not match:
        logger.debug("Rejected version string %r", version_string)
        raise InvalidFormatError(version_string)

    limit = config.max_component if config is not None else MAX_COMPONENT
    # Length check first: int() refuses very long digit strings
    max_digits = len(str(limit))

    numbers = []
    for component in _COMPONENTS:
        digits = match.group(component)
        number = int(digits) if len(digits) <= max_digits else None
        if number is None or number > limit:
            logger.debug("Version %r overflows at %s=%s", version_string, component, digits)
            raise NumericOverflowError(version_string, component, digits, limit)
        numbers.append(number)

    major, minor, patch = numbers
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=match.group("prerelease") or "",
    )


def format_version(version: Version) -> str:
    """Return the canonical string form of a version.

    The ``v`` prefix and build metadata are never included.

    Examples:
        >>> format_version(Version(1, 0, 0, "alpha"))
        '1.0.0-alpha'
    """
    rendered = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        rendered += f"-{version.prerelease}"
    return rendered
