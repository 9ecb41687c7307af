# SPDX-License-Identifier: MIT
"""Version comparison and reduction.

Ordering looks at major, minor and patch, most significant first. When those
match but the pre-release differs, the configured tie-break decides:
- "ordered": release > pre-release, pre-releases in plain string order
- "equal": the two versions are reported equal

Build metadata never takes part in a comparison.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Optional, Union

from .config import CompareConfig, TIEBREAK_EQUAL
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

# Starting point for greatest_version
BASELINE_VERSION = "0.0.0"


class Relation(enum.Enum):
    """Outcome of comparing one version against another."""

    GREATER = "Greater"
    LOWER = "Lower"
    EQUAL = "Equal"


def _from_sign(value1: int | str, value2: int | str) -> Relation:
    return Relation.GREATER if value1 > value2 else Relation.LOWER


def relationship(
    version1: Version, version2: Version, config: Optional[CompareConfig] = None
) -> Relation:
    """Return how version1 relates to version2.

    Args:
        version1: The version being compared
        version2: The version compared against
        config: Optional comparison settings (pre-release tie-break)

    Returns:
        Relation.GREATER, Relation.LOWER or Relation.EQUAL

    Examples:
        >>> relationship(Version(2, 0, 0), Version(1, 1, 1))
        <Relation.GREATER: 'Greater'>
        >>> relationship(Version(1, 1, 2), Version(1, 2, 1))
        <Relation.LOWER: 'Lower'>
    """
    if version1 == version2:
        return Relation.EQUAL

    for attr in ("major", "minor", "patch"):
        val1 = getattr(version1, attr)
        val2 = getattr(version2, attr)
        if val1 != val2:
            return _from_sign(val1, val2)

    # Same numeric triple, different pre-release
    config = config or CompareConfig()
    if config.prerelease_tiebreak == TIEBREAK_EQUAL:
        return Relation.EQUAL

    pre1, pre2 = version1.prerelease, version2.prerelease
    if not pre1:
        return Relation.GREATER
    if not pre2:
        return Relation.LOWER
    return _from_sign(pre1, pre2)


def relationship_from_strings(
    version1: str, version2: str, config: Optional[CompareConfig] = None
) -> Relation:
    """Parse two version strings and return how the first relates to the second.

    Raises:
        ParseError: For the first string (version1 checked first) that
            does not parse

    Examples:
        >>> relationship_from_strings("1.0.0", "v1.0.0")
        <Relation.EQUAL: 'Equal'>
    """
    v1 = parse_version(version1, config)
    v2 = parse_version(version2, config)
    return relationship(v1, v2, config)


def greatest_version(versions: Iterable[str], config: Optional[CompareConfig] = None) -> str:
    """Return the greatest version string from a collection.

    The winning entry is returned exactly as given, prefix and suffixes
    included. An empty collection yields "0.0.0".

    Args:
        versions: Version strings, e.g. repository tags
        config: Optional comparison settings

    Returns:
        The greatest version string

    Raises:
        ParseError: On the first entry that is not a valid version

    Examples:
        >>> greatest_version(["4.4.3", "v8.12.4", "0.1.0", "7.3.3", "4.67.31"])
        'v8.12.4'
        >>> greatest_version([])
        '0.0.0'
    """
    greatest = BASELINE_VERSION
    for candidate in versions:
        if relationship_from_strings(candidate, greatest, config) is Relation.GREATER:
            logger.debug("New greatest version %s (was %s)", candidate, greatest)
            greatest = candidate
    return greatest


def version_key(version: Union[str, Version], config: Optional[CompareConfig] = None) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    The key agrees with relationship() under the configured tie-break: with
    "equal", versions that differ only in pre-release share a key.

    Examples:
        >>> sorted(["1.0.0", "v2.0.0", "1.0.0-rc.1"], key=version_key)
        ['1.0.0-rc.1', '1.0.0', 'v2.0.0']
    """
    v = parse_version(version, config) if isinstance(version, str) else version

    # Releases sort after every pre-release of the same triple
    if config is not None and config.prerelease_tiebreak == TIEBREAK_EQUAL:
        prerelease_key: tuple = (1, "")
    elif v.prerelease:
        prerelease_key = (0, v.prerelease)
    else:
        prerelease_key = (1, "")

    return (v.major, v.minor, v.patch, prerelease_key)
