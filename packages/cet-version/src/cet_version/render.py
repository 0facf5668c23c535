# SPDX-License-Identifier: MIT
"""Canonical string forms of a parsed version.

Four naming conventions are supported:
- ups: v1_2_3rc1 (underscore-delimited, "v" prefix)
- dot: 1.2.3rc1
- cmake: 1.2.3 (at most three numeric components, no qualifier)
- generic: 1.2.3-rc1 (pre-release qualifiers set off with a dash)
"""

from __future__ import annotations

from typing import Union

from .parse import ParsedVersion, parse_version_string


def _as_parsed(version: Union[str, ParsedVersion]) -> ParsedVersion:
    if isinstance(version, ParsedVersion):
        return version
    return parse_version_string(version)


def to_ups_version(version: Union[str, ParsedVersion]) -> str:
    """Render a version in UPS form.

    Examples:
        >>> to_ups_version("v1_5_rc7")
        'v1_5rc7'
        >>> to_ups_version("1..5.")
        'v1_0_5'
        >>> to_ups_version("develop")
        'vdevelop'
    """
    v = _as_parsed(version)
    return "v" + "_".join(v.bits) + (v.extra or "")


def to_dot_version(version: Union[str, ParsedVersion]) -> str:
    """Render a version with dot-delimited numeric components.

    Examples:
        >>> to_dot_version("1..5.")
        '1.0.5'
        >>> to_dot_version("v1_5_rc7")
        '1.5rc7'
    """
    v = _as_parsed(version)
    return ".".join(v.bits) + (v.extra or "")


def to_cmake_version(version: Union[str, ParsedVersion]) -> str:
    """Render a version as CMake understands it.

    Only major, minor and patch are kept; further components and any
    qualifier are dropped. Returns an empty string if the version has no
    numeric components.

    Examples:
        >>> to_cmake_version("v1_5_rc7")
        '1.5'
        >>> to_cmake_version("02.04.03.07")
        '02.04.03'
    """
    v = _as_parsed(version)
    return ".".join(part for part in (v.major, v.minor, v.patch) if part is not None)


def to_version_string(version: Union[str, ParsedVersion]) -> str:
    """Render a version in generic form.

    Pre-release qualifiers are separated from the numeric part by a dash;
    any other qualifier is appended directly.

    Examples:
        >>> to_version_string("v1_5_rc7")
        '1.5-rc7'
        >>> to_version_string("1.2.0.0p1")
        '1.2.0.0p1'
    """
    v = _as_parsed(version)
    numeric = ".".join(v.bits)
    if not v.extra:
        return numeric
    if v.is_prerelease and numeric:
        return f"{numeric}-{v.extra}"
    return numeric + v.extra
