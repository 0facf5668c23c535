# SPDX-License-Identifier: MIT
"""Version string parsing, rendering and ordering for build tooling.

This package interprets loosely-structured version identifiers as found in
package names, tags and directory names, renders them in several canonical
forms, and orders them.

Example:
    >>> from cet_version import parse_version_string, to_ups_version, version_cmp
    >>>
    >>> version = parse_version_string("1.5.rc7")
    >>> version.bits
    ('1', '5')
    >>> version.extra_text
    'rc'
    >>>
    >>> to_ups_version("1.5.rc7")
    'v1_5rc7'
    >>>
    >>> version_cmp("1", "1.2")
    -1
"""

__version__ = "0.1.0"

from .parse import (
    ExtraType,
    ParsedVersion,
    classify_extra,
    parse_version_string,
)
from .render import (
    to_cmake_version,
    to_dot_version,
    to_ups_version,
    to_version_string,
)
from .compare import (
    version_cmp,
    version_key,
)
from .cache import (
    ComparisonCache,
    latest_version,
    sort_versions,
)

__all__ = [
    # Parsing
    "ExtraType",
    "ParsedVersion",
    "classify_extra",
    "parse_version_string",
    # Rendering
    "to_cmake_version",
    "to_dot_version",
    "to_ups_version",
    "to_version_string",
    # Comparison
    "version_cmp",
    "version_key",
    # Sorting
    "ComparisonCache",
    "latest_version",
    "sort_versions",
]
