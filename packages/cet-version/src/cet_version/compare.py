# SPDX-License-Identifier: MIT
"""Total ordering of version strings.

Ordering rules, applied in turn until one decides:
1. Versions without any numeric component (develop, nightly-276) sort
   after every version that has one
2. Numeric components, compared as numbers; missing components count as 0
3. Qualifier class: pre-release < (none) < patch < nightly < snapshot < other
4. Keyword order within pre-releases: alpha < beta < pre < rc
5. Qualifier number, compared as a decimal (20210615000000.2 < 20210615000000.20003)
6. Qualifier text, then any text after the qualifier number, lexically
"""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from .parse import ParsedVersion, parse_version_string, prerelease_order


def _numeric_key(bits: tuple[str, ...]) -> tuple[tuple[int, str], ...]:
    """Return the numeric components as comparable (length, digits) pairs.

    Leading zeros are dropped so 02 == 2, and trailing zero components carry
    no weight, so 1, 1.0 and 1.0.0 produce equal keys. Digits are compared
    as text to avoid int() limits on very long segments.
    """
    numbers = [bit.lstrip("0") for bit in bits]
    while numbers and not numbers[-1]:
        numbers.pop()
    return tuple((len(number), number) for number in numbers)


def _extra_num_key(extra_num: str | None) -> tuple[int, Decimal]:
    # A missing number sorts before any number, including 0
    if extra_num is None:
        return (0, Decimal(0))
    return (1, Decimal(extra_num))


def version_key(version: Union[str, ParsedVersion]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or ParsedVersion

    Returns:
        A tuple ordering versions the same way as version_cmp

    Examples:
        >>> sorted(["1.2", "develop", "1.2rc1", "1"], key=version_key)
        ['1', '1.2rc1', '1.2', 'develop']
    """
    v = parse_version_string(version) if isinstance(version, str) else version

    extra_rank = int(v.extra_type) if v.extra_type is not None else 0
    return (
        0 if v.has_numeric else 1,
        _numeric_key(v.bits),
        extra_rank,
        prerelease_order(v.extra_text) if v.is_prerelease else 0,
        _extra_num_key(v.extra_num),
        v.extra_text or "",
        v.extra_suffix or "",
    )


def version_cmp(version1: Union[str, ParsedVersion], version2: Union[str, ParsedVersion]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or ParsedVersion)
        version2: Second version (string or ParsedVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Examples:
        >>> version_cmp("1", "1.2")
        -1
        >>> version_cmp("1.0", "1")
        0
        >>> version_cmp("1.5", "1.5.rc7")
        1
        >>> version_cmp("nightly-276", "2.3-snapshot-20210615000000.20003")
        1
    """
    key1 = version_key(version1)
    key2 = version_key(version2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1
