# SPDX-License-Identifier: MIT
"""Permissive version string parsing.

Version strings in the wild come from package names, tags and directory
names. The grammar accepted here is deliberately loose:

- An optional single ``v`` or ``.`` prefix: ``v1_2_3``, ``.develop``
- A numeric run of ``.``/``_`` delimited digit segments: ``1.2.3``, ``1_2_3``
- An optional qualifier tail: ``rc7``, ``-snapshot-20210615``, ``p1``, ``develop``

Every string produces a record; nothing is rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

# Leading numeric run. Consecutive delimiters mark an empty (zero) segment.
NUMERIC_PATTERN = re.compile(r"^\d+(?:[._]+\d+)*", re.ASCII)

SEGMENT_DELIMITER = re.compile(r"[._]")

# Separators allowed between the numeric run and the qualifier tail
TAIL_SEPARATORS = "._-"

# Qualifier tail: free text followed by a number, which may carry one
# embedded dot for timestamp-style suffixes (20210615000000.20003).
# Anything after the number is kept as a suffix.
EXTRA_PATTERN = re.compile(r"(?P<text>\D*)(?P<num>\d+(?:\.\d+)?)?", re.ASCII)


class ExtraType(IntEnum):
    """Precedence class of a version qualifier.

    The values form the ranking scale used for ordering; a version without
    any qualifier ranks as ``0``.
    """

    PRERELEASE = -1
    PATCH = 1
    NIGHTLY = 2
    SNAPSHOT = 3
    ARBITRARY = 101
    NUMERIC_ARBITRARY = 102
    COMPOUND = 103


# Pre-release keywords and their ordering within the pre-release class
# (lower = earlier in release cycle)
PRERELEASE_ORDER = {
    "alpha": 0,
    "a": 0,
    "beta": 1,
    "b": 1,
    "pre": 2,
    "preview": 2,
    "rc": 3,
    "c": 3,
}

_KEYWORD_TYPES = {
    "p": ExtraType.PATCH,
    "patch": ExtraType.PATCH,
    "nightly": ExtraType.NIGHTLY,
    "snapshot": ExtraType.SNAPSHOT,
}


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """A version string broken into its components.

    Numeric fields keep their original digit text (leading zeros included)
    so renderers can reproduce them exactly; ordering treats them as numbers.

    Attributes:
        major: First numeric segment
        minor: Second numeric segment
        patch: Third numeric segment
        bits: All numeric segments in order (empty when there are none)
        extra: Qualifier tail as found (e.g. "rc7", "snapshot-20210615")
        extra_text: Textual part of the qualifier (e.g. "rc", "snapshot-")
        extra_num: Numeric suffix of the qualifier (e.g. "7", "20210615000000.2")
        extra_suffix: Text following the qualifier number (e.g. "-final" in "rc1-final")
        extra_type: Precedence class of the qualifier
    """

    major: Optional[str] = None
    minor: Optional[str] = None
    patch: Optional[str] = None
    bits: tuple[str, ...] = ()
    extra: Optional[str] = None
    extra_text: Optional[str] = None
    extra_num: Optional[str] = None
    extra_suffix: Optional[str] = None
    extra_type: Optional[ExtraType] = None

    @property
    def has_numeric(self) -> bool:
        """Return True if the version has at least one numeric segment."""
        return bool(self.bits)

    @property
    def is_prerelease(self) -> bool:
        """Return True if the qualifier is a pre-release keyword."""
        return self.extra_type is ExtraType.PRERELEASE

    def as_dict(self) -> dict[str, Any]:
        """Return the populated fields as a dictionary.

        Absent fields are omitted rather than reported as None.
        """
        result: dict[str, Any] = {}
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if self.bits:
            result["bits"] = list(self.bits)
        for name in ("extra", "extra_text", "extra_num", "extra_suffix", "extra_type"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        return result


def classify_extra(
    extra_text: Optional[str], extra_num: Optional[str] = None
) -> Optional[ExtraType]:
    """Determine the qualifier class from the qualifier text.

    Args:
        extra_text: Textual part of the qualifier, possibly None
        extra_num: Numeric part of the qualifier, possibly None

    Returns:
        The ExtraType for the qualifier, or None if there is no qualifier
    """
    word = (extra_text or "").strip(TAIL_SEPARATORS).lower()
    if not word:
        return ExtraType.PATCH if extra_num else None

    if word in PRERELEASE_ORDER:
        return ExtraType.PRERELEASE
    if word in _KEYWORD_TYPES:
        return _KEYWORD_TYPES[word]

    if word[0].isdigit():
        return ExtraType.NUMERIC_ARBITRARY
    if "-" in word:
        return ExtraType.COMPOUND
    return ExtraType.ARBITRARY


def prerelease_order(extra_text: Optional[str]) -> int:
    """Return the position of a pre-release keyword in the release cycle.

    Text that is not a pre-release keyword returns 0.
    """
    word = (extra_text or "").strip(TAIL_SEPARATORS).lower()
    return PRERELEASE_ORDER.get(word, 0)


def _split_numeric(numeric: str) -> tuple[str, ...]:
    return tuple(segment or "0" for segment in SEGMENT_DELIMITER.split(numeric))


def parse_version_string(version_string: str) -> ParsedVersion:
    """Parse a version string into a ParsedVersion record.

    Args:
        version_string: Any version-like string

    Returns:
        A ParsedVersion with the matched components populated

    Raises:
        TypeError: If version_string is not a string

    Examples:
        >>> parse_version_string("1.5.rc7").as_dict()["extra_type"]
        <ExtraType.PRERELEASE: -1>

        >>> parse_version_string("1..5.").bits
        ('1', '0', '5')

        >>> parse_version_string("develop").extra_type
        <ExtraType.ARBITRARY: 101>
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    remainder = version_string
    if remainder[:1] in ("v", "."):
        remainder = remainder[1:]

    bits: tuple[str, ...] = ()
    match = NUMERIC_PATTERN.match(remainder)
    if match:
        bits = _split_numeric(match.group())
        remainder = remainder[match.end() :]

    # Separators around the tail are not significant, as after the numeric run
    tail = remainder.strip(TAIL_SEPARATORS)

    extra_text: Optional[str] = None
    extra_num: Optional[str] = None
    extra_suffix: Optional[str] = None
    if tail:
        extra_match = EXTRA_PATTERN.match(tail)
        text = extra_match.group("text")
        rest = tail[extra_match.end() :]
        if rest and not text:
            # Digits followed by text (3b); keep it all as text
            extra_text = tail
        else:
            extra_text = text or None
            extra_num = extra_match.group("num")
            extra_suffix = rest or None

    major, minor, patch = (bits + (None, None, None))[:3]
    return ParsedVersion(
        major=major,
        minor=minor,
        patch=patch,
        bits=bits,
        extra=tail or None,
        extra_text=extra_text,
        extra_num=extra_num,
        extra_suffix=extra_suffix,
        extra_type=classify_extra(extra_text, extra_num),
    )
