# SPDX-License-Identifier: MIT
"""Caller-owned memoization for version comparisons.

version_cmp is pure and needs no caching for correctness. Sorting very large
version lists compares the same pairs repeatedly, so callers that care can
hold a ComparisonCache and pass it to sort_versions.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from functools import cmp_to_key
from typing import Iterable, Optional

from .compare import version_cmp, version_key

logger = logging.getLogger(__name__)


class ComparisonCache:
    """Memoized version_cmp keyed by the pair of version strings.

    Each computed result is also recorded for the mirrored pair with the
    opposite sign. The cache is not thread-safe; each owner should use its
    own instance.

    Attributes:
        maxsize: Maximum number of pairs kept (None for unbounded)
        hits: Number of lookups answered from the cache
        misses: Number of lookups that had to compare
    """

    def __init__(self, maxsize: Optional[int] = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be positive, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._results: OrderedDict[tuple[str, str], int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, pair: object) -> bool:
        return pair in self._results

    def compare(self, version1: str, version2: str) -> int:
        """Compare two version strings, reusing earlier results."""
        pair = (version1, version2)
        result = self._results.get(pair)
        if result is not None:
            self.hits += 1
            self._results.move_to_end(pair)
            return result

        self.misses += 1
        result = version_cmp(version1, version2)
        self._store(pair, result)
        if version1 != version2:
            self._store((version2, version1), -result)
        return result

    def _store(self, pair: tuple[str, str], result: int) -> None:
        self._results[pair] = result
        self._results.move_to_end(pair)
        if self.maxsize is not None:
            while len(self._results) > self.maxsize:
                self._results.popitem(last=False)

    def clear(self) -> None:
        """Drop all cached results and reset the statistics."""
        self._results.clear()
        self.hits = 0
        self.misses = 0


def sort_versions(
    versions: Iterable[str],
    reverse: bool = False,
    cache: Optional[ComparisonCache] = None,
) -> list[str]:
    """Return the versions sorted from oldest to newest.

    Args:
        versions: Version strings to sort
        reverse: Sort newest first instead
        cache: Optional comparison cache to use and fill

    Returns:
        A new sorted list
    """
    items = list(versions)
    if cache is None:
        return sorted(items, key=version_key, reverse=reverse)

    result = sorted(items, key=cmp_to_key(cache.compare), reverse=reverse)
    logger.debug(
        "Sorted %d versions (cache: %d hits, %d misses, %d entries)",
        len(items),
        cache.hits,
        cache.misses,
        len(cache),
    )
    return result


def latest_version(
    versions: Iterable[str], cache: Optional[ComparisonCache] = None
) -> Optional[str]:
    """Return the newest of the given versions, or None if there are none."""
    compare = cache.compare if cache is not None else version_cmp
    latest: Optional[str] = None
    for version in versions:
        if latest is None:
            latest = version
            continue
        if compare(version, latest) > 0:
            latest = version
    return latest
