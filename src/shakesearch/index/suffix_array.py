"""Suffix array position index."""

from __future__ import annotations

import logging
import time
from typing import List

import numpy as np

LOGGER = logging.getLogger(__name__)


def build_suffix_array(text: str) -> np.ndarray:
    """Return the start offsets of all suffixes of ``text`` in lexicographic order.

    Uses prefix doubling: each round sorts suffixes by their first ``2 * step``
    characters, keyed on the previous round's rank of the first half and of the
    second half packed into one integer, until every suffix has a distinct rank.
    """
    n = len(text)
    if n == 0:
        return np.empty(0, dtype=np.int64)

    codes = np.frombuffer(text.encode("utf-32-le"), dtype=np.uint32)
    _, rank = np.unique(codes, return_inverse=True)
    rank = rank.reshape(-1).astype(np.int64)
    order = np.argsort(rank, kind="stable")
    sorted_keys = rank[order]

    step = 1
    while step < n:
        if sorted_keys.size < 2 or bool(np.all(sorted_keys[1:] != sorted_keys[:-1])):
            break

        # Second half rank shifted by one so a suffix shorter than ``step`` sorts first.
        second = np.zeros(n, dtype=np.int64)
        second[: n - step] = rank[step:] + 1
        keys = rank * (n + 1) + second
        order = np.argsort(keys, kind="stable")

        sorted_keys = keys[order]
        rank = np.empty(n, dtype=np.int64)
        rank[order] = np.concatenate(([0], np.cumsum(sorted_keys[1:] != sorted_keys[:-1])))
        step *= 2

    return order.astype(np.int64)


class SuffixArrayIndex:
    """Read-only index answering "where does this pattern occur" over a fixed text."""

    def __init__(self, text: str) -> None:
        started = time.perf_counter()
        self._text = text
        self._suffixes = build_suffix_array(text)
        LOGGER.info(
            "Built suffix array over %d characters in %.2fs",
            len(text),
            time.perf_counter() - started,
        )

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def lookup(self, pattern: str, max_matches: int = -1) -> List[int]:
        """Return ascending start offsets of ``pattern``.

        ``max_matches`` < 0 returns every occurrence; otherwise only the
        ``max_matches`` smallest offsets are returned.
        """
        if not pattern or max_matches == 0:
            return []

        lo = self._bound(pattern, inclusive=False)
        hi = self._bound(pattern, inclusive=True)
        offsets = np.sort(self._suffixes[lo:hi])
        if max_matches > 0:
            offsets = offsets[:max_matches]
        return offsets.tolist()

    def _bound(self, pattern: str, *, inclusive: bool) -> int:
        # First suffix whose prefix is >= pattern (> pattern when inclusive).
        text = self._text
        size = len(pattern)
        lo, hi = 0, len(self._suffixes)
        while lo < hi:
            mid = (lo + hi) // 2
            start = int(self._suffixes[mid])
            prefix = text[start : start + size]
            if prefix < pattern or (inclusive and prefix == pattern):
                lo = mid + 1
            else:
                hi = mid
        return lo
