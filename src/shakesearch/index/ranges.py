"""Resolution of where each title's content begins in the corpus."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence, Tuple

from shakesearch.index.suffix_array import SuffixArrayIndex
from shakesearch.models import UNRESOLVED

LOGGER = logging.getLogger(__name__)


class RangeResolutionStrategy(Protocol):
    """Maps each title to the offset where its content starts, or ``UNRESOLVED``."""

    def resolve(self, titles: Sequence[str], index: SuffixArrayIndex) -> Tuple[int, ...]:
        ...


class SecondOccurrenceStrategy:
    """Take the second occurrence of a title as the start of its content.

    The first occurrence is the contents entry itself; the second is usually
    the heading that opens the work. Titles seen fewer than twice stay
    unresolved.
    """

    def resolve(self, titles: Sequence[str], index: SuffixArrayIndex) -> Tuple[int, ...]:
        starts = []
        for title in titles:
            offsets = index.lookup(title, 2)
            if len(offsets) < 2:
                LOGGER.debug("Could not resolve content start for %r (%d hits)", title, len(offsets))
                starts.append(UNRESOLVED)
                continue
            starts.append(offsets[1])

        unresolved = starts.count(UNRESOLVED)
        if unresolved:
            LOGGER.info("%d of %d titles have no resolvable content start", unresolved, len(titles))
        return tuple(starts)
