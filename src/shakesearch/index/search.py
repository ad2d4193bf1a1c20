"""Substring search interface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from shakesearch.config import AppConfig
from shakesearch.index.ranges import RangeResolutionStrategy, SecondOccurrenceStrategy
from shakesearch.index.suffix_array import SuffixArrayIndex
from shakesearch.index.titles import TOC_PATTERN, extract_titles
from shakesearch.ingestion.corpus_loader import load_corpus
from shakesearch.models import UNRESOLVED, TableOfContents, TitledContent
from shakesearch.utils.text import check_ascii_letters, context_window, fold_case

LOGGER = logging.getLogger(__name__)


class Searcher:
    """Case-insensitive substring search over one corpus, with title attribution.

    Everything is computed in the constructor and never modified afterwards,
    so one instance can serve concurrent queries without locking.
    """

    def __init__(
        self,
        corpus: str,
        *,
        toc_pattern: str = TOC_PATTERN,
        strategy: RangeResolutionStrategy | None = None,
        snippet_radius: int = 250,
        strict_ascii: bool = False,
    ) -> None:
        if strict_ascii:
            check_ascii_letters(corpus)

        self._corpus = corpus
        self._toc = extract_titles(corpus, toc_pattern)
        self._index = SuffixArrayIndex(fold_case(corpus))

        strategy = strategy if strategy is not None else SecondOccurrenceStrategy()
        self._starts = tuple(strategy.resolve(self._toc.titles, SuffixArrayIndex(corpus)))
        self.snippet_radius = snippet_radius

    @classmethod
    def load(cls, path: Path, config: AppConfig | None = None) -> "Searcher":
        config = config or AppConfig()
        corpus = load_corpus(path)
        return cls(
            corpus,
            toc_pattern=config.toc_pattern,
            snippet_radius=config.snippet_radius,
            strict_ascii=config.strict_ascii,
        )

    @property
    def corpus(self) -> str:
        return self._corpus

    @property
    def table_of_contents(self) -> TableOfContents:
        return self._toc

    @property
    def titles(self) -> Tuple[str, ...]:
        return self._toc.titles

    @property
    def content_starts(self) -> Tuple[int, ...]:
        return self._starts

    def find_offsets(self, query: str) -> List[int]:
        return self._index.lookup(fold_case(query))

    def search(self, query: str) -> List[TitledContent]:
        """Return every occurrence of ``query`` in ascending offset order."""
        results = []
        for offset in self.find_offsets(query):
            results.append(
                TitledContent(
                    title=self.title_for(offset),
                    text=context_window(self._corpus, offset, self.snippet_radius),
                    offset=offset,
                )
            )
        LOGGER.debug("Query %r matched %d times", query, len(results))
        return results

    def search_text(self, query: str) -> List[str]:
        """Like :meth:`search` but only the surrounding text of each hit."""
        return [
            context_window(self._corpus, offset, self.snippet_radius)
            for offset in self.find_offsets(query)
        ]

    def title_for(self, offset: int) -> str:
        """Return the title whose content contains ``offset``, or ``""``.

        An entry whose successor is unresolved cannot be bounded and is
        skipped, so its range may be attributed to a later title.
        """
        last = len(self._starts) - 1
        for position, (title, start) in enumerate(zip(self._toc.titles, self._starts)):
            if start == UNRESOLVED:
                continue

            if position == last:
                if start <= offset:
                    return title
                continue

            end = self._starts[position + 1]
            if end == UNRESOLVED:
                continue
            if start <= offset < end:
                return title

        return ""
