"""Table-of-contents parsing."""

from __future__ import annotations

import logging
import re
from typing import List, Pattern, Union

from shakesearch.models import TableOfContents

LOGGER = logging.getLogger(__name__)

# Greedy: the capture runs to the last terminal phrase, which in the complete
# works is the heading of the first play right after the contents block.
TOC_PATTERN = r"by William Shakespeare\s+Contents\s+([\s\S]*)THE SONNETS"


class StructureNotFoundError(ValueError):
    """Raised when the corpus has no recognisable table of contents."""


def split_titles(block: str) -> List[str]:
    """Split a contents block into stripped, non-empty lines."""
    titles = []
    for line in block.splitlines():
        line = line.strip()
        if line:
            titles.append(line)
    return titles


def extract_titles(corpus: str, pattern: Union[str, Pattern[str]] = TOC_PATTERN) -> TableOfContents:
    """Locate the contents block in ``corpus`` and return its titles in order.

    Only the first match of ``pattern`` is used; its first group is the block
    of titles.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    match = regex.search(corpus)
    if match is None:
        raise StructureNotFoundError("could not find table of contents")

    titles = split_titles(match.group(1))
    LOGGER.info("Found %d titles in table of contents", len(titles))
    return TableOfContents(titles=tuple(titles), start=match.start(), end=match.end())
