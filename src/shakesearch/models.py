"""Core ShakeSearch data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

UNRESOLVED = -1


@dataclass(frozen=True, slots=True)
class TableOfContents:
    """Titles listed in the contents block, in order, with the block's span."""

    titles: Tuple[str, ...]
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class TitledContent:
    """A single search hit: the owning title and the text around the match."""

    title: str
    text: str
    offset: int
