"""Text helpers for offset-preserving case folding and context windows."""

from __future__ import annotations

import logging

LOGGER = logging.getLogger(__name__)


class CorpusEncodingError(ValueError):
    """Raised when a corpus cannot be folded without shifting offsets."""


def fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time, without changing its length.

    Offsets found in the folded copy must index the original text, so any
    character whose lowercase form has a different length is kept as is.
    Folding ignores context (a final capital sigma becomes ``σ``, not ``ς``)
    so a short query folds the same way as the corpus around it.
    """
    table = {}
    expanding = set()
    for ch in set(text):
        lowered = ch.lower()
        if lowered == ch:
            continue
        if len(lowered) == 1:
            table[ord(ch)] = lowered
        else:
            expanding.add(ch)

    if expanding:
        LOGGER.warning(
            "Leaving characters unfolded because their lowercase form changes length: %s",
            "".join(sorted(expanding)),
        )
    return text.translate(table)


def check_ascii_letters(text: str) -> None:
    """Reject text containing alphabetic characters outside ASCII."""
    for position, ch in enumerate(text):
        if not ch.isascii() and ch.isalpha():
            raise CorpusEncodingError(
                f"Non-ASCII letter {ch!r} at offset {position}; case-insensitive offsets may drift"
            )


def context_window(text: str, center: int, radius: int) -> str:
    """Return ``text[center - radius : center + radius]`` clamped to the text bounds."""
    start = max(center - radius, 0)
    end = min(center + radius, len(text))
    return text[start:end]
