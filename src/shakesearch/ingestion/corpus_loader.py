"""Corpus loading."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class CorpusLoadError(OSError):
    """Raised when the corpus file cannot be read."""


def load_corpus(path: Path) -> str:
    """Read the whole corpus file as UTF-8 text."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusLoadError(f"Load: unable to read corpus {path}: {exc}") from exc

    LOGGER.info("Loaded corpus %s (%d characters)", path, len(text))
    return text
