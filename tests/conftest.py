"""Shared fixtures: small corpora laid out like the complete works."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

import pytest

from shakesearch.index.search import Searcher


def make_corpus(works: Sequence[Tuple[str, str]]) -> str:
    """Build a corpus with a contents block listing ``works`` followed by their text."""
    toc = "".join(f"    {title}\n" for title, _ in works)
    body = "".join(f"\n\n{title}\n\n{text}\n" for title, text in works)
    return (
        "The Complete Works of William Shakespeare\n\n"
        "by William Shakespeare\n\n\n"
        "      Contents\n\n"
        f"{toc}\n\n"
        "THE SONNETS\n"
        f"{body}"
    )


WORKS = [
    ("Hamlet", "Elsinore. A platform before the castle. Enter the ghost."),
    ("Macbeth", "A desert heath. Thunder. Enter three witches near Dunsinane."),
    ("Othello", "Venice. A street. Enter Roderigo and Iago."),
]

SAMPLE_CORPUS = make_corpus(WORKS)


@pytest.fixture
def sample_corpus() -> str:
    return SAMPLE_CORPUS


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "completeworks.txt"
    path.write_text(SAMPLE_CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def searcher() -> Searcher:
    return Searcher(SAMPLE_CORPUS)
