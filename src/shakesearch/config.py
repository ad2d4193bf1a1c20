"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from shakesearch.index.titles import TOC_PATTERN

DEFAULT_CORPUS = Path("completeworks.txt")
DEFAULT_PORT = 3001


@dataclass(slots=True)
class AppConfig:
    corpus_path: Path = DEFAULT_CORPUS
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    snippet_radius: int = 250
    toc_pattern: str = TOC_PATTERN
    strict_ascii: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config honouring ``PORT`` and ``SHAKESEARCH_CORPUS``."""
        config = cls()
        port = os.environ.get("PORT")
        if port:
            try:
                config.port = int(port)
            except ValueError as exc:
                raise ValueError(f"PORT must be an integer, got {port!r}") from exc
        corpus = os.environ.get("SHAKESEARCH_CORPUS")
        if corpus:
            config.corpus_path = Path(corpus)
        return config

    def resolve_corpus_path(self, base_dir: Path | None = None) -> Path:
        if Path(self.corpus_path).is_absolute() or base_dir is None:
            return Path(self.corpus_path)
        return base_dir / self.corpus_path
