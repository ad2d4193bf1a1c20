"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from shakesearch.config import AppConfig
from shakesearch.index.titles import TOC_PATTERN


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.corpus_path == Path("completeworks.txt")
        assert config.port == 3001
        assert config.snippet_radius == 250
        assert config.toc_pattern == TOC_PATTERN
        assert config.strict_ascii is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should pick up PORT and the corpus path from the environment."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SHAKESEARCH_CORPUS", "/data/works.txt")

        config = AppConfig.from_env()

        assert config.port == 8080
        assert config.corpus_path == Path("/data/works.txt")

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to defaults when variables are unset or empty."""
        monkeypatch.setenv("PORT", "")
        monkeypatch.delenv("SHAKESEARCH_CORPUS", raising=False)

        config = AppConfig.from_env()

        assert config.port == 3001
        assert config.corpus_path == Path("completeworks.txt")

    def test_resolve_corpus_path_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(corpus_path=Path("/absolute/works.txt"))
        assert config.resolve_corpus_path(Path("/base")) == Path("/absolute/works.txt")

    def test_resolve_corpus_path_relative_no_base(self) -> None:
        config = AppConfig(corpus_path=Path("relative/works.txt"))
        assert config.resolve_corpus_path(base_dir=None) == Path("relative/works.txt")

    def test_resolve_corpus_path_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig()
        assert config.resolve_corpus_path(Path("/project")) == Path("/project/completeworks.txt")

    def test_from_env_invalid_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should explain a non-numeric PORT."""
        monkeypatch.setenv("PORT", "abc")

        with pytest.raises(ValueError, match="PORT must be an integer"):
            AppConfig.from_env()
