"""Tests for the frontend module."""

from __future__ import annotations

from shakesearch.web.frontend import STATIC_DIR, _load_template, router


class TestLoadTemplate:
    """Tests for _load_template function."""

    def test_load_template_contains_html(self) -> None:
        """Template contains valid HTML."""
        result = _load_template()
        assert "<!doctype" in result.lower()
        assert "</html>" in result.lower()

    def test_load_template_references_script(self) -> None:
        """Template loads the search script and has the search form."""
        result = _load_template()
        assert "/static/app.js" in result
        assert 'id="form"' in result
        assert "ShakeSearch" in result


class TestStaticDir:
    """Tests for the bundled static files."""

    def test_app_script_present(self) -> None:
        assert (STATIC_DIR / "app.js").is_file()


class TestRouter:
    """Tests for the frontend router."""

    def test_router_has_index_route(self) -> None:
        """Router has the index route registered."""
        routes = [route.path for route in router.routes]
        assert "/" in routes
