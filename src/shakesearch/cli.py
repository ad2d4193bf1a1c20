"""Command line interface for ShakeSearch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shakesearch.config import AppConfig
from shakesearch.index.search import Searcher
from shakesearch.index.titles import StructureNotFoundError
from shakesearch.ingestion.corpus_loader import CorpusLoadError
from shakesearch.models import UNRESOLVED
from shakesearch.utils.text import CorpusEncodingError

console = Console()
app = typer.Typer(help="ShakeSearch - substring search over the complete works of Shakespeare")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_searcher(config: AppConfig) -> Searcher:
    corpus_path = config.resolve_corpus_path(Path.cwd())
    try:
        return Searcher.load(corpus_path, config)
    except (CorpusLoadError, CorpusEncodingError, StructureNotFoundError) as exc:
        console.print(f"[red]Failed to load corpus {escape(str(corpus_path))}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _build_config(corpus: Optional[Path], strict_ascii: bool = False) -> AppConfig:
    try:
        config = AppConfig.from_env()
    except ValueError as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    if corpus is not None:
        config.corpus_path = corpus
    config.strict_ascii = strict_ascii
    return config


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to search for"),
    corpus: Path = typer.Option(None, "--corpus", help="Corpus text file"),
    limit: int = typer.Option(20, help="Number of results to display"),
    strict_ascii: bool = typer.Option(False, "--strict-ascii", help="Reject non-ASCII letters"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Run a case-insensitive substring search."""
    _setup_logging(verbose)
    searcher = _load_searcher(_build_config(corpus, strict_ascii))

    results = searcher.search(query)
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Offset")
    table.add_column("Title")
    table.add_column("Snippet")

    for result in results[:limit]:
        snippet = " ".join(result.text.split())
        table.add_row(str(result.offset), result.title or "-", snippet[:180])

    console.print(table)
    console.print(f"Showing {min(limit, len(results))} of {len(results)} matches.")


@app.command()
def titles(
    corpus: Path = typer.Option(None, "--corpus", help="Corpus text file"),
    strict_ascii: bool = typer.Option(False, "--strict-ascii", help="Reject non-ASCII letters"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the titles from the table of contents and where each work starts."""
    _setup_logging(verbose)
    searcher = _load_searcher(_build_config(corpus, strict_ascii))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Title")
    table.add_column("Start")

    for number, (title, start) in enumerate(zip(searcher.titles, searcher.content_starts), 1):
        table.add_row(str(number), title, "unresolved" if start == UNRESOLVED else str(start))

    console.print(table)


@app.command()
def serve(
    corpus: Path = typer.Option(None, "--corpus", help="Corpus text file"),
    host: str = typer.Option(None, help="Host interface"),
    port: int = typer.Option(None, help="Server port (defaults to $PORT or 3001)"),
    strict_ascii: bool = typer.Option(False, "--strict-ascii", help="Reject non-ASCII letters"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Load the corpus and start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from shakesearch.web.app import create_app

    _setup_logging(verbose)
    config = _build_config(corpus, strict_ascii)
    if host is not None:
        config.host = host
    if port is not None:
        config.port = port

    searcher = _load_searcher(config)
    console.print(f"Listening on http://{config.host}:{config.port} ...")
    uvicorn.run(
        create_app(searcher),
        host=config.host,
        port=config.port,
        reload=False,
        log_level="debug" if verbose else "info",
    )
