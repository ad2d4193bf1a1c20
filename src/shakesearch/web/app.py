"""FastAPI application backing the ShakeSearch web UI."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from shakesearch import __version__
from shakesearch.index.search import Searcher
from shakesearch.web.frontend import STATIC_DIR
from shakesearch.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)


class TitledContentResponse(BaseModel):
    title: str
    text: str


class TitleRangeResponse(BaseModel):
    title: str
    start: int


def create_app(searcher: Searcher) -> FastAPI:
    """Build the web app around an already loaded searcher."""
    app = FastAPI(title="ShakeSearch", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.searcher = searcher
    app.include_router(frontend_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/search", response_model=List[TitledContentResponse])
    def search(request: Request, q: str | None = None) -> List[TitledContentResponse]:
        if not q:
            raise HTTPException(status_code=400, detail="missing search query in URL params")

        searcher: Searcher = request.app.state.searcher
        results = searcher.search(q)
        LOGGER.info("Search %r returned %d results", q, len(results))
        return [TitledContentResponse(title=r.title, text=r.text) for r in results]

    @app.get("/titles", response_model=List[TitleRangeResponse])
    def titles(request: Request) -> List[TitleRangeResponse]:
        searcher: Searcher = request.app.state.searcher
        return [
            TitleRangeResponse(title=title, start=start)
            for title, start in zip(searcher.titles, searcher.content_starts)
        ]

    return app
