from __future__ import annotations

"""
FastAPI application exposing the UI/UX kit recommender.

The knowledge base is owned by the application instance (``app.state.kb``)
rather than by module globals.  Pass one in to ``create_app`` or let the
startup hook build it from ``data_dir``::

    uvicorn "uiux_kit.api:create_app" --factory
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config import (
    CategoriesResponse,
    HealthResponse,
    RecommendRequest,
    SearchHitItem,
    SearchRequest,
    SearchResponse,
)
from .kit import generate_ui_kit
from .knowledge_base import UIUXKnowledgeBase, create_knowledge_base


def _kb(request: Request) -> UIUXKnowledgeBase:
    kb = getattr(request.app.state, "kb", None)
    if kb is None:
        raise HTTPException(status_code=500, detail="Knowledge base not loaded")
    return kb


def create_app(
    kb: Optional[UIUXKnowledgeBase] = None,
    data_dir: Union[str, Path, None] = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.kb is None:
            logger.info("Starting app warmup...")
            app.state.kb = create_knowledge_base(data_dir)
            logger.info("Warmup complete.")
        yield

    app = FastAPI(title="uiux-kit", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.kb = kb

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="healthy")

    @app.get("/categories", response_model=CategoriesResponse)
    def categories(request: Request) -> CategoriesResponse:
        return CategoriesResponse(**_kb(request).stats())

    @app.post("/recommend")
    def recommend(req: RecommendRequest, request: Request):
        query = req.query.strip()
        if not query:
            raise HTTPException(status_code=422, detail="Query must be non-empty")
        kit = generate_ui_kit(query, kb=_kb(request))
        return kit.to_dict()

    @app.post("/search", response_model=SearchResponse)
    def search(req: SearchRequest, request: Request) -> SearchResponse:
        query = req.query.strip()
        if not query:
            raise HTTPException(status_code=422, detail="Query must be non-empty")
        hits = _kb(request).search(query, req.categories, req.limit)
        return SearchResponse(
            hits=[
                SearchHitItem(doc_id=h.doc_id, score=h.score, category=h.category, record=h.record)
                for h in hits
            ]
        )

    return app
