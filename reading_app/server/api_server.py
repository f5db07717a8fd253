"""FastAPI server that exposes the passage catalog read-only."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel
import uvicorn

from reading_app.constants.about import APP_NAME, APP_VERSION
from reading_app.constants.assessment_constants import DEFAULT_PAGE_SIZE
from reading_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from reading_app.core.markdown_renderer import renderer
from reading_app.core.models import Difficulty, Passage
from reading_app.core.services.content_repository import ContentRepository

logger = logging.getLogger(__name__)


class PassageSummary(BaseModel):
    """Catalog entry as listed by the browse endpoint."""

    id: str
    title: str
    difficulty: Difficulty
    time_limit_minutes: int
    word_count: int
    question_count: int


class OptionView(BaseModel):
    id: str
    text: str


class QuestionView(BaseModel):
    id: str
    prompt: str
    options: list[OptionView]


class PassageDetail(PassageSummary):
    """Full passage without any correctness information."""

    content_html: str
    questions: list[QuestionView]


class CatalogPageView(BaseModel):
    items: list[PassageSummary]
    page: int
    page_size: int
    total: int
    page_count: int


def _summarize(passage: Passage) -> dict[str, object]:
    return {
        "id": passage.id,
        "title": passage.title,
        "difficulty": passage.difficulty,
        "time_limit_minutes": passage.time_limit_minutes,
        "word_count": passage.word_count,
        "question_count": len(passage.questions),
    }


def _get_repository_dependency(repository: ContentRepository):
    def dependency() -> ContentRepository:
        return repository

    return dependency


def create_api_app(repository: ContentRepository) -> FastAPI:
    """Create a FastAPI application wired to the provided repository."""
    app = FastAPI(title=f"{APP_NAME} Catalog API", version=APP_VERSION)
    repository_dep = _get_repository_dependency(repository)

    @app.get("/passages", response_model=CatalogPageView)
    def list_passages(
        q: str = "",
        difficulty: Difficulty | None = None,
        page: int = Query(default=1, ge=1),
        page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=100),
        repo: ContentRepository = Depends(repository_dep),
    ) -> dict[str, object]:
        result = repo.browse(q, difficulty, page, page_size)
        return {
            "items": [_summarize(passage) for passage in result.items],
            "page": result.page,
            "page_size": result.page_size,
            "total": result.total,
            "page_count": result.page_count,
        }

    @app.get("/passages/{passage_id}", response_model=PassageDetail)
    def get_passage(
        passage_id: str,
        repo: ContentRepository = Depends(repository_dep),
    ) -> dict[str, object]:
        passage = repo.get_passage(passage_id)
        if passage is None:
            raise HTTPException(status_code=404, detail=f"Passage '{passage_id}' not found.")
        return {
            **_summarize(passage),
            "content_html": renderer.render_fragment(passage.content),
            "questions": [
                {
                    "id": question.id,
                    "prompt": question.prompt,
                    "options": [{"id": option.id, "text": option.text} for option in question.options],
                }
                for question in passage.questions
            ],
        }

    return app


def start_api_server(
    repository: ContentRepository,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(repository)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="CatalogApiServer", daemon=True)
    thread.start()
    logger.info("Catalog API listening on %s:%d", host, port)
    return thread
