"""Utilities for loading the passage catalog from static storage.

Catalog format (``essays.json`` in the data directory):

    {
      "essays": [
        {
          "id": "e1",
          "title": "The Paradox of Choice",
          "contentFile": "passages/e1.txt",      (or "content": "inline text")
          "wordCount": 640,
          "difficulty": "Easy" | "Medium" | "Hard",
          "timeLimit": 12,                       (minutes)
          "createdAt": "2024-05-01T00:00:00Z",
          "questions": [
            {
              "id": "q1",
              "question": "What is the author's main claim?",
              "options": [
                {"id": "a", "text": "...", "isCorrect": true},
                {"id": "b", "text": "...", "isCorrect": false}
              ]
            }
          ]
        }
      ]
    }

Architecture note:
    The schema models below only check the *shape* of the document. Whether a
    passage is usable for a scored session (questions present, one correct
    option each) is decided later by ``validate_passage`` so that a single bad
    entry does not take the whole catalog down with it. Body text referenced
    through ``contentFile`` is read lazily by the repository, mirroring the
    secondary fetch of the web version of this catalog.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reading_app.constants.assessment_constants import CATALOG_FILE_NAME
from reading_app.core.models import Difficulty, Option, Passage, Question

logger = logging.getLogger(__name__)


class PassageLoadError(Exception):
    """Raised when the passage catalog cannot be read or parsed."""


class OptionDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    is_correct: bool = Field(default=False, alias="isCorrect")


class QuestionDocument(BaseModel):
    id: str
    question: str
    options: list[OptionDocument]


class PassageDocument(BaseModel):
    """Schema of one catalog entry as stored on disk."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str | None = None
    content_file: str | None = Field(default=None, alias="contentFile")
    word_count: int = Field(default=0, alias="wordCount")
    difficulty: Difficulty
    time_limit: int = Field(alias="timeLimit")
    created_at: datetime = Field(alias="createdAt")
    questions: list[QuestionDocument] = Field(default_factory=list)

    def to_passage(self) -> Passage:
        return Passage(
            id=self.id,
            title=self.title.strip(),
            difficulty=self.difficulty,
            time_limit_minutes=self.time_limit,
            created_at=self.created_at,
            questions=tuple(
                Question(
                    id=question.id,
                    prompt=question.question.strip(),
                    options=tuple(
                        Option(id=option.id, text=option.text.strip(), is_correct=option.is_correct)
                        for option in question.options
                    ),
                )
                for question in self.questions
            ),
            content=self.content or "",
            content_file=self.content_file,
            word_count=self.word_count,
        )


class CatalogDocument(BaseModel):
    essays: list[PassageDocument]


def load_catalog(data_dir: Path) -> list[Passage]:
    """Read and parse ``essays.json`` from ``data_dir``."""
    catalog_path = data_dir / CATALOG_FILE_NAME
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PassageLoadError(f"Unable to read catalog at {catalog_path}: {exc}") from exc
    return parse_catalog(text)


def parse_catalog(text: str) -> list[Passage]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PassageLoadError(f"Catalog is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc

    try:
        document = CatalogDocument.model_validate(raw)
    except ValidationError as exc:
        raise PassageLoadError(f"Catalog does not match the passage schema: {exc}") from exc

    passages = [entry.to_passage() for entry in document.essays]
    seen: set[str] = set()
    for passage in passages:
        if passage.id in seen:
            raise PassageLoadError(f"Duplicate passage id '{passage.id}' in catalog.")
        seen.add(passage.id)
    logger.info("Parsed %d passages from catalog", len(passages))
    return passages


def read_content_file(data_dir: Path, content_file: str) -> str | None:
    """Return the body text referenced by ``content_file`` or None when unreadable."""
    root = data_dir.resolve()
    content_path = (root / content_file).resolve()
    if not content_path.is_relative_to(root):
        logger.warning("Refusing passage content outside %s: %s", root, content_file)
        return None
    try:
        return content_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to load passage content from %s: %s", content_path, exc)
        return None
