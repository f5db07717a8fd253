"""Service for looking up and browsing the loaded passage catalog."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from threading import Lock

from reading_app.constants.assessment_constants import DEFAULT_PAGE_SIZE
from reading_app.core.models import CatalogPage, Difficulty, Passage
from reading_app.core.passage_loader import load_catalog, read_content_file

logger = logging.getLogger(__name__)


class ContentRepository:
    """Read-only store of passages, resolving external body text on fetch."""

    def __init__(self, passages: list[Passage] | None = None, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir
        self._passages: dict[str, Passage] = {}
        self._resolved: dict[str, Passage] = {}
        self._lock = Lock()
        for passage in passages or []:
            self._passages[passage.id] = passage

    @classmethod
    def from_directory(cls, data_dir: Path) -> ContentRepository:
        """Build a repository from ``essays.json``; raises PassageLoadError."""
        return cls(load_catalog(data_dir), data_dir=data_dir)

    def list_passages(self) -> list[Passage]:
        return list(self._passages.values())

    def has_passages(self) -> bool:
        return bool(self._passages)

    def get_passage(self, passage_id: str) -> Passage | None:
        """Return the fully resolved passage, or None when the id is unknown."""
        passage = self._passages.get(passage_id)
        if passage is None:
            logger.warning("Passage '%s' not found in catalog", passage_id)
            return None
        return self._resolve(passage)

    def _resolve(self, passage: Passage) -> Passage:
        with self._lock:
            cached = self._resolved.get(passage.id)
            if cached is not None:
                return cached

            resolved = passage
            if passage.content_file and self._data_dir is not None:
                content = read_content_file(self._data_dir, passage.content_file)
                if content is not None:
                    resolved = replace(passage, content=content)
            self._resolved[passage.id] = resolved
            return resolved

    def browse(
        self,
        query: str = "",
        difficulty: Difficulty | None = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> CatalogPage:
        """Search, filter and paginate the resolved catalog. Pages are 1-based and clamped."""
        if page_size <= 0:
            raise ValueError("Page size must be a positive integer.")

        needle = query.strip().casefold()
        matches = [
            passage
            for passage in map(self._resolve, self._passages.values())
            if (difficulty is None or passage.difficulty is difficulty)
            and (not needle or needle in passage.title.casefold() or needle in passage.content.casefold())
        ]

        total = len(matches)
        page_count = max(1, (total + page_size - 1) // page_size)
        page = min(max(1, page), page_count)
        start = (page - 1) * page_size
        return CatalogPage(
            items=matches[start:start + page_size],
            page=page,
            page_size=page_size,
            total=total,
        )
