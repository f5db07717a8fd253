"""Business logic facade shared by the Qt views."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from PySide6.QtCore import QObject, QTimer, Signal

from reading_app.core.models import (
    AttemptRecord,
    CatalogPage,
    Difficulty,
    OptionStatus,
    Passage,
    SessionStatus,
    TimerLevel,
)
from reading_app.core.scoring import MalformedPassageError
from reading_app.core.services.assessment_session import SessionEngine, utc_now
from reading_app.core.services.content_repository import ContentRepository
from reading_app.core.services.countdown_timer import CountdownTimer

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], None]


def _schedule_on_event_loop(callback: Callable[[], None]) -> None:
    QTimer.singleShot(0, callback)


class AssessmentManager(QObject):
    """Facade for assessment services: Repository, SessionEngine and CountdownTimer."""

    load_failed = Signal(str)

    def __init__(
        self,
        repository: ContentRepository,
        scheduler: Scheduler = _schedule_on_event_loop,
        clock: Callable[[], datetime] = utc_now,
        timer: CountdownTimer | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._repository = repository
        self._scheduler = scheduler
        self.timer = timer if timer is not None else CountdownTimer(parent=self)
        self.engine = SessionEngine(self.timer, clock=clock, parent=self)

    # --- Catalog Delegation ---

    def browse(
        self,
        query: str = "",
        difficulty: Difficulty | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> CatalogPage:
        if page_size is None:
            return self._repository.browse(query, difficulty, page)
        return self._repository.browse(query, difficulty, page, page_size)

    def has_passages(self) -> bool:
        return self._repository.has_passages()

    def get_passage(self, passage_id: str) -> Passage | None:
        return self._repository.get_passage(passage_id)

    # --- Session Delegation ---

    def open_passage(self, passage_id: str) -> None:
        """Enter the loading state and fetch the passage on the next loop turn."""
        logger.info("Opening passage '%s'", passage_id)
        self.engine.begin_loading(passage_id)
        self._scheduler(lambda: self._complete_loading(passage_id))

    def _complete_loading(self, passage_id: str) -> None:
        if self.engine.pending_passage_id != passage_id:
            return
        passage = self._repository.get_passage(passage_id)
        if passage is None:
            self.engine.mark_unavailable(passage_id)
            return
        try:
            self.engine.activate(passage)
        except MalformedPassageError as exc:
            logger.error("Passage '%s' rejected: %s", passage_id, exc)
            self.load_failed.emit(str(exc))

    def select_answer(self, question_id: str, option_id: str) -> bool:
        return self.engine.select_answer(question_id, option_id)

    def can_submit(self) -> bool:
        return self.engine.can_submit()

    def submit(self) -> AttemptRecord:
        return self.engine.submit()

    def retake(self) -> None:
        self.engine.reset()

    def leave(self) -> None:
        self.engine.close()

    def option_status(self, question_id: str, option_id: str) -> OptionStatus:
        return self.engine.option_status(question_id, option_id)

    def status(self) -> SessionStatus:
        return self.engine.status

    def current_passage(self) -> Passage | None:
        return self.engine.passage

    def answered_count(self) -> int:
        return len(self.engine.answers())

    def selected_option(self, question_id: str) -> str | None:
        return self.engine.selected_option(question_id)

    def remaining_seconds(self) -> int:
        return self.timer.remaining_seconds()

    def timer_level(self) -> TimerLevel:
        return self.timer.level()
