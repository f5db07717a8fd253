"""Service owning the state of one timed assessment attempt."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from PySide6.QtCore import QObject, Signal

from reading_app.core.models import AttemptRecord, OptionStatus, Passage, SessionStatus
from reading_app.core.scoring import MalformedPassageError, compute_score, validate_passage
from reading_app.core.services.countdown_timer import CountdownTimer

logger = logging.getLogger(__name__)


class SessionStateError(RuntimeError):
    """Raised when an operation needs a loaded passage and there is none."""


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SessionEngine(QObject):
    """State machine for an attempt: idle -> loading -> active -> ended."""

    status_changed = Signal(object)
    answers_changed = Signal()
    attempt_completed = Signal(object)

    def __init__(
        self,
        timer: CountdownTimer,
        clock: Callable[[], datetime] = utc_now,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._timer = timer
        self._clock = clock
        self._status = SessionStatus.IDLE
        self._pending_id: str | None = None
        self._passage: Passage | None = None
        self._answers: dict[str, str] = {}
        self._started_at: datetime | None = None
        self._attempt: AttemptRecord | None = None
        self._timer.time_up.connect(self._handle_time_up)

    # --- Lifecycle ---

    def begin_loading(self, passage_id: str) -> None:
        self._timer.pause()
        self._pending_id = passage_id
        self._passage = None
        self._answers = {}
        self._started_at = None
        self._attempt = None
        self._set_status(SessionStatus.LOADING)

    def activate(self, passage: Passage) -> bool:
        """Start the session on a fetched passage. Stale fetches are ignored."""
        if self._status is not SessionStatus.LOADING or passage.id != self._pending_id:
            logger.debug("Ignoring passage '%s' delivered after navigation", passage.id)
            return False
        try:
            validate_passage(passage)
        except MalformedPassageError:
            self._set_status(SessionStatus.UNAVAILABLE)
            raise
        self._passage = passage
        self._start_fresh()
        return True

    def mark_unavailable(self, passage_id: str) -> None:
        if self._status is not SessionStatus.LOADING or passage_id != self._pending_id:
            return
        self._set_status(SessionStatus.UNAVAILABLE)

    def reset(self) -> None:
        """Begin a new attempt on the same passage."""
        if self._passage is None:
            raise SessionStateError("No passage loaded to retake.")
        self._start_fresh()

    def close(self) -> None:
        self._timer.pause()
        self._pending_id = None
        self._passage = None
        self._answers = {}
        self._started_at = None
        self._attempt = None
        self._set_status(SessionStatus.IDLE)

    def _start_fresh(self) -> None:
        self._answers = {}
        self._attempt = None
        self._started_at = self._clock()
        self._set_status(SessionStatus.ACTIVE)
        self._timer.start(self._passage.time_limit_seconds)
        self.answers_changed.emit()
        logger.info("Session started on passage '%s'", self._passage.id)

    # --- Answers ---

    def select_answer(self, question_id: str, option_id: str) -> bool:
        if self._status is not SessionStatus.ACTIVE:
            return False
        if self._passage.find_question(question_id) is None:
            return False
        if self._answers.get(question_id) == option_id:
            return False
        self._answers[question_id] = option_id
        self.answers_changed.emit()
        return True

    def can_submit(self) -> bool:
        if self._status is not SessionStatus.ACTIVE:
            return False
        return all(question.id in self._answers for question in self._passage.questions)

    def submit(self) -> AttemptRecord:
        """Finalize the attempt. Repeated calls return the same record."""
        if self._status is SessionStatus.ENDED:
            return self._attempt
        if self._status is not SessionStatus.ACTIVE:
            raise SessionStateError("No active session to submit.")

        self._timer.pause()
        finished_at = self._clock()
        elapsed = (finished_at - self._started_at).total_seconds()
        self._attempt = AttemptRecord(
            passage_id=self._passage.id,
            answers=self._answers,
            score=compute_score(self._passage.questions, self._answers),
            total_questions=len(self._passage.questions),
            time_spent_seconds=int(elapsed + 0.5),
            completed_at=isoformat_utc(finished_at),
        )
        self._set_status(SessionStatus.ENDED)
        logger.info(
            "Session on passage '%s' ended: score %d%% in %ds",
            self._attempt.passage_id,
            self._attempt.score,
            self._attempt.time_spent_seconds,
        )
        self.attempt_completed.emit(self._attempt)
        return self._attempt

    def _handle_time_up(self) -> None:
        if self._status is not SessionStatus.ACTIVE:
            logger.debug("Ignoring time-up in status %s", self._status.value)
            return
        logger.info("Time limit reached, submitting automatically")
        self.submit()

    # --- Queries ---

    def option_status(self, question_id: str, option_id: str) -> OptionStatus:
        if self._status is not SessionStatus.ENDED:
            return OptionStatus.DEFAULT
        question = self._passage.find_question(question_id)
        if question is None:
            return OptionStatus.DEFAULT
        option = question.find_option(option_id)
        if option is None:
            return OptionStatus.DEFAULT
        if option.is_correct:
            return OptionStatus.CORRECT
        if self._answers.get(question_id) == option_id:
            return OptionStatus.INCORRECT
        return OptionStatus.DEFAULT

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def passage(self) -> Passage | None:
        return self._passage

    @property
    def pending_passage_id(self) -> str | None:
        return self._pending_id

    @property
    def started_at(self) -> datetime | None:
        return self._started_at

    @property
    def attempt(self) -> AttemptRecord | None:
        return self._attempt

    def answers(self) -> dict[str, str]:
        return dict(self._answers)

    def selected_option(self, question_id: str) -> str | None:
        return self._answers.get(question_id)

    def _set_status(self, status: SessionStatus) -> None:
        if status is self._status:
            return
        self._status = status
        self.status_changed.emit(status)
