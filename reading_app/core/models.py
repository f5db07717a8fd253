"""Domain models for the reading assessment."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Difficulty(Enum):
    """Difficulty tier assigned to a passage."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SessionStatus(Enum):
    """Lifecycle of an assessment session."""

    IDLE = "idle"
    LOADING = "loading"
    ACTIVE = "active"
    ENDED = "ended"
    UNAVAILABLE = "unavailable"


class OptionStatus(Enum):
    """Colour-coding state of a rendered option."""

    DEFAULT = "default"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class TimerLevel(Enum):
    """Advisory urgency derived from the remaining time."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class Option:
    """One selectable answer of a question."""

    id: str
    text: str
    is_correct: bool = False


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question; exactly one option is flagged correct."""

    id: str
    prompt: str
    options: tuple[Option, ...]

    def correct_option_ids(self) -> list[str]:
        return [option.id for option in self.options if option.is_correct]

    def find_option(self, option_id: str) -> Option | None:
        return next((option for option in self.options if option.id == option_id), None)


@dataclass(frozen=True, slots=True)
class Passage:
    """Reading text plus its ordered question set."""

    id: str
    title: str
    difficulty: Difficulty
    time_limit_minutes: int
    created_at: datetime
    questions: tuple[Question, ...]
    content: str = ""
    content_file: str | None = None
    word_count: int = 0

    @property
    def time_limit_seconds(self) -> int:
        return self.time_limit_minutes * 60

    def find_question(self, question_id: str) -> Question | None:
        return next((question for question in self.questions if question.id == question_id), None)


@dataclass(frozen=True, slots=True)
class AttemptRecord:
    """Immutable outcome of one finalized session."""

    passage_id: str
    answers: Mapping[str, str]
    score: int
    total_questions: int
    time_spent_seconds: int
    completed_at: str  # ISO-8601, UTC

    def __post_init__(self) -> None:
        # Detach from the session's dict so later edits cannot leak in.
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def to_dict(self) -> dict[str, object]:
        return {
            "passageId": self.passage_id,
            "answers": dict(self.answers),
            "score": self.score,
            "totalQuestions": self.total_questions,
            "timeSpent": self.time_spent_seconds,
            "completedAt": self.completed_at,
        }


@dataclass(slots=True)
class CatalogPage:
    """One page of a catalog browse query."""

    items: list[Passage]
    page: int
    page_size: int
    total: int

    @property
    def page_count(self) -> int:
        if self.total == 0:
            return 1
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count
