"""Derived statistics shown on the results screen for a single attempt."""

from __future__ import annotations

from dataclasses import dataclass

from reading_app.constants.assessment_constants import SCORE_BANDS
from reading_app.core.models import AttemptRecord, Passage, Question


def score_band(score: int) -> tuple[str, str]:
    """Return the (title, message) pair for a percentage score."""
    for minimum, title, message in SCORE_BANDS:
        if score >= minimum:
            return title, message
    _, title, message = SCORE_BANDS[-1]
    return title, message


def format_duration(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes}m {secs}s"


def grade_points(score: int) -> float:
    """Map a percentage onto a 4.0 scale."""
    return round(score / 25, 2)


@dataclass(frozen=True, slots=True)
class QuestionReview:
    """Per-question outcome listed under the detailed analysis."""

    prompt: str
    selected_text: str | None
    correct_text: str
    is_correct: bool

    @classmethod
    def from_answer(cls, question: Question, selected_id: str | None) -> QuestionReview:
        selected = question.find_option(selected_id) if selected_id is not None else None
        correct = next(option for option in question.options if option.is_correct)
        return cls(
            prompt=question.prompt,
            selected_text=selected.text if selected is not None else None,
            correct_text=correct.text,
            is_correct=selected_id == correct.id,
        )


@dataclass(frozen=True, slots=True)
class ResultsSummary:
    """Immutable snapshot returned to the results view."""

    passage_id: str
    passage_title: str
    score: int
    title: str
    message: str
    answered_count: int
    total_questions: int
    time_spent: str
    grade_points: float
    reviews: tuple[QuestionReview, ...] = ()

    @classmethod
    def from_attempt(cls, attempt: AttemptRecord, passage: Passage | None = None) -> ResultsSummary:
        title, message = score_band(attempt.score)
        reviews: tuple[QuestionReview, ...] = ()
        if passage is not None:
            reviews = tuple(
                QuestionReview.from_answer(question, attempt.answers.get(question.id))
                for question in passage.questions
            )
        return cls(
            passage_id=attempt.passage_id,
            passage_title=passage.title if passage is not None else attempt.passage_id,
            score=attempt.score,
            title=title,
            message=message,
            answered_count=attempt.answered_count,
            total_questions=attempt.total_questions,
            time_spent=format_duration(attempt.time_spent_seconds),
            grade_points=grade_points(attempt.score),
            reviews=reviews,
        )

    @property
    def answered_label(self) -> str:
        return f"{self.answered_count}/{self.total_questions}"

    @property
    def grade_label(self) -> str:
        return f"{self.grade_points:g}/4.0"
