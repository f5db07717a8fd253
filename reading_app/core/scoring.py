"""Passage validation and attempt scoring rules."""

from __future__ import annotations

from typing import Mapping

from reading_app.core.models import Passage, Question


class MalformedPassageError(ValueError):
    """Raised when a passage cannot be used for a scored session."""


def validate_passage(passage: Passage) -> None:
    """Reject passages that would make scoring meaningless."""
    if not passage.questions:
        raise MalformedPassageError(f"Passage '{passage.id}' has no questions.")
    if passage.time_limit_minutes <= 0:
        raise MalformedPassageError(f"Passage '{passage.id}' must have a positive time limit.")
    for question in passage.questions:
        correct = question.correct_option_ids()
        if len(correct) != 1:
            raise MalformedPassageError(
                f"Question '{question.id}' of passage '{passage.id}' has {len(correct)} "
                "correct options; exactly one is required."
            )


def count_correct(questions: tuple[Question, ...], answers: Mapping[str, str]) -> int:
    matches = 0
    for question in questions:
        selected = answers.get(question.id)
        if selected is None:
            continue
        if selected in question.correct_option_ids():
            matches += 1
    return matches


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, halves up."""
    return (2 * numerator + denominator) // (2 * denominator)


def compute_score(questions: tuple[Question, ...], answers: Mapping[str, str]) -> int:
    """Return the integer percentage of correctly answered questions."""
    total = len(questions)
    if total == 0:
        raise MalformedPassageError("Cannot score a passage without questions.")
    return round_half_up(100 * count_correct(questions, answers), total)
