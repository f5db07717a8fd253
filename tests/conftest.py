import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from PySide6.QtCore import QCoreApplication

from reading_app.core.models import Difficulty, Option, Passage, Question
from reading_app.core.services.content_repository import ContentRepository


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


class ManualScheduler:
    """Collects deferred callbacks until the test runs them."""

    def __init__(self):
        self.pending = []

    def __call__(self, callback):
        self.pending.append(callback)

    def run_all(self):
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback()


def make_question(question_id, correct="a", option_ids=("a", "b", "c", "d")):
    return Question(
        id=question_id,
        prompt=f"Prompt for {question_id}",
        options=tuple(
            Option(id=option_id, text=f"Option {option_id}", is_correct=option_id == correct)
            for option_id in option_ids
        ),
    )


def make_passage(
    passage_id="p1",
    question_count=4,
    time_limit_minutes=10,
    title="Sample Passage",
    difficulty=Difficulty.MEDIUM,
    content="Body text of the sample passage.",
):
    return Passage(
        id=passage_id,
        title=title,
        difficulty=difficulty,
        time_limit_minutes=time_limit_minutes,
        created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        questions=tuple(make_question(f"q{index}") for index in range(1, question_count + 1)),
        content=content,
    )


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Provide a Qt core application for QObject and QTimer usage"""
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def sample_passage():
    return make_passage()


@pytest.fixture
def repository():
    """Repository with three passages across all difficulties"""
    return ContentRepository(
        [
            make_passage("e1", title="The Paradox of Choice", difficulty=Difficulty.EASY,
                         content="Too many jams on the table."),
            make_passage("e2", title="Cities and the Night Sky", difficulty=Difficulty.MEDIUM,
                         content="Light pollution hides the Milky Way."),
            make_passage("e3", title="The Ethics of Memory", difficulty=Difficulty.HARD,
                         content="Societies remember selectively."),
        ]
    )


@pytest.fixture
def catalog_json():
    """Minimal catalog document with one inline and one external passage"""
    return """
    {
      "essays": [
        {
          "id": "inline",
          "title": "  Inline Passage ",
          "content": "Inline body.",
          "wordCount": 2,
          "difficulty": "Easy",
          "timeLimit": 3,
          "createdAt": "2024-05-01T00:00:00Z",
          "questions": [
            {
              "id": "q1",
              "question": "Which one?",
              "options": [
                {"id": "a", "text": "Right", "isCorrect": true},
                {"id": "b", "text": "Wrong"}
              ]
            }
          ]
        },
        {
          "id": "external",
          "title": "External Passage",
          "contentFile": "passages/external.txt",
          "difficulty": "Hard",
          "timeLimit": 5,
          "createdAt": "2024-06-01T00:00:00Z",
          "questions": []
        }
      ]
    }
    """
