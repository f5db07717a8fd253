"""Tests for the session engine state machine"""
import pytest

from conftest import make_passage
from reading_app.core.models import OptionStatus, SessionStatus
from reading_app.core.scoring import MalformedPassageError
from reading_app.core.services.assessment_session import SessionEngine, SessionStateError
from reading_app.core.services.countdown_timer import CountdownTimer


@pytest.fixture
def timer():
    countdown = CountdownTimer()
    yield countdown
    countdown.pause()


@pytest.fixture
def engine(timer, clock):
    return SessionEngine(timer, clock=clock)


def _start(engine, passage):
    engine.begin_loading(passage.id)
    assert engine.activate(passage)


def _answer_all(engine, passage, option_id="a"):
    for question in passage.questions:
        engine.select_answer(question.id, option_id)


def test_initial_state(engine):
    assert engine.status is SessionStatus.IDLE
    assert engine.passage is None
    assert engine.attempt is None
    assert not engine.can_submit()


def test_activation_starts_timer_and_clock(engine, timer, clock, sample_passage):
    statuses = []
    engine.status_changed.connect(lambda status: statuses.append(status))

    _start(engine, sample_passage)

    assert statuses == [SessionStatus.LOADING, SessionStatus.ACTIVE]
    assert engine.started_at == clock.now
    assert engine.answers() == {}
    assert timer.is_running()
    assert timer.remaining_seconds() == sample_passage.time_limit_seconds


def test_stale_passage_is_ignored(engine):
    first = make_passage("p1")
    second = make_passage("p2")
    engine.begin_loading("p1")
    engine.begin_loading("p2")

    assert not engine.activate(first)
    assert engine.status is SessionStatus.LOADING
    assert engine.activate(second)
    assert engine.passage.id == "p2"


def test_activate_outside_loading_is_ignored(engine, sample_passage):
    assert not engine.activate(sample_passage)
    assert engine.status is SessionStatus.IDLE


def test_mark_unavailable(engine):
    engine.begin_loading("missing")
    engine.mark_unavailable("other")
    assert engine.status is SessionStatus.LOADING
    engine.mark_unavailable("missing")
    assert engine.status is SessionStatus.UNAVAILABLE


def test_malformed_passage_is_rejected(engine, timer):
    broken = make_passage("broken", question_count=0)
    engine.begin_loading("broken")

    with pytest.raises(MalformedPassageError):
        engine.activate(broken)
    assert engine.status is SessionStatus.UNAVAILABLE
    assert not timer.is_running()


def test_select_answer_rules(engine, sample_passage):
    assert not engine.select_answer("q1", "a")

    _start(engine, sample_passage)
    changes = []
    engine.answers_changed.connect(lambda: changes.append(True))

    assert engine.select_answer("q1", "b")
    assert not engine.select_answer("q1", "b")
    assert engine.select_answer("q1", "a")
    assert not engine.select_answer("unknown", "a")
    # Option ids are not checked against the question.
    assert engine.select_answer("q2", "zz")

    assert engine.answers() == {"q1": "a", "q2": "zz"}
    assert engine.selected_option("q1") == "a"
    assert engine.selected_option("q3") is None
    assert len(changes) == 3


def test_can_submit_requires_every_question(engine, sample_passage):
    _start(engine, sample_passage)
    for question in sample_passage.questions[:-1]:
        engine.select_answer(question.id, "a")
        assert not engine.can_submit()
    engine.select_answer(sample_passage.questions[-1].id, "a")
    assert engine.can_submit()


def test_submit_without_session_raises(engine):
    with pytest.raises(SessionStateError):
        engine.submit()


def test_submit_builds_attempt_record(engine, timer, clock, sample_passage):
    completed = []
    engine.attempt_completed.connect(lambda record: completed.append(record))
    _start(engine, sample_passage)
    _answer_all(engine, sample_passage)
    clock.advance(29.6)

    record = engine.submit()

    assert engine.status is SessionStatus.ENDED
    assert not timer.is_running()
    assert record.passage_id == "p1"
    assert record.score == 100
    assert record.total_questions == 4
    assert record.time_spent_seconds == 30
    assert record.completed_at == "2024-05-01T12:00:29.600Z"
    assert dict(record.answers) == {"q1": "a", "q2": "a", "q3": "a", "q4": "a"}
    assert completed == [record]


def test_submit_is_idempotent(engine, timer, clock, sample_passage):
    completed = []
    engine.attempt_completed.connect(lambda record: completed.append(record))
    _start(engine, sample_passage)
    _answer_all(engine, sample_passage)
    first = engine.submit()

    pauses = []
    timer.pause = lambda: pauses.append(True)
    clock.advance(100)
    second = engine.submit()

    assert second is first
    assert first.time_spent_seconds == 0
    assert pauses == []
    assert len(completed) == 1


def test_option_status_default_before_submission(engine, sample_passage):
    _start(engine, sample_passage)
    engine.select_answer("q1", "b")
    for question in sample_passage.questions:
        for option in question.options:
            assert engine.option_status(question.id, option.id) is OptionStatus.DEFAULT


def test_option_status_after_submission(engine, timer, sample_passage):
    _start(engine, sample_passage)
    engine.select_answer("q1", "a")
    engine.select_answer("q2", "c")
    timer.time_up.emit()

    for question in sample_passage.questions:
        statuses = [engine.option_status(question.id, option.id) for option in question.options]
        assert statuses.count(OptionStatus.CORRECT) == 1
        assert statuses.count(OptionStatus.INCORRECT) <= 1
    assert engine.option_status("q2", "c") is OptionStatus.INCORRECT
    assert engine.option_status("q2", "a") is OptionStatus.CORRECT
    assert engine.option_status("q3", "b") is OptionStatus.DEFAULT
    assert engine.option_status("q1", "a") is OptionStatus.CORRECT


def test_three_of_four_correct_scores_75(engine):
    passage = make_passage(question_count=4)
    _start(engine, passage)
    engine.select_answer("q1", "a")
    engine.select_answer("q2", "a")
    engine.select_answer("q3", "a")
    engine.select_answer("q4", "d")

    record = engine.submit()

    assert record.score == 75
    assert engine.option_status("q4", "d") is OptionStatus.INCORRECT
    assert engine.option_status("q4", "a") is OptionStatus.CORRECT


def test_timeout_submits_unanswered_session(engine, timer, clock):
    passage = make_passage(question_count=5, time_limit_minutes=1)
    completed = []
    engine.attempt_completed.connect(lambda record: completed.append(record))
    _start(engine, passage)
    assert not engine.can_submit()

    for _ in range(60):
        clock.advance(1)
        timer.tick()

    assert engine.status is SessionStatus.ENDED
    assert len(completed) == 1
    record = completed[0]
    assert record.score == 0
    assert record.answered_count == 0
    assert record.time_spent_seconds == 60
    assert timer.remaining_seconds() == 0


def test_time_up_after_submission_is_ignored(engine, timer, sample_passage):
    completed = []
    engine.attempt_completed.connect(lambda record: completed.append(record))
    _start(engine, sample_passage)
    _answer_all(engine, sample_passage)
    engine.submit()

    timer.time_up.emit()

    assert len(completed) == 1
    assert engine.status is SessionStatus.ENDED


def test_time_up_while_loading_is_ignored(engine, timer):
    engine.begin_loading("p1")
    timer.time_up.emit()
    assert engine.status is SessionStatus.LOADING
    assert engine.attempt is None


def test_reset_starts_fresh_attempt(engine, timer, clock, sample_passage):
    _start(engine, sample_passage)
    engine.select_answer("q1", "b")
    for _ in range(30):
        timer.tick()
    timer.time_up.emit()
    record = engine.attempt
    snapshot = record.to_dict()

    clock.advance(45)
    engine.reset()

    assert engine.status is SessionStatus.ACTIVE
    assert engine.answers() == {}
    assert engine.attempt is None
    assert engine.started_at == clock.now
    assert timer.remaining_seconds() == sample_passage.time_limit_seconds
    assert timer.is_running()
    assert record.to_dict() == snapshot


def test_reset_without_passage_raises(engine):
    with pytest.raises(SessionStateError):
        engine.reset()


def test_close_returns_to_idle(engine, timer, sample_passage):
    _start(engine, sample_passage)
    engine.select_answer("q1", "a")
    engine.close()

    assert engine.status is SessionStatus.IDLE
    assert engine.passage is None
    assert engine.answers() == {}
    assert not timer.is_running()
