"""Tests for the countdown timer, by manual ticks and on the Qt event loop"""
import pytest
from PySide6.QtCore import QEventLoop, QTimer

from conftest import make_passage
from reading_app.core.models import SessionStatus, TimerLevel
from reading_app.core.services.assessment_session import SessionEngine
from reading_app.core.services.countdown_timer import CountdownTimer, format_clock, timer_level


@pytest.fixture
def timer():
    countdown = CountdownTimer()
    yield countdown
    countdown.pause()


def _record(timer):
    events = {"ticked": [], "time_up": 0}

    def on_time_up():
        events["time_up"] += 1

    timer.ticked.connect(lambda remaining: events["ticked"].append(remaining))
    timer.time_up.connect(on_time_up)
    return events


@pytest.mark.parametrize("minutes", [1, 3])
def test_full_countdown_fires_time_up_once(timer, minutes):
    events = _record(timer)
    timer.start(minutes * 60)

    for _ in range(minutes * 60):
        timer.tick()
    # Extra ticks after expiry must not fire again.
    for _ in range(5):
        timer.tick()

    assert events["time_up"] == 1
    assert timer.remaining_seconds() == 0
    assert timer.has_expired()
    assert not timer.is_running()
    assert events["ticked"][0] == minutes * 60
    assert events["ticked"][-1] == 0


def test_pause_preserves_remaining_time(timer):
    timer.start(120)
    for _ in range(10):
        timer.tick()
    timer.pause()

    for _ in range(30):
        timer.tick()
    assert timer.remaining_seconds() == 110

    timer.resume()
    timer.tick()
    assert timer.remaining_seconds() == 109


def test_resume_after_expiry_is_ignored(timer):
    timer.start(1)
    timer.tick()
    timer.resume()
    assert not timer.is_running()
    assert timer.has_expired()


def test_restart_resets_state(timer):
    events = _record(timer)
    timer.start(2)
    timer.tick()
    timer.tick()
    assert events["time_up"] == 1

    timer.start(5)
    assert timer.remaining_seconds() == 5
    assert timer.is_running()
    assert not timer.has_expired()

    timer.start(5)
    timer.tick()
    assert timer.remaining_seconds() == 4


def test_start_rejects_non_positive_duration(timer):
    with pytest.raises(ValueError):
        timer.start(0)


@pytest.mark.parametrize(
    "remaining, level",
    [(301, TimerLevel.NORMAL), (300, TimerLevel.WARNING), (61, TimerLevel.WARNING),
     (60, TimerLevel.CRITICAL), (0, TimerLevel.CRITICAL)],
)
def test_timer_level_thresholds(remaining, level):
    assert timer_level(remaining) is level


@pytest.mark.parametrize(
    "seconds, text",
    [(0, "00:00"), (59, "00:59"), (600, "10:00"), (3725, "62:05"), (-3, "00:00")],
)
def test_format_clock(seconds, text):
    assert format_clock(seconds) == text


def _spin_event_loop(milliseconds, stop_signal=None):
    loop = QEventLoop()
    if stop_signal is not None:
        stop_signal.connect(lambda *_args: loop.quit())
    QTimer.singleShot(milliseconds, loop.quit)
    loop.exec()


def test_restart_keeps_single_tick_source():
    timer = CountdownTimer(interval_ms=10)
    events = _record(timer)
    timer.start(5)
    timer.start(5)

    _spin_event_loop(300)

    assert events["time_up"] == 1
    assert timer.remaining_seconds() == 0
    assert events["ticked"] == [5, 5, 4, 3, 2, 1, 0]


def test_session_auto_submits_from_running_timer(clock):
    timer = CountdownTimer(interval_ms=10)
    engine = SessionEngine(timer, clock=clock)
    completed = []
    engine.attempt_completed.connect(lambda record: completed.append(record))
    passage = make_passage(question_count=5, time_limit_minutes=1)
    engine.begin_loading(passage.id)
    engine.activate(passage)

    _spin_event_loop(5000, stop_signal=engine.attempt_completed)
    _spin_event_loop(50)

    assert engine.status is SessionStatus.ENDED
    assert len(completed) == 1
    assert completed[0].score == 0
    assert timer.remaining_seconds() == 0
