"""Countdown clock that drives automatic submission."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Qt, QTimer, Signal

from reading_app.constants.assessment_constants import (
    CRITICAL_THRESHOLD_SECONDS,
    TICK_INTERVAL_MS,
    WARNING_THRESHOLD_SECONDS,
)
from reading_app.core.models import TimerLevel

logger = logging.getLogger(__name__)


def timer_level(remaining_seconds: int) -> TimerLevel:
    if remaining_seconds <= CRITICAL_THRESHOLD_SECONDS:
        return TimerLevel.CRITICAL
    if remaining_seconds <= WARNING_THRESHOLD_SECONDS:
        return TimerLevel.WARNING
    return TimerLevel.NORMAL


def format_clock(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class CountdownTimer(QObject):
    """Decrements remaining time once per second and fires ``time_up`` once.

    A single ``QTimer`` is the only tick source, so restarting or stopping can
    never leave two tick loops running.
    """

    ticked = Signal(int)
    time_up = Signal()

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._remaining: int = 0
        self._running: bool = False
        self._expired: bool = False
        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    def start(self, duration_seconds: int) -> None:
        if duration_seconds <= 0:
            raise ValueError("Countdown duration must be a positive number of seconds.")
        self._timer.stop()
        self._remaining = duration_seconds
        self._expired = False
        self._running = True
        self._timer.start()
        self.ticked.emit(self._remaining)

    def pause(self) -> None:
        self._timer.stop()
        self._running = False

    def resume(self) -> None:
        if self._running or self._expired or self._remaining <= 0:
            return
        self._running = True
        self._timer.start()

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self._running:
            return
        self._remaining -= 1
        if self._remaining > 0:
            self.ticked.emit(self._remaining)
            return

        self._remaining = 0
        self._timer.stop()
        self._running = False
        self._expired = True
        logger.info("Countdown reached zero")
        self.ticked.emit(0)
        self.time_up.emit()

    def is_running(self) -> bool:
        return self._running

    def has_expired(self) -> bool:
        return self._expired

    def remaining_seconds(self) -> int:
        return self._remaining

    def level(self) -> TimerLevel:
        return timer_level(self._remaining)
