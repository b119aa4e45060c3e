from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from threading import Event, Lock
from typing import Optional


class TimerStatus(Enum):
    RUNNING = "running"
    PENDING_DONE = "pending_done"
    DONE = "done"
    CANCELLED = "cancelled"


class EventKind(Enum):
    ADD = "add"
    DONE = "done"
    CANCEL = "cancel"


@dataclass
class Timer:
    """One countdown task.

    ``cancelled`` and ``finished`` are read without any lock. Writes go through
    ``mark_cancelled`` / ``mark_finished``, which compare-and-set under a
    per-timer lock so at most one of the two ever becomes true.
    """

    id: int
    label: str
    duration: float
    start_time: float
    end_time: float
    _stop: Event = field(default_factory=Event, repr=False, compare=False)
    _finished: Event = field(default_factory=Event, repr=False, compare=False)
    _state_lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    @property
    def live(self) -> bool:
        return not self.cancelled and not self.finished

    def mark_cancelled(self) -> bool:
        """Set ``cancelled``; returns False if the timer was already terminal."""
        with self._state_lock:
            if self._finished.is_set() or self._stop.is_set():
                return False
            self._stop.set()
            return True

    def mark_finished(self) -> bool:
        with self._state_lock:
            if self._stop.is_set() or self._finished.is_set():
                return False
            self._finished.set()
            return True

    def wait_for_stop(self, timeout: float) -> bool:
        return self._stop.wait(timeout)

    def status_at(self, now: float) -> TimerStatus:
        if self.cancelled:
            return TimerStatus.CANCELLED
        if self.finished:
            return TimerStatus.DONE
        if now >= self.end_time:
            return TimerStatus.PENDING_DONE
        return TimerStatus.RUNNING


@dataclass(frozen=True)
class TimerReport:
    id: int
    label: str
    status: TimerStatus
    remaining: Optional[float] = None


@dataclass(frozen=True)
class TimerEvent:
    kind: EventKind
    timer_id: int
    label: str
    duration: float
