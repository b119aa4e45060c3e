from __future__ import annotations

import itertools
import logging
from threading import Lock
from typing import Dict, List, Optional

from config import DEFAULT_LABEL

from .context import EngineContext
from .errors import EngineStoppedError, InvalidDurationError, TimerAlreadyTerminalError, TimerNotFoundError
from .models import EventKind, Timer, TimerEvent, TimerReport, TimerStatus
from .worker import TimerWorker

logger = logging.getLogger(__name__)


class TimerRegistry:
    """All timers created during the process lifetime, live and historical.

    One structural lock serializes create, list, cancel and shutdown. Workers
    never take it.
    """

    def __init__(self, context: EngineContext, default_label: str = DEFAULT_LABEL):
        self.context = context
        self.default_label = default_label

        self._timers: List[Timer] = []
        self._workers: Dict[int, TimerWorker] = {}
        self._ids = itertools.count(1)
        self._lock = Lock()

    def create(self, duration: float, label: str = "") -> Timer:
        if duration <= 0:
            logger.warning("Rejected timer with non-positive duration %s", duration)
            raise InvalidDurationError(duration)
        label = label or self.default_label
        clock = self.context.clock

        with self._lock:
            # Shutdown clears the run flag before taking this lock.
            if not self.context.running:
                raise EngineStoppedError()
            start = clock.now()
            timer = Timer(
                id=next(self._ids),
                label=label,
                duration=duration,
                start_time=start,
                end_time=clock.add(start, duration),
            )
            worker = TimerWorker(timer, self.context)
            worker.start()
            self._workers[timer.id] = worker
            self._timers.append(timer)

        logger.info("Timer #%s created for %.1fs (label=%s)", timer.id, duration, label)
        self.context.emit(TimerEvent(EventKind.ADD, timer.id, timer.label, duration))
        return timer

    def list(self) -> List[TimerReport]:
        with self._lock:
            now = self.context.clock.now()
            reports = []
            for timer in self._timers:
                status = timer.status_at(now)
                remaining = timer.end_time - now if status is TimerStatus.RUNNING else None
                reports.append(TimerReport(timer.id, timer.label, status, remaining))
            return reports

    def cancel(self, timer_id: int) -> Timer:
        with self._lock:
            timer = self._find(timer_id)
            if timer is None:
                logger.warning("Cancel requested for unknown timer #%s", timer_id)
                raise TimerNotFoundError(timer_id)
            if not timer.mark_cancelled():
                logger.warning("Cancel requested for terminal timer #%s", timer_id)
                raise TimerAlreadyTerminalError(timer_id)
            # Held under the lock: the wait is bounded by the poll step, not the remaining time.
            self._workers[timer.id].join()

        logger.info("Timer #%s cancelled (label=%s)", timer.id, timer.label)
        self.context.emit(TimerEvent(EventKind.CANCEL, timer.id, timer.label, timer.duration))
        return timer

    def stop_all(self) -> int:
        """Cancel every live timer and wait for all workers. Returns the number cancelled."""
        with self._lock:
            cancelled = sum(1 for timer in self._timers if timer.mark_cancelled())
            for worker in self._workers.values():
                worker.join()
        return cancelled

    def __len__(self) -> int:
        with self._lock:
            return len(self._timers)

    def get(self, timer_id: int) -> Timer:
        with self._lock:
            timer = self._find(timer_id)
        if timer is None:
            raise TimerNotFoundError(timer_id)
        return timer

    def _find(self, timer_id: int) -> Optional[Timer]:
        for timer in self._timers:
            if timer.id == timer_id:
                return timer
        return None
