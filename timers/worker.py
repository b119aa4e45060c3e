from __future__ import annotations

import logging
from threading import Thread, current_thread
from typing import Optional

from .context import EngineContext
from .models import EventKind, Timer, TimerEvent

logger = logging.getLogger(__name__)


class TimerWorker:
    """Drives one timer to a terminal state on its own thread."""

    def __init__(self, timer: Timer, context: EngineContext):
        self.timer = timer
        self.context = context
        self._thread: Optional[Thread] = None

    def start(self) -> None:
        self._thread = Thread(target=self._run, name=f"timer-{self.timer.id}", daemon=True)
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread and self._thread is not current_thread():
            self._thread.join(timeout)

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        timer = self.timer
        clock = self.context.clock
        logger.debug("Worker started for timer #%s", timer.id)

        # Bounded steps so cancellation and shutdown are seen within one poll interval.
        while self.context.running and not timer.cancelled:
            remaining = timer.end_time - clock.now()
            if remaining <= 0:
                break
            timer.wait_for_stop(min(remaining, self.context.poll_interval))

        if not self.context.running or timer.cancelled:
            logger.debug("Worker for timer #%s stopped before expiry", timer.id)
            return

        if not timer.mark_finished():
            return
        logger.info("Timer #%s finished (label=%s)", timer.id, timer.label)
        self.context.emit(TimerEvent(EventKind.DONE, timer.id, timer.label, timer.duration))
