from __future__ import annotations

import logging
from threading import Event
from typing import Callable, Optional

from time_utils import MonotonicClock

from .models import TimerEvent

logger = logging.getLogger(__name__)


class EngineContext:
    """State shared by every engine component: clock, run flag, poll step and event sink."""

    def __init__(
        self,
        clock: Optional[MonotonicClock] = None,
        poll_interval: float = 1.0,
        on_event: Optional[Callable[[TimerEvent], None]] = None,
    ):
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self.clock = clock or MonotonicClock()
        self.poll_interval = poll_interval
        self.on_event = on_event
        self._stop_event = Event()

    @property
    def running(self) -> bool:
        return not self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()

    def emit(self, event: TimerEvent) -> None:
        if not self.on_event:
            return
        try:
            self.on_event(event)
        except Exception:
            logger.error("on_event callback failed for %s", event, exc_info=True)
