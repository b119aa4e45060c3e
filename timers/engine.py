from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from config import DEFAULT_LABEL, Config
from time_utils import MonotonicClock

from .context import EngineContext
from .errors import InvalidDurationError
from .models import TimerEvent, TimerReport
from .registry import TimerRegistry
from .shutdown import ShutdownCoordinator

logger = logging.getLogger(__name__)


class TimerEngine:
    def __init__(
        self,
        poll_interval: float = 1.0,
        on_event: Optional[Callable[[TimerEvent], None]] = None,
        clock: Optional[MonotonicClock] = None,
        default_label: str = DEFAULT_LABEL,
        unit_seconds: float = 60.0,
        pomodoro_work_units: int = 25,
        pomodoro_break_units: int = 5,
    ):
        self.context = EngineContext(clock=clock, poll_interval=poll_interval, on_event=on_event)
        self.registry = TimerRegistry(self.context, default_label=default_label)
        self.coordinator = ShutdownCoordinator(self.context, self.registry)
        self.unit_seconds = unit_seconds
        self.pomodoro_work_units = pomodoro_work_units
        self.pomodoro_break_units = pomodoro_break_units

    def create_timer(self, duration: float, label: str = "") -> int:
        return self.registry.create(duration, label).id

    def create_pomodoro_pair(self, label: str) -> Tuple[int, int]:
        work = self.pomodoro_work_units * self.unit_seconds
        rest = self.pomodoro_break_units * self.unit_seconds
        # Neither timer starts unless both lengths are valid.
        for duration in (work, rest):
            if duration <= 0:
                raise InvalidDurationError(duration)
        work_id = self.create_timer(work, f"Work: {label}")
        break_id = self.create_timer(rest, f"Break after: {label}")
        return work_id, break_id

    def list_timers(self) -> List[TimerReport]:
        return self.registry.list()

    def cancel_timer(self, timer_id: int) -> int:
        return self.registry.cancel(timer_id).id

    def shutdown(self) -> None:
        self.coordinator.shutdown()

    @property
    def running(self) -> bool:
        return self.context.running


def build_engine(config: Config, on_event: Optional[Callable[[TimerEvent], None]] = None) -> TimerEngine:
    logger.info(
        "Timer engine ready (poll=%.3fs, unit=%.0fs, pomodoro=%s+%s)",
        config.poll_interval,
        config.unit_seconds,
        config.pomodoro_work_units,
        config.pomodoro_break_units,
    )
    return TimerEngine(
        poll_interval=config.poll_interval,
        on_event=on_event,
        default_label=config.default_label,
        unit_seconds=config.unit_seconds,
        pomodoro_work_units=config.pomodoro_work_units,
        pomodoro_break_units=config.pomodoro_break_units,
    )
