from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


class MonotonicClock:
    """Monotonic timestamps in seconds, immune to wall-clock adjustments."""

    def now(self) -> float:
        return time.monotonic()

    @staticmethod
    def elapsed(start: float, end: float) -> float:
        return end - start

    @staticmethod
    def add(timestamp: float, duration: float) -> float:
        return timestamp + duration


def format_duration(seconds: float) -> str:
    total = int(seconds)
    if total < 0:
        total = 0
    minutes, sec = divmod(total, 60)
    if minutes > 0:
        if sec > 0:
            return f"{minutes}m{sec}s"
        return f"{minutes}m"
    return f"{sec}s"
