from __future__ import annotations

import logging
from threading import Thread

try:
    import winsound
except ImportError:  # pragma: no cover - non-Windows fallback
    winsound = None  # type: ignore

logger = logging.getLogger(__name__)


class ChimePlayer:
    def __init__(self, frequency: int = 880, duration_ms: int = 250, repeats: int = 2):
        self.frequency = frequency
        self.duration_ms = duration_ms
        self.repeats = max(1, repeats)

    def play(self) -> None:
        # Beep blocks for its whole duration; keep it off the worker and console threads.
        Thread(target=self._beep, name="timer-chime", daemon=True).start()

    def _beep(self) -> None:
        if not winsound:
            logger.info("Chime")
            return
        for _ in range(self.repeats):
            try:
                winsound.Beep(self.frequency, self.duration_ms)
            except RuntimeError:
                logger.debug("winsound.Beep failed")
                return
