from __future__ import annotations

import logging
from threading import Lock

from .context import EngineContext
from .registry import TimerRegistry

logger = logging.getLogger(__name__)


class ShutdownCoordinator:
    """Stops the whole engine exactly once; later calls return immediately."""

    def __init__(self, context: EngineContext, registry: TimerRegistry):
        self.context = context
        self.registry = registry
        self._lock = Lock()
        self._done = False

    @property
    def is_shut_down(self) -> bool:
        return self._done

    def shutdown(self) -> None:
        with self._lock:
            if self._done:
                return
            self.context.stop()
            cancelled = self.registry.stop_all()
            self._done = True
        logger.info("Shutdown complete (%s live timers cancelled)", cancelled)
