"""Concurrent countdown timer engine for MultiTimer."""

from .engine import TimerEngine, build_engine
from .errors import EngineStoppedError, InvalidDurationError, TimerAlreadyTerminalError, TimerError, TimerNotFoundError
from .models import EventKind, Timer, TimerEvent, TimerReport, TimerStatus
