from __future__ import annotations

import logging
import sys
from threading import Lock
from typing import Iterable, Iterator, Optional, TextIO

from time_utils import format_duration

from .models import EventKind, TimerEvent, TimerReport, TimerStatus
from .sounds import ChimePlayer

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "Активных/завершённых таймеров нет."


class Console:
    """Serializes writes from timer workers and the interactive loop."""

    def __init__(self, stream: Optional[TextIO] = None, chime: Optional[ChimePlayer] = None):
        self.stream = stream or sys.stdout
        self.chime = chime
        self._lock = Lock()

    def write(self, text: str) -> None:
        with self._lock:
            self.stream.write(text)
            self.stream.flush()

    def print(self, text: str) -> None:
        self.write(text + "\n")

    def prompt(self) -> None:
        self.write("> ")

    def notify(self, event: TimerEvent) -> None:
        self.print(format_event(event))
        if event.kind is EventKind.DONE and self.chime:
            self.chime.play()


def format_event(event: TimerEvent) -> str:
    if event.kind is EventKind.ADD:
        return f'[ADD]  #{event.timer_id} "{event.label}" на {format_duration(event.duration)}'
    if event.kind is EventKind.DONE:
        return f'[DONE]  #{event.timer_id} "{event.label}"'
    return f'[CANCEL] #{event.timer_id} "{event.label}"'


def format_status(report: TimerReport) -> str:
    if report.status is TimerStatus.CANCELLED:
        return "[CANCELLED]"
    if report.status is TimerStatus.DONE:
        return "[DONE]"
    if report.status is TimerStatus.PENDING_DONE:
        return "[PENDING DONE]"
    return f"[RUNNING, осталось {format_duration(report.remaining or 0)}]"


def iter_report_lines(reports: Iterable[TimerReport]) -> Iterator[str]:
    yield "Таймеры:"
    for report in reports:
        yield f'  #{report.id} "{report.label}" {format_status(report)}'


def format_report(reports: list[TimerReport]) -> str:
    if not reports:
        return EMPTY_LIST_TEXT
    return "\n".join(iter_report_lines(reports))
