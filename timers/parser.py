from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

ACTION_ALIASES = {
    "help": "help",
    "?": "help",
    "add": "add",
    "pomodoro": "pomodoro",
    "list": "list",
    "cancel": "cancel",
    "exit": "exit",
    "quit": "exit",
}

ADD_USAGE = "Использование: add <минуты> <название>"
CANCEL_USAGE = "Использование: cancel <id>"
UNKNOWN_COMMAND = "Неизвестная команда. Напишите help."

_AMOUNT_RE = re.compile(r"^(\d+)([smh]?)$")


@dataclass
class TimerCommand:
    action: str
    duration_seconds: Optional[float] = None
    label: str = ""
    timer_id: Optional[int] = None
    error: Optional[str] = None
    raw_text: str = ""


def parse_command(text: str, unit_seconds: float = 60.0) -> Optional[TimerCommand]:
    """Parse one console line. Returns None for a blank line."""

    cleaned = text.strip()
    if not cleaned:
        return None
    head, _, rest = cleaned.partition(" ")
    rest = rest.strip()
    action = ACTION_ALIASES.get(head.lower())

    if action is None:
        return TimerCommand(action="unknown", error=UNKNOWN_COMMAND, raw_text=cleaned)

    if action == "add":
        amount, _, label = rest.partition(" ")
        seconds = _parse_amount(amount, unit_seconds)
        if seconds is None:
            return TimerCommand(action="invalid", error=ADD_USAGE, raw_text=cleaned)
        return TimerCommand(action="add", duration_seconds=seconds, label=label.strip(), raw_text=cleaned)

    if action == "pomodoro":
        return TimerCommand(action="pomodoro", label=rest, raw_text=cleaned)

    if action == "cancel":
        timer_id = _parse_int(rest.split(" ", 1)[0])
        if timer_id is None:
            return TimerCommand(action="invalid", error=CANCEL_USAGE, raw_text=cleaned)
        return TimerCommand(action="cancel", timer_id=timer_id, raw_text=cleaned)

    return TimerCommand(action=action, raw_text=cleaned)


def _parse_amount(token: str, unit_seconds: float) -> Optional[float]:
    # Bare numbers are user units (minutes); s/m/h suffixes are explicit.
    match = _AMOUNT_RE.match(token.lower())
    if not match:
        return None
    value = int(match.group(1))
    if value <= 0:
        return None
    suffix = match.group(2)
    if suffix == "s":
        return float(value)
    if suffix == "m":
        return float(value * 60)
    if suffix == "h":
        return float(value * 3600)
    return value * unit_seconds


def _parse_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None
