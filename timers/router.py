from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .console import format_report
from .engine import TimerEngine
from .errors import InvalidDurationError, TimerAlreadyTerminalError, TimerError, TimerNotFoundError
from .parser import parse_command

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Команды:\n"
    "  help                          - показать помощь\n"
    "  add <минуты> <название>      - добавить таймер (также 90s, 10m, 2h)\n"
    "  pomodoro <название>          - 25 мин работы + 5 мин перерыв\n"
    "  list                          - список таймеров\n"
    "  cancel <id>                   - отменить таймер\n"
    "  exit                          - выйти"
)


@dataclass
class CommandResult:
    handled: bool
    response_text: Optional[str] = None
    action: Optional[str] = None
    exit_requested: bool = False


class CommandRouter:
    def __init__(self, engine: TimerEngine, pomodoro_default_label: str = "Pomodoro"):
        self.engine = engine
        self.pomodoro_default_label = pomodoro_default_label

    def handle_text(self, text: str) -> Optional[CommandResult]:
        parsed = parse_command(text, unit_seconds=self.engine.unit_seconds)
        if not parsed:
            return None
        logger.debug("Command parsed: %s", parsed)

        if parsed.action in ("unknown", "invalid"):
            return CommandResult(handled=True, response_text=parsed.error, action=parsed.action)

        if parsed.action == "help":
            return CommandResult(handled=True, response_text=HELP_TEXT, action="help")

        if parsed.action == "exit":
            return CommandResult(handled=True, action="exit", exit_requested=True)

        if parsed.action == "list":
            resp = format_report(self.engine.list_timers())
            return CommandResult(handled=True, response_text=resp, action="list")

        # ADD/CANCEL acknowledgements arrive as engine notifications; only failures answer here.
        try:
            if parsed.action == "add":
                self.engine.create_timer(parsed.duration_seconds or 0, parsed.label)
            elif parsed.action == "pomodoro":
                self.engine.create_pomodoro_pair(parsed.label or self.pomodoro_default_label)
            elif parsed.action == "cancel":
                self.engine.cancel_timer(parsed.timer_id)
        except InvalidDurationError:
            resp = "Длительность должна быть > 0."
        except TimerNotFoundError:
            resp = "Таймер с таким id не найден."
        except TimerAlreadyTerminalError:
            resp = "Таймер уже завершён или отменён."
        except TimerError as exc:
            logger.warning("Command %s failed: %s", parsed.action, exc)
            resp = "Таймеры остановлены, команда не выполнена."
        else:
            resp = None
        return CommandResult(handled=True, response_text=resp, action=parsed.action)
