import logging
import logging.handlers
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _get_env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip() in {"1", "true", "True", "yes", "YES", "y"}


def _get_env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    try:
        return int(val)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer") from exc


def _get_env_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    try:
        return float(val)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be a float") from exc


@dataclass
class Config:
    poll_interval_ms: float
    unit_seconds: float
    default_label: str
    pomodoro_work_units: int
    pomodoro_break_units: int
    pomodoro_default_label: str
    enable_chime: bool
    debug: bool
    log_level: str
    log_dir: Path
    log_to_console: bool

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000.0


DEFAULT_LABEL = "Без названия"
MIN_POLL_INTERVAL_MS = 10.0


def load_config(env_path: Optional[Path] = None) -> Config:
    if env_path is None:
        env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    poll_interval_ms = max(MIN_POLL_INTERVAL_MS, _get_env_float("TIMER_POLL_INTERVAL_MS", 1000.0))
    unit_seconds = _get_env_float("TIMER_UNIT_SECONDS", 60.0)
    if unit_seconds <= 0:
        raise ValueError("Environment variable TIMER_UNIT_SECONDS must be positive")
    default_label = os.getenv("TIMER_DEFAULT_LABEL") or DEFAULT_LABEL
    pomodoro_work_units = _get_env_int("POMODORO_WORK_UNITS", 25)
    pomodoro_break_units = _get_env_int("POMODORO_BREAK_UNITS", 5)
    for name, value in (("POMODORO_WORK_UNITS", pomodoro_work_units), ("POMODORO_BREAK_UNITS", pomodoro_break_units)):
        if value <= 0:
            raise ValueError(f"Environment variable {name} must be positive")
    pomodoro_default_label = os.getenv("POMODORO_DEFAULT_LABEL") or "Pomodoro"
    enable_chime = _get_env_bool("ENABLE_CHIME", False)
    debug = _get_env_bool("DEBUG", False)
    log_level = "DEBUG" if debug else os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    log_to_console = _get_env_bool("LOG_TO_CONSOLE", False)

    return Config(
        poll_interval_ms=poll_interval_ms,
        unit_seconds=unit_seconds,
        default_label=default_label,
        pomodoro_work_units=pomodoro_work_units,
        pomodoro_break_units=pomodoro_break_units,
        pomodoro_default_label=pomodoro_default_label,
        enable_chime=enable_chime,
        debug=debug,
        log_level=log_level,
        log_dir=log_dir,
        log_to_console=log_to_console,
    )


def setup_logging(log_level: str = "INFO", log_dir: Path = Path("logs"), log_to_console: bool = False) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)

    log_path = log_dir / "multitimer.log"
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [file_handler]

    # The REPL owns stdout; log records only reach the terminal on request.
    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=handlers,
    )
