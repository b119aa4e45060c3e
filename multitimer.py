import logging
import signal
import sys

from config import load_config, setup_logging
from timers.console import Console
from timers.engine import TimerEngine, build_engine
from timers.router import HELP_TEXT, CommandRouter
from timers.sounds import ChimePlayer

logger = logging.getLogger("multitimer")


def graceful_exit(signum, frame) -> None:  # pragma: no cover - signal handler
    logger.info("Shutting down (signal %s)", signum)
    raise KeyboardInterrupt()


def install_signal_handlers() -> None:
    signal.signal(signal.SIGINT, graceful_exit)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, graceful_exit)


def configure_console_encoding() -> None:
    for stream in (sys.stdout, sys.stdin):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure:
            try:
                reconfigure(encoding="utf-8")
            except (OSError, ValueError):
                logger.debug("Could not switch %s to utf-8", stream)


def run_repl(router: CommandRouter, console: Console, stdin=None) -> None:
    stdin = stdin or sys.stdin
    while router.engine.running:
        console.prompt()
        line = stdin.readline()
        if not line:
            logger.info("End of input")
            break
        result = router.handle_text(line)
        if not result:
            continue
        if result.response_text:
            console.print(result.response_text)
        if result.exit_requested:
            break


def main() -> None:
    config = load_config()
    setup_logging(config.log_level, config.log_dir, config.log_to_console)
    configure_console_encoding()
    logger.info("Starting MultiTimer")

    console = Console(chime=ChimePlayer() if config.enable_chime else None)
    engine: TimerEngine = build_engine(config, on_event=console.notify)
    router = CommandRouter(engine, pomodoro_default_label=config.pomodoro_default_label)

    install_signal_handlers()
    console.print("MultiTimer (многопоточный таймер)")
    console.print(HELP_TEXT)
    try:
        run_repl(router, console)
    except KeyboardInterrupt:
        console.print("\nПолучен сигнал, завершаем...")
        logger.info("Interrupted by user")
    finally:
        engine.shutdown()
    console.print("Выход.")


if __name__ == "__main__":
    main()
