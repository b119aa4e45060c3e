class TimerError(Exception):
    """Base class for recoverable timer engine errors."""


class InvalidDurationError(TimerError, ValueError):
    def __init__(self, duration: float):
        super().__init__(f"Duration must be positive, got {duration}")
        self.duration = duration


class TimerNotFoundError(TimerError, LookupError):
    def __init__(self, timer_id: int):
        super().__init__(f"Timer #{timer_id} not found")
        self.timer_id = timer_id


class TimerAlreadyTerminalError(TimerError):
    def __init__(self, timer_id: int):
        super().__init__(f"Timer #{timer_id} is already finished or cancelled")
        self.timer_id = timer_id


class EngineStoppedError(TimerError):
    def __init__(self):
        super().__init__("Timer engine is shut down")
