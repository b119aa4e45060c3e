import time

import pytest

from timers.engine import TimerEngine

POLL = 0.02


def wait_until(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def events():
    return []


@pytest.fixture
def engine(events):
    eng = TimerEngine(poll_interval=POLL, on_event=events.append)
    yield eng
    eng.shutdown()
