import time
from typing import Optional, get_type_hints

import pytest

from timers.errors import InvalidDurationError, TimerAlreadyTerminalError, TimerNotFoundError
from timers.models import EventKind, Timer, TimerStatus
from timers.registry import TimerRegistry

from conftest import wait_until


def _report(engine, timer_id):
    return next(r for r in engine.list_timers() if r.id == timer_id)


def test_ids_are_sequential(engine):
    ids = [engine.create_timer(30, f"t{i}") for i in range(4)]
    assert ids == [1, 2, 3, 4]
    assert [r.id for r in engine.list_timers()] == ids


def test_non_positive_duration_rejected(engine):
    with pytest.raises(InvalidDurationError):
        engine.create_timer(0, "zero")
    with pytest.raises(InvalidDurationError):
        engine.create_timer(-1, "negative")
    assert len(engine.registry) == 0
    assert engine.create_timer(5, "ok") == 1


def test_empty_label_gets_placeholder(engine):
    timer_id = engine.create_timer(30, "")
    assert _report(engine, timer_id).label == "Без названия"


def test_create_emits_add(engine, events):
    engine.create_timer(30, "tea")
    assert events[0].kind is EventKind.ADD
    assert events[0].label == "tea"
    assert events[0].duration == 30


def test_running_remaining_does_not_increase(engine):
    timer_id = engine.create_timer(2.0, "t")
    first = _report(engine, timer_id)
    time.sleep(0.05)
    second = _report(engine, timer_id)
    assert first.status is TimerStatus.RUNNING
    assert 1.5 < first.remaining <= 2.0
    assert second.status is TimerStatus.RUNNING
    assert second.remaining <= first.remaining


def test_end_to_end_done(engine, events):
    timer_id = engine.create_timer(0.2, "t")
    assert _report(engine, timer_id).status is TimerStatus.RUNNING
    assert wait_until(lambda: _report(engine, timer_id).status is TimerStatus.DONE)
    assert _report(engine, timer_id).remaining is None
    done = [e for e in events if e.kind is EventKind.DONE]
    assert [(e.timer_id, e.label) for e in done] == [(timer_id, "t")]


def test_cancel_before_expiry(engine, events):
    timer_id = engine.create_timer(0.3, "t")
    assert engine.cancel_timer(timer_id) == timer_id
    assert _report(engine, timer_id).status is TimerStatus.CANCELLED
    time.sleep(0.5)
    assert _report(engine, timer_id).status is TimerStatus.CANCELLED
    kinds = [e.kind for e in events if e.timer_id == timer_id]
    assert kinds == [EventKind.ADD, EventKind.CANCEL]


def test_cancel_returns_quickly_for_long_timer(engine):
    timer_id = engine.create_timer(3600, "long")
    started = time.monotonic()
    engine.cancel_timer(timer_id)
    assert time.monotonic() - started < 1.0


def test_cancel_unknown_id(engine):
    engine.create_timer(30, "t")
    with pytest.raises(TimerNotFoundError):
        engine.cancel_timer(42)
    assert [r.status for r in engine.list_timers()] == [TimerStatus.RUNNING]


def test_cancel_twice_is_already_terminal(engine, events):
    timer_id = engine.create_timer(30, "t")
    engine.cancel_timer(timer_id)
    with pytest.raises(TimerAlreadyTerminalError):
        engine.cancel_timer(timer_id)
    assert sum(1 for e in events if e.kind is EventKind.CANCEL) == 1


def test_cancel_finished_is_already_terminal(engine):
    timer_id = engine.create_timer(0.05, "t")
    assert wait_until(lambda: _report(engine, timer_id).status is TimerStatus.DONE)
    with pytest.raises(TimerAlreadyTerminalError):
        engine.cancel_timer(timer_id)
    assert _report(engine, timer_id).status is TimerStatus.DONE


def test_lookup_helpers_are_annotated():
    hints = get_type_hints(TimerRegistry._find)
    assert hints["return"] == Optional[Timer]
    assert get_type_hints(TimerRegistry.get)["return"] is Timer


def test_get_unknown_id_raises(engine):
    with pytest.raises(TimerNotFoundError):
        engine.registry.get(99)
