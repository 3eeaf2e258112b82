"""Tests for the periodic scheduler."""

import threading
import time

import pytest

from spot_watchdog.orchestration.scheduler import PeriodicScheduler
from spot_watchdog.utils.exceptions import ProviderError


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        PeriodicScheduler(lambda: None, 0)


def test_runs_handler_periodically():
    ticks = threading.Event()
    calls = []

    def handler():
        calls.append(time.monotonic())
        if len(calls) >= 3:
            ticks.set()

    scheduler = PeriodicScheduler(handler, 0.01)
    scheduler.start_scheduler()
    try:
        assert ticks.wait(5)
    finally:
        scheduler.stop_scheduler()

    assert scheduler.running is False
    assert scheduler.wait(1)
    assert scheduler.failed is False
    assert len(calls) >= 3


def test_ticks_do_not_overlap():
    active = []
    overlaps = []
    done = threading.Event()

    def handler():
        active.append(1)
        if len(active) > 1:
            overlaps.append(True)
        time.sleep(0.02)
        active.pop()
        if scheduler.tick_count >= 3:
            done.set()

    scheduler = PeriodicScheduler(handler, 0.005)
    scheduler.start_scheduler()
    try:
        assert done.wait(5)
    finally:
        scheduler.stop_scheduler()

    assert overlaps == []


def test_handler_error_stops_scheduler():
    calls = []

    def handler():
        calls.append(1)
        raise ProviderError("Failed to get instance status")

    scheduler = PeriodicScheduler(handler, 0.01)
    scheduler.start_scheduler()

    assert scheduler.wait(5)
    time.sleep(0.05)

    assert scheduler.failed is True
    assert isinstance(scheduler.error, ProviderError)
    assert scheduler.running is False
    assert calls == [1]


def test_first_tick_waits_one_interval():
    calls = []
    scheduler = PeriodicScheduler(lambda: calls.append(1), 60)
    scheduler.start_scheduler()
    scheduler.stop_scheduler()

    assert calls == []
    assert scheduler.wait(1)
