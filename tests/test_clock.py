from __future__ import annotations

import threading
import time
from datetime import datetime

import pytest

from pim_admin_app.ui.widgets.clock import Clock

FIXED = datetime(2024, 1, 2, 3, 4, 5)


def test_tick_formats_current_time() -> None:
    ticks: list[str] = []
    clock = Clock(on_tick=ticks.append, now=lambda: FIXED)
    assert clock.tick() == "2024-01-02 03:04:05"
    assert ticks == ["2024-01-02 03:04:05"]


def test_custom_format_and_dispatch() -> None:
    queued: list = []
    ticks: list[str] = []
    clock = Clock(on_tick=ticks.append, time_format="%H:%M", dispatch=queued.append, now=lambda: FIXED)
    clock.tick()
    assert ticks == []
    queued[0]()
    assert ticks == ["03:04"]


def test_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        Clock(on_tick=lambda _: None, interval_seconds=0)


def test_start_ticks_until_stopped() -> None:
    ticks: list[str] = []
    enough = threading.Event()

    def on_tick(text: str) -> None:
        ticks.append(text)
        if len(ticks) >= 3:
            enough.set()

    clock = Clock(on_tick=on_tick, interval_seconds=0.01, now=lambda: FIXED)
    clock.start()
    assert clock.running
    assert enough.wait(5)

    clock.stop()
    assert not clock.running
    count = len(ticks)
    time.sleep(0.05)
    assert len(ticks) == count


def test_first_tick_happens_immediately() -> None:
    first = threading.Event()
    clock = Clock(on_tick=lambda _: first.set(), interval_seconds=60, now=lambda: FIXED)
    clock.start()
    try:
        assert first.wait(5)
    finally:
        clock.stop()
