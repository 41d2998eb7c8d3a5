from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable

from pim_admin_app.config import CLOCK_FORMAT
from pim_admin_app.tasks import Dispatch, call_now

logger = logging.getLogger(__name__)


class Clock:
    """Dashboard time label, refreshed from a background thread until stopped."""

    def __init__(
        self,
        *,
        on_tick: Callable[[str], None],
        interval_seconds: float = 1.0,
        time_format: str = CLOCK_FORMAT,
        dispatch: Dispatch | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self.on_tick = on_tick
        self.interval_seconds = interval_seconds
        self.time_format = time_format
        self._dispatch = dispatch or call_now
        self._now = now
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def text(self) -> str:
        return self._now().strftime(self.time_format)

    def tick(self) -> str:
        value = self.text()
        self._dispatch(lambda: self.on_tick(value))
        return value

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="pim-admin-clock", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 2.0) -> None:
        self._stop.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
            if thread.is_alive():
                logger.warning("clock_stop_timeout")

    def _run(self) -> None:
        self.tick()
        while not self._stop.wait(self.interval_seconds):
            self.tick()
