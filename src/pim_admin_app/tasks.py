"""Background execution of blocking API calls for the screens.

Each call runs on a worker thread; its result is handed to a callback through
``dispatch``, which a toolkit front-end points at its own event loop (for Tk,
``lambda fn: root.after(0, fn)``). Screens call :meth:`TaskRunner.cancel_all`
on teardown so late results never reach a view that is gone.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Dispatch = Callable[[Callable[[], None]], None]


def call_now(fn: Callable[[], None]) -> None:
    fn()


class TaskRunner:
    def __init__(
        self,
        *,
        max_workers: int = 4,
        dispatch: Dispatch | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="pim-admin")
        self._dispatch = dispatch or call_now
        self._lock = threading.Lock()
        self._pending: set[Future[Any]] = set()
        self._generation = 0
        self._closed = False

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def submit(
        self,
        fn: Callable[[], T],
        *,
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None] | None = None,
        name: str = "task",
    ) -> Future[T]:
        with self._lock:
            if self._closed:
                raise RuntimeError("TaskRunner is shut down")
            generation = self._generation

        def work() -> T:
            try:
                result = fn()
            except Exception as exc:
                if on_error is None:
                    logger.exception("task_failed", extra={"task": name})
                else:
                    self._deliver(generation, name, on_error, exc)
                raise
            self._deliver(generation, name, on_success, result)
            return result

        future = self._executor.submit(work)
        with self._lock:
            if not future.done():
                self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def cancel_all(self) -> int:
        with self._lock:
            self._generation += 1
            pending = list(self._pending)
        cancelled = sum(1 for future in pending if future.cancel())
        if pending:
            logger.info("tasks_cancelled", extra={"pending": len(pending), "cancelled": cancelled})
        return cancelled

    def shutdown(self, wait: bool = False) -> None:
        self.cancel_all()
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait)

    def _is_current(self, generation: int, name: str) -> bool:
        with self._lock:
            current = generation == self._generation
        if not current:
            logger.info("task_result_dropped", extra={"task": name})
        return current

    def _deliver(self, generation: int, name: str, callback: Callable[[Any], None], value: Any) -> None:
        if not self._is_current(generation, name):
            return

        # Checked again on the dispatch side: cancel_all may run while the callable is queued.
        def deliver() -> None:
            if self._is_current(generation, name):
                callback(value)

        self._dispatch(deliver)

    def _forget(self, future: Future[Any]) -> None:
        with self._lock:
            self._pending.discard(future)
