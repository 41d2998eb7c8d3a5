from __future__ import annotations

import logging
import threading

import pytest

from pim_admin_app.tasks import TaskRunner


def test_success_result_is_dispatched(inline_executor) -> None:
    dispatched: list = []
    results: list = []
    runner = TaskRunner(executor=inline_executor, dispatch=lambda fn: (dispatched.append(fn), fn()))

    future = runner.submit(lambda: 42, on_success=results.append)

    assert future.result() == 42
    assert results == [42]
    assert len(dispatched) == 1
    assert runner.pending_count == 0


def test_error_goes_to_on_error_and_future(inline_executor) -> None:
    errors: list[Exception] = []
    runner = TaskRunner(executor=inline_executor)

    def boom() -> int:
        raise RuntimeError("boom")

    future = runner.submit(boom, on_success=lambda _: pytest.fail("unexpected success"), on_error=errors.append)

    assert isinstance(errors[0], RuntimeError)
    assert isinstance(future.exception(), RuntimeError)


def test_error_without_handler_is_logged(inline_executor, caplog: pytest.LogCaptureFixture) -> None:
    runner = TaskRunner(executor=inline_executor)

    def boom() -> int:
        raise ValueError("bad")

    future = runner.submit(boom, on_success=lambda _: None, name="demo")
    assert isinstance(future.exception(), ValueError)
    assert "task_failed" in caplog.text


def test_cancel_all_drops_in_flight_result(caplog: pytest.LogCaptureFixture) -> None:
    started = threading.Event()
    release = threading.Event()
    delivered: list[str] = []
    caplog.set_level(logging.INFO, logger="pim_admin_app.tasks")
    runner = TaskRunner(max_workers=1)

    def slow() -> str:
        started.set()
        release.wait(5)
        return "late"

    first = runner.submit(slow, on_success=delivered.append)
    queued = runner.submit(lambda: "queued", on_success=delivered.append)
    assert started.wait(5)

    assert runner.cancel_all() == 1
    release.set()

    assert first.result(timeout=5) == "late"
    assert queued.cancelled()
    assert delivered == []
    assert "task_result_dropped" in caplog.text
    runner.shutdown(wait=True)


def test_results_after_cancel_are_delivered_again(inline_executor) -> None:
    results: list[int] = []
    runner = TaskRunner(executor=inline_executor)
    runner.cancel_all()
    runner.submit(lambda: 1, on_success=results.append)
    assert results == [1]


def test_submit_after_shutdown_raises(inline_executor) -> None:
    runner = TaskRunner(executor=inline_executor)
    runner.shutdown()
    runner.shutdown()
    with pytest.raises(RuntimeError):
        runner.submit(lambda: 1, on_success=lambda _: None)


def test_cancel_all_drops_result_already_queued_for_dispatch(inline_executor, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="pim_admin_app.tasks")
    queued: list = []
    delivered: list[str] = []
    runner = TaskRunner(executor=inline_executor, dispatch=queued.append)

    future = runner.submit(lambda: "late", on_success=delivered.append)
    assert future.result() == "late"
    assert len(queued) == 1

    runner.cancel_all()
    for callback in queued:
        callback()

    assert delivered == []
    assert "task_result_dropped" in caplog.text
