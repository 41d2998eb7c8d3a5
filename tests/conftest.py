from __future__ import annotations

import os
from concurrent.futures import Executor, Future
from typing import Any, Callable

import pytest

from pim_admin_sdk import ClientConfig

API_BASE_URL = "https://pim.example.com/api/"


class InlineExecutor(Executor):
    """Runs submitted work on the calling thread so callbacks are deterministic."""

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future[Any]:
        future: Future[Any] = Future()
        future.set_running_or_notify_cancel()
        try:
            result = fn(*args, **kwargs)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)
        return future


@pytest.fixture(autouse=True)
def _clean_pim_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("PIM_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(env_name="test", api_base_url=API_BASE_URL)


@pytest.fixture
def inline_executor() -> InlineExecutor:
    return InlineExecutor()
