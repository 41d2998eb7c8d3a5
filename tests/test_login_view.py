from __future__ import annotations

import pytest

from pim_admin_sdk import CONNECTION_ERROR_MESSAGE
from pim_admin_sdk.exceptions import AuthError, MissingTokenError, TransportError, UnsuccessfulResponseError
from pim_admin_sdk.models import AuthResponse

from pim_admin_app.tasks import TaskRunner
from pim_admin_app.ui.login_view import MISSING_CREDENTIALS_MESSAGE, LoginView


class FakeAuthService:
    def __init__(self, result: AuthResponse | Exception) -> None:
        self.result = result
        self.calls: list[tuple[str, str]] = []

    def login(self, email: str, password: str) -> AuthResponse:
        self.calls.append((email, password))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _view(service: FakeAuthService, inline_executor, authenticated: list) -> LoginView:
    return LoginView(
        auth_service=service,  # type: ignore[arg-type]
        runner=TaskRunner(executor=inline_executor),
        on_authenticated=authenticated.append,
        email="admin@test.com",
        password="Admin123!",
    )


@pytest.mark.parametrize(("email", "password"), [("", "pw"), ("a@b.c", ""), ("", "")])
def test_missing_credentials_block_the_request(inline_executor, email: str, password: str) -> None:
    service = FakeAuthService(AuthResponse(access_token="t"))
    view = _view(service, inline_executor, [])
    view.email, view.password = email, password

    assert view.submit() is None
    assert service.calls == []
    assert view.error_visible is True
    assert view.error_message == MISSING_CREDENTIALS_MESSAGE
    assert view.login_enabled is True


def test_successful_login_notifies_shell(inline_executor) -> None:
    authenticated: list[AuthResponse] = []
    auth = AuthResponse(access_token="abc123")
    view = _view(FakeAuthService(auth), inline_executor, authenticated)

    future = view.submit()

    assert future is not None and future.result() is auth
    assert authenticated == [auth]
    assert view.error_visible is False
    assert view.login_enabled is True


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (UnsuccessfulResponseError(code="UNSUCCESSFUL_RESPONSE", message="Account locked"), "Account locked"),
        (MissingTokenError(code="MISSING_TOKEN", message="No access token in response"), "No access token in response"),
        (AuthError(code="Unauthorized", message="Invalid credentials", status_code=401), "Invalid credentials"),
        (AuthError(code="HTTP_ERROR", message="", status_code=401), "Login failed"),
        (
            AuthError(code="HTTP_ERROR", message="Request failed. Status: 401", status_code=401, raw_payload={}),
            "Login failed. Status: 401",
        ),
        (TransportError(code="TRANSPORT_ERROR", message="refused"), CONNECTION_ERROR_MESSAGE),
    ],
)
def test_login_errors_are_shown(inline_executor, error: Exception, message: str) -> None:
    authenticated: list = []
    view = _view(FakeAuthService(error), inline_executor, authenticated)

    future = view.submit()

    assert future is not None and future.exception() is error
    assert authenticated == []
    assert view.error_visible is True
    assert view.error_message == message
    assert view.login_enabled is True


def test_login_disabled_while_in_flight() -> None:
    queued: list = []
    view = LoginView(
        auth_service=FakeAuthService(AuthResponse(access_token="t")),  # type: ignore[arg-type]
        runner=TaskRunner(max_workers=1, dispatch=queued.append),
        on_authenticated=lambda _: None,
        email="a@b.c",
        password="pw",
    )
    future = view.submit()
    assert view.login_enabled is False
    assert future is not None
    future.result(timeout=5)
    queued[0]()
    assert view.login_enabled is True
    view.runner.shutdown(wait=True)


def test_render_masks_password(inline_executor) -> None:
    view = _view(FakeAuthService(AuthResponse()), inline_executor, [])
    rendered = view.render()
    assert rendered["title"] == "PIM Admin - Login"
    assert rendered["password"] == "*" * len("Admin123!")
    assert rendered["error"] is None


def test_submit_ignored_while_login_in_flight() -> None:
    queued: list = []
    service = FakeAuthService(AuthResponse(access_token="t"))
    view = LoginView(
        auth_service=service,  # type: ignore[arg-type]
        runner=TaskRunner(max_workers=1, dispatch=queued.append),
        on_authenticated=lambda _: None,
        email="a@b.c",
        password="pw",
    )
    first = view.submit()
    assert first is not None
    assert view.submit() is None

    first.result(timeout=5)
    assert service.calls == [("a@b.c", "pw")]
    queued[0]()
    assert view.login_enabled is True
    view.runner.shutdown(wait=True)
