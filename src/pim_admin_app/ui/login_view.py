from __future__ import annotations

import logging
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable

from pim_admin_sdk import CONNECTION_ERROR_MESSAGE, to_user_facing_error
from pim_admin_sdk.exceptions import ApiError, TransportError
from pim_admin_sdk.models import AuthResponse

from pim_admin_app.services.auth_service import LOGIN_FAILED_MESSAGE, AuthService
from pim_admin_app.tasks import TaskRunner

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Please enter email and password"


@dataclass
class LoginView:
    auth_service: AuthService
    runner: TaskRunner
    on_authenticated: Callable[[AuthResponse], None]
    email: str = ""
    password: str = field(default="", repr=False)
    title: str = "PIM Admin - Login"
    error_message: str | None = None
    error_visible: bool = False
    login_enabled: bool = True

    def submit(self) -> Future[AuthResponse] | None:
        email = self.email
        password = self.password
        if not self.login_enabled:
            return None
        if not email or not password:
            self.show_error(MISSING_CREDENTIALS_MESSAGE)
            return None

        self.login_enabled = False
        self.error_visible = False
        return self.runner.submit(
            lambda: self.auth_service.login(email, password),
            on_success=self._on_login_success,
            on_error=self._on_login_error,
            name="auth.login",
        )

    def show_error(self, message: str) -> None:
        self.error_message = message
        self.error_visible = True

    def _on_login_success(self, auth: AuthResponse) -> None:
        self.login_enabled = True
        self.on_authenticated(auth)

    def _on_login_error(self, exc: Exception) -> None:
        self.login_enabled = True
        if isinstance(exc, TransportError):
            logger.error("login_connection_error", exc_info=exc)
            self.show_error(CONNECTION_ERROR_MESSAGE)
        elif isinstance(exc, ApiError):
            self.show_error(_login_error_message(exc))
        else:
            logger.error("login_unexpected_error", exc_info=exc)
            self.show_error(str(exc) or LOGIN_FAILED_MESSAGE)

    def render(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "email": self.email,
            "password": "*" * len(self.password),
            "error": self.error_message if self.error_visible else None,
            "login_enabled": self.login_enabled,
        }


def _login_error_message(exc: ApiError) -> str:
    # An HTTP failure whose body carried no message of its own.
    payload = exc.raw_payload
    if exc.status_code and isinstance(payload, dict) and not payload.get("message"):
        return f"{LOGIN_FAILED_MESSAGE}. Status: {exc.status_code}"
    return to_user_facing_error(exc, LOGIN_FAILED_MESSAGE).message
