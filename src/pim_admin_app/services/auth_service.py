from __future__ import annotations

import logging

from pim_admin_sdk import ApiSession
from pim_admin_sdk.exceptions import MissingTokenError
from pim_admin_sdk.models import AuthResponse

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Login failed"
MISSING_TOKEN_MESSAGE = "No access token in response"


class AuthService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def has_active_session(self) -> bool:
        return self.session.is_authenticated

    def login(self, email: str, password: str) -> AuthResponse:
        logger.info("login_attempt", extra={"email": email})
        try:
            envelope = self.session.auth_client().login(email, password)
            auth = envelope.require_data(LOGIN_FAILED_MESSAGE)
            if not auth.access_token:
                raise MissingTokenError(
                    code="MISSING_TOKEN",
                    message=MISSING_TOKEN_MESSAGE,
                    raw_payload=envelope.model_dump(mode="json"),
                )
        except Exception:
            logger.exception("login_failure", extra={"email": email})
            raise
        self.session.establish(auth)
        logger.info("login_success", extra={"email": email})
        return auth

    def logout(self) -> None:
        logger.info("logout")
        try:
            if self.session.is_authenticated:
                self.session.auth_client().logout()
        finally:
            self.session.clear()
