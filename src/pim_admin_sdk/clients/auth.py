from __future__ import annotations

from typing import Any

from ..models import ApiEnvelope, AuthResponse
from .base import BaseClient


class AuthClient(BaseClient):
    def login(self, email: str, password: str) -> ApiEnvelope[AuthResponse]:
        payload = {"email": email, "password": password}
        data = self._request("POST", "auth/login", json_body=payload)
        return self._decode(ApiEnvelope[AuthResponse], data)

    def logout(self) -> ApiEnvelope[Any]:
        data = self._request("POST", "auth/logout")
        return self._decode(ApiEnvelope[Any], data)
