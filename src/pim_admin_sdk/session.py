from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from .clients.auth import AuthClient
from .clients.products import ProductsClient
from .config import ClientConfig
from .http_client import HttpClient
from .models import AuthResponse

logger = logging.getLogger(__name__)

HttpFactory = Callable[[ClientConfig], HttpClient]


@dataclass
class ApiSession:
    """Explicit per-login transport state, passed to every service.

    The token lives here rather than in module globals. Any change to it
    discards the current ``HttpClient`` so the next client is built on a
    fresh transport carrying the new bearer header.
    """

    config: ClientConfig
    token: str | None = None
    refresh_token: str | None = None
    user: Any = None
    http_factory: HttpFactory = HttpClient
    _http: HttpClient | None = field(default=None, init=False, repr=False)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def http(self) -> HttpClient:
        if self._http is None:
            self._http = self.http_factory(self.config)
        return self._http

    def auth_client(self) -> AuthClient:
        return AuthClient(http=self.http(), access_token=self.token)

    def products_client(self) -> ProductsClient:
        return ProductsClient(http=self.http(), access_token=self.token)

    def establish(self, auth: AuthResponse) -> None:
        self.token = auth.access_token
        self.refresh_token = auth.refresh_token
        self.user = auth.user
        self._rebuild_transport()
        logger.info("session_established", extra={"env": self.config.env_name})

    def clear(self) -> None:
        self.token = None
        self.refresh_token = None
        self.user = None
        self._rebuild_transport()
        logger.info("session_cleared")

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def _rebuild_transport(self) -> None:
        self.close()
