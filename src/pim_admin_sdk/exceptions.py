from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: object | None = None
    status_code: int = 0
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class AuthError(ApiError):
    """Authentication failed or the bearer token was rejected."""


class PermissionError(ApiError):
    """403 from the backend."""


class NotFoundError(ApiError):
    pass


class ValidationError(ApiError):
    pass


class ConflictError(ApiError):
    """409 or conflict-style errors."""


class RateLimitError(ApiError):
    """429 throttling error."""


class ServerError(ApiError):
    """5xx server-side failures."""


class TransportError(ApiError):
    """Network/transport failure before a usable HTTP response was returned."""


class ResponseDecodeError(TransportError):
    """The response body was not JSON or did not match the expected shape."""


class UnsuccessfulResponseError(ApiError):
    """Well-formed envelope with success=false (or no data when data was required)."""


class MissingTokenError(ApiError):
    """Login envelope succeeded but carried no access token."""
