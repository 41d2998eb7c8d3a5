from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ApiError, TransportError

CONNECTION_ERROR_MESSAGE = "Connection error. Check console for details."


@dataclass(frozen=True)
class UserFacingError:
    message: str
    details: str | None = None
    is_transport: bool = False

    @property
    def technical_details(self) -> str | None:
        if self.details:
            return self.details
        return None


def to_user_facing_error(exc: ApiError, default_message: str = "Request failed") -> UserFacingError:
    primary = (exc.message or "").strip() or default_message
    details = exc.code
    if exc.status_code:
        details = f"{details} (HTTP {exc.status_code})"
    if exc.details:
        details = f"{details}: {exc.details}"
    return UserFacingError(message=primary, details=details, is_transport=isinstance(exc, TransportError))
