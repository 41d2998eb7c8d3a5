from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ResponseDecodeError
from ..http_client import HttpClient

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class BaseClient:
    http: HttpClient
    access_token: str | None = None

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        merged = {**self._auth_headers(), **headers}
        return self.http.request(method, path, headers=merged, **kwargs)

    @staticmethod
    def _decode(model: type[ModelT], payload: Any) -> ModelT:
        if payload is None:
            payload = {}
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ResponseDecodeError(
                code="UNEXPECTED_PAYLOAD",
                message=f"Unexpected response shape for {model.__name__}",
                details=exc.errors(include_url=False),
                raw_payload=payload,
            ) from exc
