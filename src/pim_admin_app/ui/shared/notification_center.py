from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NotificationCenter:
    """Queue of modal alerts waiting for the front-end to show them."""

    messages: list[dict[str, Any]] = field(default_factory=list)

    def push(self, *, level: str, title: str, message: str, header: str | None = None) -> dict[str, Any]:
        payload = {
            "level": level,
            "title": title,
            "header": header,
            "message": message,
        }
        self.messages.append(payload)
        return payload

    def latest(self) -> dict[str, Any] | None:
        return self.messages[-1] if self.messages else None

    def clear(self) -> None:
        self.messages.clear()

    def render(self) -> dict[str, Any]:
        return {"count": len(self.messages), "messages": list(self.messages)}
