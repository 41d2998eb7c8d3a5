from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenSpec:
    key: str
    title: str
    width: int
    height: int
    resizable: bool


SCREEN_SPECS: dict[str, ScreenSpec] = {
    "login": ScreenSpec("login", "PIM Admin - Login", 400, 300, resizable=False),
    "dashboard": ScreenSpec("dashboard", "PIM Admin Dashboard", 1200, 800, resizable=True),
}
