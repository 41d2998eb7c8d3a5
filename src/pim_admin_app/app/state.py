from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pim_admin_app.app.navigation import SCREEN_SPECS, ScreenSpec


class Route(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    EXITED = "exited"


@dataclass
class AppState:
    route: Route = Route.LOGIN
    status_message: str = "Ready"
    window: ScreenSpec = field(default_factory=lambda: SCREEN_SPECS["login"])
