from __future__ import annotations

import logging
from dataclasses import dataclass

from pim_admin_sdk import ApiSession, ClientConfig, load_config
from pim_admin_sdk.exceptions import ApiError
from pim_admin_sdk.models import AuthResponse

from pim_admin_app.app.navigation import SCREEN_SPECS
from pim_admin_app.app.state import AppState, Route
from pim_admin_app.config import AppConfig, load_app_config
from pim_admin_app.services.auth_service import AuthService
from pim_admin_app.services.product_service import ProductService
from pim_admin_app.tasks import Dispatch, TaskRunner
from pim_admin_app.ui.dashboard_view import DashboardView
from pim_admin_app.ui.login_view import LoginView
from pim_admin_app.ui.widgets.clock import Clock

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    route: Route


class AdminShell:
    """Owns the single window and switches it between login and dashboard.

    The route only moves forward: LOGIN -> DASHBOARD -> EXITED. Logging out
    ends the application instead of returning to the login screen.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: ApiSession | None = None,
        *,
        app_config: AppConfig | None = None,
        runner: TaskRunner | None = None,
        dispatch: Dispatch | None = None,
    ) -> None:
        self.config = config or load_config()
        self.app_config = app_config or load_app_config()
        self.session = session or ApiSession(self.config)
        self.dispatch = dispatch
        self.runner = runner or TaskRunner(max_workers=self.app_config.max_workers, dispatch=dispatch)
        self.state = AppState()
        self.auth_service = AuthService(self.session)
        self.product_service = ProductService(self.session)
        self.login_view = LoginView(
            auth_service=self.auth_service,
            runner=self.runner,
            on_authenticated=self._on_authenticated,
            email=self.app_config.demo_email,
            password=self.app_config.demo_password,
        )
        self.dashboard_view: DashboardView | None = None

    def start(self) -> BootstrapResult:
        if self.state.route is Route.EXITED:
            return BootstrapResult(route=self.state.route)
        self._navigate(Route.LOGIN, "Login required")
        return BootstrapResult(route=self.state.route)

    def show_dashboard(self) -> BootstrapResult:
        if self.state.route is Route.EXITED:
            return BootstrapResult(route=self.state.route)
        if self.dashboard_view is None:
            dashboard = DashboardView(
                service=self.product_service,
                runner=self.runner,
                on_exit=self.exit,
                on_logout=self.logout,
            )
            dashboard.clock = Clock(
                on_tick=dashboard.set_time,
                interval_seconds=self.app_config.clock_interval_seconds,
                time_format=self.app_config.clock_format,
                dispatch=self.dispatch,
            )
            self.dashboard_view = dashboard
        self._navigate(Route.DASHBOARD, "Authenticated")
        self.dashboard_view.enter()
        return BootstrapResult(route=self.state.route)

    def logout(self) -> BootstrapResult:
        try:
            self.auth_service.logout()
        except ApiError as exc:
            logger.warning("logout_failed", extra={"code": exc.code, "status_code": exc.status_code})
        return self.exit()

    def exit(self) -> BootstrapResult:
        if self.state.route is Route.EXITED:
            return BootstrapResult(route=self.state.route)
        if self.dashboard_view is not None:
            self.dashboard_view.teardown()
        self.runner.shutdown()
        self.session.close()
        self.state.route = Route.EXITED
        self.state.status_message = "Exited"
        logger.info("navigation", extra={"route": Route.EXITED.value})
        return BootstrapResult(route=self.state.route)

    def _on_authenticated(self, auth: AuthResponse) -> None:
        self.show_dashboard()

    def _navigate(self, route: Route, status_message: str) -> None:
        logger.info("navigation", extra={"route": route.value})
        self.state.route = route
        self.state.window = SCREEN_SPECS[route.value]
        self.state.status_message = status_message
