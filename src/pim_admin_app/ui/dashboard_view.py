from __future__ import annotations

import logging
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable

from pim_admin_sdk import to_user_facing_error
from pim_admin_sdk.exceptions import ApiError, TransportError
from pim_admin_sdk.models import Product, ProductPage

from pim_admin_app import __version__
from pim_admin_app.services.product_service import LOAD_FAILED_MESSAGE, ProductService
from pim_admin_app.tasks import TaskRunner
from pim_admin_app.ui.components.product_table import ProductTable
from pim_admin_app.ui.shared.notification_center import NotificationCenter
from pim_admin_app.ui.shared.view_state import resolve_state
from pim_admin_app.ui.widgets.clock import Clock

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading products..."


@dataclass
class DashboardView:
    service: ProductService
    runner: TaskRunner
    on_exit: Callable[[], None]
    on_logout: Callable[[], None] | None = None
    clock: Clock | None = None
    title: str = "PIM Admin Dashboard"
    products: list[Product] = field(default_factory=list)
    status_message: str = ""
    time_text: str = ""
    search_text: str = ""
    page_text: str = ""
    is_loading: bool = False
    last_error: str | None = None
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    pending_load: Future[ProductPage] | None = None

    def enter(self) -> Future[ProductPage]:
        if self.clock is not None:
            self.clock.start()
        return self.load_products()

    def teardown(self) -> None:
        if self.clock is not None:
            self.clock.stop()
        self.runner.cancel_all()
        self.is_loading = False

    def set_time(self, text: str) -> None:
        self.time_text = text

    def load_products(self) -> Future[ProductPage]:
        self.status_message = LOADING_MESSAGE
        self.is_loading = True
        self.pending_load = self.runner.submit(
            self.service.list_products,
            on_success=self._on_products_loaded,
            on_error=self._on_products_failed,
            name="products.list",
        )
        return self.pending_load

    def _on_products_loaded(self, page: ProductPage) -> None:
        self.is_loading = False
        self.last_error = None
        self.products = list(page.items)
        self.status_message = f"Loaded {len(self.products)} products"

    def _on_products_failed(self, exc: Exception) -> None:
        self.is_loading = False
        if isinstance(exc, TransportError):
            logger.error("products_connection_error", exc_info=exc)
            self.last_error = exc.message
            self.show_alert("Connection Error", exc.message)
            self.status_message = "Failed to load products"
        elif isinstance(exc, ApiError):
            message = to_user_facing_error(exc, LOAD_FAILED_MESSAGE).message
            self.last_error = message
            self.show_alert("Error", message)
        else:
            logger.error("products_unexpected_error", exc_info=exc)
            self.last_error = str(exc) or LOAD_FAILED_MESSAGE
            self.show_alert("Error", self.last_error)

    def show_alert(self, title: str, content: str) -> None:
        self.notifications.push(level="error", title=title, message=content)

    def handle_refresh(self) -> Future[ProductPage]:
        return self.load_products()

    def handle_view_products(self) -> Future[ProductPage]:
        return self.load_products()

    # Declared actions without a backend flow yet.

    def handle_search(self) -> bool:
        logger.debug("action_not_implemented", extra={"action": "search", "query": self.search_text})
        return False

    def handle_add_product(self) -> bool:
        logger.debug("action_not_implemented", extra={"action": "add_product"})
        return False

    def handle_prev_page(self) -> bool:
        logger.debug("action_not_implemented", extra={"action": "prev_page"})
        return False

    def handle_next_page(self) -> bool:
        logger.debug("action_not_implemented", extra={"action": "next_page"})
        return False

    def handle_update_status(self, product_id: str, status: str) -> bool:
        logger.debug("action_not_implemented", extra={"action": "update_status", "product_id": product_id})
        return False

    def handle_about(self) -> dict[str, Any]:
        return self.notifications.push(
            level="info",
            title="About",
            header="PIM Admin Desktop",
            message=f"Admin Interface for PIM System\nVersion {__version__}",
        )

    def handle_logout(self) -> None:
        if self.on_logout is not None:
            self.on_logout()
            return
        self.on_exit()

    def handle_exit(self) -> None:
        self.on_exit()

    def render(self) -> dict[str, Any]:
        table = ProductTable(self.products).render()
        state = resolve_state(is_loading=self.is_loading, error=self.last_error, has_data=bool(self.products))
        return {
            "title": self.title,
            "table": table,
            "status": self.status_message,
            "time": self.time_text,
            "search": self.search_text,
            "page": self.page_text,
            "view_state": state.render(),
            "notifications": self.notifications.render(),
        }
