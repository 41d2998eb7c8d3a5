from __future__ import annotations

import logging
from typing import Any, Mapping

from pim_admin_sdk import ApiSession
from pim_admin_sdk.models import Product, ProductPage, ProductQuery, ProductStatus

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load products"


class ProductService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_products(self, query: ProductQuery | Mapping[str, Any] | None = None) -> ProductPage:
        envelope = self.session.products_client().list_products(query)
        page = envelope.require_data(LOAD_FAILED_MESSAGE)
        logger.info("products_loaded", extra={"count": len(page.items), "total": page.meta.total_items})
        return page

    def get_product(self, product_id: str) -> Product:
        return self.session.products_client().get_product(product_id).require_data("Product not found")

    def create_product(self, product: Product | Mapping[str, Any]) -> Product:
        created = self.session.products_client().create_product(product).require_data("Failed to create product")
        logger.info("product_created", extra={"product_id": created.id})
        return created

    def update_product(self, product_id: str, product: Product | Mapping[str, Any]) -> Product:
        updated = self.session.products_client().update_product(product_id, product).require_data(
            "Failed to update product"
        )
        logger.info("product_updated", extra={"product_id": product_id})
        return updated

    def delete_product(self, product_id: str) -> None:
        self.session.products_client().delete_product(product_id).require_success("Failed to delete product")
        logger.info("product_deleted", extra={"product_id": product_id})

    def update_status(self, product_id: str, status: ProductStatus | str) -> Product:
        updated = self.session.products_client().update_status(product_id, status).require_data(
            "Failed to update product status"
        )
        logger.info("product_status_updated", extra={"product_id": product_id, "status": updated.status})
        return updated
