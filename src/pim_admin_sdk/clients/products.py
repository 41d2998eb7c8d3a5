from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote

from ..models import ApiEnvelope, Product, ProductPage, ProductQuery, ProductStatus
from .base import BaseClient


def _product_path(product_id: str, suffix: str = "") -> str:
    if not product_id:
        raise ValueError("product_id is required")
    return f"products/{quote(str(product_id), safe='')}{suffix}"


def _product_body(product: Product | Mapping[str, Any]) -> dict[str, Any]:
    model = product if isinstance(product, Product) else Product.model_validate(product)
    return model.to_payload()


@dataclass
class ProductsClient(BaseClient):
    def list_products(self, query: ProductQuery | Mapping[str, Any] | None = None) -> ApiEnvelope[ProductPage]:
        params = build_product_params(query)
        data = self._request("GET", "products", params=params or None)
        return self._decode(ApiEnvelope[ProductPage], data)

    def get_product(self, product_id: str) -> ApiEnvelope[Product]:
        data = self._request("GET", _product_path(product_id))
        return self._decode(ApiEnvelope[Product], data)

    def create_product(self, product: Product | Mapping[str, Any]) -> ApiEnvelope[Product]:
        data = self._request("POST", "products", json_body=_product_body(product))
        return self._decode(ApiEnvelope[Product], data)

    def update_product(self, product_id: str, product: Product | Mapping[str, Any]) -> ApiEnvelope[Product]:
        data = self._request("PUT", _product_path(product_id), json_body=_product_body(product))
        return self._decode(ApiEnvelope[Product], data)

    def delete_product(self, product_id: str) -> ApiEnvelope[Any]:
        data = self._request("DELETE", _product_path(product_id))
        return self._decode(ApiEnvelope[Any], data)

    def update_status(self, product_id: str, status: ProductStatus | str) -> ApiEnvelope[Product]:
        value = status.value if isinstance(status, ProductStatus) else str(status)
        data = self._request("PATCH", _product_path(product_id, "/status"), json_body={"status": value})
        return self._decode(ApiEnvelope[Product], data)


def build_product_params(query: ProductQuery | Mapping[str, Any] | None) -> dict[str, Any]:
    if query is None:
        return {}
    model = query if isinstance(query, ProductQuery) else ProductQuery.model_validate(query)
    return model.to_params()
