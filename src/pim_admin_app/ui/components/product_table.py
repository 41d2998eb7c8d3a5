from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pim_admin_sdk.models import Product

PRODUCT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("id", "ID"),
    ("name", "Name"),
    ("sku", "SKU"),
    ("price", "Price"),
    ("quantity", "Quantity"),
    ("status", "Status"),
    ("isFeatured", "Featured"),
)


@dataclass
class ProductTable:
    rows: list[Product]

    def columns(self) -> list[dict[str, str]]:
        return [{"key": key, "label": label} for key, label in PRODUCT_COLUMNS]

    def render(self) -> dict[str, Any]:
        rows = []
        for product in self.rows:
            payload = product.model_dump(mode="json", by_alias=True)
            rows.append({key: payload.get(key) for key, _ in PRODUCT_COLUMNS})
        return {
            "columns": self.columns(),
            "rows": rows,
            "count": len(self.rows),
        }
