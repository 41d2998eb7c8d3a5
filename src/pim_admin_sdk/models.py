from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from .compat import KEY_FALLBACKS_V1, canonicalize_keys
from .exceptions import UnsuccessfulResponseError

T = TypeVar("T")


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class ProductStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class VariantAxis(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    values: List[str] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def _single_value_as_list(cls, value: Any) -> Any:
        return _as_list(value)


class Product(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: str | None = None
    name: str | None = None
    sku: str | None = None
    description: str | None = None
    price: Decimal | None = None
    quantity: int | None = None
    url_key: str | None = Field(default=None, alias="urlKey")
    is_featured: bool | None = Field(default=None, alias="isFeatured")
    # Free-form on the wire; see ProductStatus for the values the backend documents.
    status: str | None = None
    variant_axes: List[VariantAxis] = Field(default_factory=list, alias="variantAxes")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def _canonical_keys(cls, data: Any) -> Any:
        return canonicalize_keys(data, KEY_FALLBACKS_V1["product"])

    @field_validator("variant_axes", mode="before")
    @classmethod
    def _single_axis_as_list(cls, value: Any) -> Any:
        return _as_list(value)

    @field_serializer("price", when_used="json-unless-none")
    def _price_as_number(self, value: Decimal) -> float:
        return float(value)

    @property
    def status_enum(self) -> ProductStatus | None:
        try:
            return ProductStatus(self.status) if self.status is not None else None
        except ValueError:
            return None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AuthResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    access_token: str | None = Field(default=None, alias="accessToken")
    refresh_token: str | None = Field(default=None, alias="refreshToken")
    user: Any = None

    @model_validator(mode="before")
    @classmethod
    def _canonical_keys(cls, data: Any) -> Any:
        return canonicalize_keys(data, KEY_FALLBACKS_V1["auth"])


class PaginationMeta(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_items: int = Field(default=0, alias="totalItems")
    item_count: int = Field(default=0, alias="itemCount")
    items_per_page: int = Field(default=20, alias="itemsPerPage")
    total_pages: int = Field(default=1, alias="totalPages")
    current_page: int = Field(default=1, alias="currentPage")

    @model_validator(mode="before")
    @classmethod
    def _canonical_keys(cls, data: Any) -> Any:
        return canonicalize_keys(data, KEY_FALLBACKS_V1["pagination"])


def _single_page(items: list[Any]) -> dict[str, Any]:
    count = len(items)
    return {
        "items": items,
        "meta": {
            "totalItems": count,
            "itemCount": count,
            "itemsPerPage": count,
            "totalPages": 1,
            "currentPage": 1,
        },
    }


class ProductPage(BaseModel):
    """Product list payload.

    The backend returns either a bare array of products or a paginated
    ``{"items": [...], "meta": {...}}`` object; both decode to this model.
    A bare array is treated as a single page holding every item, and a lone
    product object as a page of one.
    """

    model_config = ConfigDict(extra="ignore")

    items: List[Product] = Field(default_factory=list)
    meta: PaginationMeta = Field(default_factory=PaginationMeta)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return _single_page(list(data))
        if isinstance(data, dict) and data and "items" not in data and "meta" not in data:
            # A single product object stands for a one-item list.
            return _single_page([data])
        if isinstance(data, dict) and "meta" not in data:
            items = _as_list(data.get("items"))
            return {**data, "items": items, "meta": {"totalItems": len(items), "itemCount": len(items)}}
        return data

    @field_validator("items", mode="before")
    @classmethod
    def _items_as_list(cls, value: Any) -> Any:
        return _as_list(value)


class ProductQuery(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    page: int | None = None
    limit: int | None = None
    search: str | None = None
    status: str | None = None
    sku: str | None = None
    sort_by: str | None = Field(default=None, alias="sortBy")
    sort_order: SortOrder | None = Field(default=None, alias="sortOrder")

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ApiEnvelope(BaseModel, Generic[T]):
    """``{success, message, data}`` wrapper around every backend response."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    message: Optional[str] = None
    data: Optional[T] = None

    def require_success(self, default_message: str = "Request was not successful") -> Optional[T]:
        if not self.success:
            raise UnsuccessfulResponseError(
                code="UNSUCCESSFUL_RESPONSE",
                message=self.message or default_message,
                raw_payload=self.model_dump(mode="json"),
            )
        return self.data

    def require_data(self, default_message: str = "Request was not successful") -> T:
        data = self.require_success(default_message)
        if data is None:
            raise UnsuccessfulResponseError(
                code="EMPTY_RESPONSE",
                message=self.message or default_message,
                raw_payload=self.model_dump(mode="json"),
            )
        return data
