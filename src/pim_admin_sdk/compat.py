"""Canonical decoding of payload keys the backend spells more than one way.

Older backend builds emitted snake_case keys (``access_token``) where newer
ones emit camelCase (``accessToken``); some emit both. Each model declares
the camelCase key as canonical and runs :func:`canonicalize_keys` once,
before field validation, against a versioned fallback table. A new backend
revision that renames keys again gets a new table rather than an edit to
this one.
"""

from __future__ import annotations

from typing import Any, Mapping

KeyFallbacks = Mapping[str, tuple[str, ...]]

COMPAT_VERSION = 1

KEY_FALLBACKS_V1: dict[str, KeyFallbacks] = {
    "auth": {
        "accessToken": ("access_token",),
        "refreshToken": ("refresh_token",),
    },
    "product": {
        "urlKey": ("url_key",),
        "isFeatured": ("is_featured",),
        "variantAxes": ("variant_axes",),
        "createdAt": ("created_at",),
        "updatedAt": ("updated_at",),
    },
    "pagination": {
        "totalItems": ("total_items", "total"),
        "itemCount": ("item_count", "count"),
        "itemsPerPage": ("items_per_page", "limit"),
        "totalPages": ("total_pages",),
        "currentPage": ("current_page", "page"),
    },
}


def canonicalize_keys(data: Any, fallbacks: KeyFallbacks) -> Any:
    """Return a copy of ``data`` with legacy keys folded into canonical ones.

    The canonical value wins unless it is missing or null; otherwise the first
    non-null legacy spelling, in table order, is used. Legacy keys are always
    dropped. Non-mapping input is returned untouched.
    """
    if not isinstance(data, Mapping):
        return data
    result = dict(data)
    for canonical, legacy_keys in fallbacks.items():
        value = result.get(canonical)
        for legacy in legacy_keys:
            legacy_value = result.pop(legacy, None)
            if value is None and legacy_value is not None:
                value = legacy_value
        if value is not None or canonical in result:
            result[canonical] = value
    return result
