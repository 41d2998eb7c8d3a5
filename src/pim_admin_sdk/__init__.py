from .config import DEFAULT_API_BASE_URL, ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    AuthError,
    MissingTokenError,
    NotFoundError,
    ResponseDecodeError,
    TransportError,
    UnsuccessfulResponseError,
)
from .http_client import HttpClient
from .models import (
    ApiEnvelope,
    AuthResponse,
    PaginationMeta,
    Product,
    ProductPage,
    ProductQuery,
    ProductStatus,
    VariantAxis,
)
from .session import ApiSession
from .ui_errors import CONNECTION_ERROR_MESSAGE, UserFacingError, to_user_facing_error

__version__ = "1.0.0"

__all__ = [
    "ApiEnvelope",
    "ApiError",
    "ApiSession",
    "AuthError",
    "AuthResponse",
    "CONNECTION_ERROR_MESSAGE",
    "ClientConfig",
    "ConfigError",
    "DEFAULT_API_BASE_URL",
    "HttpClient",
    "MissingTokenError",
    "NotFoundError",
    "PaginationMeta",
    "Product",
    "ProductPage",
    "ProductQuery",
    "ProductStatus",
    "ResponseDecodeError",
    "TransportError",
    "UnsuccessfulResponseError",
    "UserFacingError",
    "VariantAxis",
    "load_config",
    "to_user_facing_error",
    "__version__",
]
