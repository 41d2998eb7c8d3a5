from .auth import AuthClient
from .base import BaseClient
from .products import ProductsClient, build_product_params

__all__ = [
    "AuthClient",
    "BaseClient",
    "ProductsClient",
    "build_product_params",
]
