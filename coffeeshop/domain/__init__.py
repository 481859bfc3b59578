"""Domain layer - entities, repository interfaces and error kinds."""

from .entities import Order, OrderProduct, Product
from .errors import (
    ErrorKind,
    OrderNotFoundError,
    OrderServiceError,
    ProductNotFoundError,
    StoreFailureError,
)

__all__ = [
    "ErrorKind",
    "Order",
    "OrderNotFoundError",
    "OrderProduct",
    "OrderServiceError",
    "Product",
    "ProductNotFoundError",
    "StoreFailureError",
]
