"""Data Transfer Objects for the application layer."""

from .order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderProductDTO,
    OrderProductRequest,
    ProductDTO,
    UpdateOrderRequest,
)

__all__ = [
    "CreateOrderRequest",
    "OrderDTO",
    "OrderProductDTO",
    "OrderProductRequest",
    "ProductDTO",
    "UpdateOrderRequest",
]
