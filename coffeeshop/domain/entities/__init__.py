"""Domain entities."""

from .order import Order, OrderProduct
from .product import Product

__all__ = ["Order", "OrderProduct", "Product"]
