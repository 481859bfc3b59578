"""Repository interfaces."""

from .order_repository import OrderProductRepository, OrderRepository
from .product_repository import ProductRepository

__all__ = ["OrderProductRepository", "OrderRepository", "ProductRepository"]
