"""Database models."""

from .base import Base
from .order_model import OrderModel, OrderProductModel
from .product_model import ProductModel

__all__ = ["Base", "OrderModel", "OrderProductModel", "ProductModel"]
