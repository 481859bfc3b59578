"""SQLAlchemy repository implementations."""

from .order_repository_impl import SqlAlchemyOrderProductRepository, SqlAlchemyOrderRepository
from .product_repository_impl import SqlAlchemyProductRepository

__all__ = [
    "SqlAlchemyOrderProductRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
]
