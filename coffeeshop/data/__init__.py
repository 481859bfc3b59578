"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderMapper, OrderProductMapper, ProductMapper
from .models import Base, OrderModel, OrderProductModel, ProductModel
from .repositories import (
    SqlAlchemyOrderProductRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderMapper",
    "OrderModel",
    "OrderProductMapper",
    "OrderProductModel",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyOrderProductRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "UnitOfWork",
]
