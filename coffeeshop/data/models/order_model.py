"""SQLAlchemy ORM models for Order aggregate."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship to line items
    order_products = relationship(
        "OrderProductModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderProductModel.id",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, user_id={self.user_id}, total={self.total_amount})>"


class OrderProductModel(Base):
    """SQLAlchemy ORM model for order_products table."""

    __tablename__ = "order_products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)

    order = relationship("OrderModel", back_populates="order_products")
    product = relationship("ProductModel", back_populates="order_products")

    def __repr__(self):
        return (
            f"<OrderProductModel(id={self.id}, order_id={self.order_id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )
