"""SQLAlchemy ORM model for the product catalog."""

from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    order_products = relationship("OrderProductModel", back_populates="product")

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"
