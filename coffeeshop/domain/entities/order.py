"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .product import Product


@dataclass
class OrderProduct:
    """Line item linking an order to a product."""
    product_id: int
    quantity: int
    id: Optional[int] = None
    order_id: Optional[int] = None
    product: Optional[Product] = None
    subtotal: Decimal = Decimal("0.00")

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {self.quantity}")

    def attach_product(self, product: Product) -> Decimal:
        """Bind the resolved product and compute subtotal = price x quantity."""
        if product.id != self.product_id:
            raise ValueError(
                f"Product {product.id} does not match line item product {self.product_id}"
            )
        self.product = product
        self.subtotal = product.price * self.quantity
        return self.subtotal


@dataclass
class Order:
    """
    Order aggregate root.

    The total is always derived from the line items, never supplied by
    the caller.
    """
    user_id: int
    id: Optional[int] = None
    total_amount: Decimal = Decimal("0.00")
    order_products: List[OrderProduct] = field(default_factory=list)

    def assign_order_products(self, order_products: List[OrderProduct]) -> None:
        """Replace line items, stamping this order's id on each."""
        for order_product in order_products:
            order_product.order_id = self.id
        self.order_products = list(order_products)

    def recalculate_total(self) -> Decimal:
        """Sum all line item subtotals into total_amount."""
        self.total_amount = sum(
            (op.subtotal for op in self.order_products), Decimal("0.00")
        )
        return self.total_amount
