"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from coffeeshop.domain.entities import Order, OrderProduct, Product


class OrderProductRequest(BaseModel):
    """Line item as supplied by the caller."""

    product_id: int = Field(..., description="Referenced product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}

    def to_domain(self) -> OrderProduct:
        return OrderProduct(product_id=self.product_id, quantity=self.quantity)


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    user_id: int = Field(..., description="Owning user ID")
    items: List[OrderProductRequest] = Field(default_factory=list, description="Line items")

    model_config = {"frozen": True}

    def to_domain(self) -> tuple[Order, List[OrderProduct]]:
        """Split request into order header and line items."""
        return Order(user_id=self.user_id), [item.to_domain() for item in self.items]


class UpdateOrderRequest(CreateOrderRequest):
    """Request DTO for replacing an order's header and line items."""

    def to_domain_for(self, order_id: int) -> tuple[Order, List[OrderProduct]]:
        order, order_products = self.to_domain()
        order.id = order_id
        return order, order_products


class ProductDTO(BaseModel):
    """Response DTO for a product."""

    id: int
    name: str
    price: Decimal

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, product: Product) -> "ProductDTO":
        return cls(id=product.id, name=product.name, price=product.price)


class OrderProductDTO(BaseModel):
    """Response DTO for a line item."""

    id: Optional[int] = None
    order_id: int
    product_id: int
    quantity: int = Field(..., gt=0)
    subtotal: Decimal = Field(..., ge=0)
    product: Optional[ProductDTO] = None

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order_product: OrderProduct) -> "OrderProductDTO":
        return cls(
            id=order_product.id,
            order_id=order_product.order_id,
            product_id=order_product.product_id,
            quantity=order_product.quantity,
            subtotal=order_product.subtotal,
            product=ProductDTO.from_domain(order_product.product)
            if order_product.product
            else None,
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: int = Field(..., description="Order ID")
    user_id: int = Field(..., description="Owning user ID")
    total_amount: Decimal = Field(..., ge=0, description="Sum of line item subtotals")
    order_products: List[OrderProductDTO] = Field(default_factory=list, description="Line items")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            user_id=order.user_id,
            total_amount=order.total_amount,
            order_products=[OrderProductDTO.from_domain(op) for op in order.order_products],
        )
