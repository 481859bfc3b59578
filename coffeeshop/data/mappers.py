"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal

from coffeeshop.domain.entities import Order, OrderProduct, Product

from .models import OrderModel, OrderProductModel, ProductModel


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
        )


class OrderProductMapper:
    """Static mapper for OrderProduct ↔ OrderProductModel transformation."""

    @staticmethod
    def to_domain(model: OrderProductModel) -> OrderProduct:
        """Convert ORM model to domain entity.

        The product relationship must already be loaded.

        Args:
            model: OrderProductModel instance

        Returns:
            OrderProduct domain entity
        """
        return OrderProduct(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            quantity=model.quantity,
            subtotal=Decimal(str(model.subtotal)),
            product=ProductMapper.to_domain(model.product) if model.product else None,
        )

    @staticmethod
    def to_persistence(entity: OrderProduct) -> OrderProductModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderProduct with order_id assigned

        Returns:
            OrderProductModel instance
        """
        return OrderProductModel(
            order_id=entity.order_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
            subtotal=entity.subtotal,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested line items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested line items).

        Args:
            model: OrderModel with order_products eagerly loaded

        Returns:
            Order domain aggregate
        """
        order_products = [
            OrderProductMapper.to_domain(op_model) for op_model in model.order_products
        ]

        return Order(
            id=model.id,
            user_id=model.user_id,
            total_amount=Decimal(str(model.total_amount)),
            order_products=order_products,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert order header to ORM model. Line items are persisted separately.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            user_id=entity.user_id,
            total_amount=entity.total_amount,
        )

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Copy changed header fields onto an existing ORM model.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.user_id = entity.user_id
        model.total_amount = entity.total_amount
        return model
