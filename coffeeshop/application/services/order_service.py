"""Application service for Order operations."""

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from coffeeshop.data.uow import UnitOfWork, create_uow
from coffeeshop.domain.entities import Order, OrderProduct
from coffeeshop.domain.errors import (
    OrderNotFoundError,
    ProductNotFoundError,
    StoreFailureError,
)
from coffeeshop.infrastructure.logging import get_logger


class OrderService:
    """
    Application service for the order lifecycle.

    Responsibilities:
    - Create orders with line items atomically, computing subtotals and total
    - Read orders with line items and products expanded
    - Replace line items on update
    - Cascade line item removal on delete

    Every operation opens its own UnitOfWork. Failures are logged once and
    re-raised; store errors are wrapped in StoreFailureError.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize order service.

        Args:
            session_factory: SQLAlchemy async session factory
            logger: Logger to report to (defaults to the module logger)
        """
        self._session_factory = session_factory
        self._logger = logger or get_logger(__name__)

    def _uow(self) -> UnitOfWork:
        return create_uow(self._session_factory)

    async def get_all_orders(self) -> List[Order]:
        """Fetch every order with line items and products.

        Returns:
            List of orders, empty if none exist
        """
        self._logger.info("Fetching all orders")
        try:
            async with self._uow() as uow:
                orders = await uow.orders.find_all()
        except SQLAlchemyError as e:
            self._logger.error(f"Error fetching orders: {e}")
            raise StoreFailureError("get_all_orders", str(e)) from e

        self._logger.info(f"Total orders fetched: {len(orders)}")
        return orders

    async def get_order_by_id(self, order_id: int) -> Optional[Order]:
        """Fetch a single order.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        self._logger.info(f"Fetching order with ID: {order_id}")
        try:
            async with self._uow() as uow:
                order = await uow.orders.find_by_id(order_id)
        except SQLAlchemyError as e:
            self._logger.error(f"Error fetching order with ID {order_id}: {e}")
            raise StoreFailureError("get_order_by_id", str(e)) from e

        if order is None:
            self._logger.warning(f"Order with ID {order_id} not found.")
        else:
            self._logger.info(f"Order with ID {order_id} found.")
        return order

    async def create_order(self, order: Order, order_products: List[OrderProduct]) -> Order:
        """Create an order and its line items in one transaction.

        Args:
            order: Order header (user_id set; id and total are assigned here)
            order_products: Line items referencing existing products

        Returns:
            The persisted order with id, total and resolved line items

        Raises:
            ProductNotFoundError: If any line item references a missing product
            StoreFailureError: If the database rejects the operation
        """
        self._logger.info(f"Creating order for user with ID: {order.user_id}")
        try:
            async with self._uow() as uow:
                order.total_amount = Decimal("0.00")
                await uow.orders.add(order)

                total_amount = await self._persist_order_products(uow, order, order_products)

                order.total_amount = total_amount
                self._logger.info(f"Total amount for order ID {order.id}: {total_amount}")

                await uow.orders.update(order)
                await uow.save_changes()
                await uow.commit()
        except ProductNotFoundError as e:
            self._logger.error(f"Error creating order: {e}")
            self._discard_created(order, order_products)
            raise
        except SQLAlchemyError as e:
            self._logger.error(f"Error creating order: {e}")
            self._discard_created(order, order_products)
            raise StoreFailureError("create_order", str(e)) from e

        self._logger.info(f"Order with ID: {order.id} successfully saved to the database.")
        return order

    async def update_order(self, order: Order, order_products: List[OrderProduct]) -> Order:
        """Update order header and replace all of its line items.

        Args:
            order: Order with id set and changed header fields
            order_products: Replacement line items

        Returns:
            The updated order with recomputed total

        Raises:
            OrderNotFoundError: If the order does not exist
            ProductNotFoundError: If any line item references a missing product
            StoreFailureError: If the database rejects the operation
        """
        self._logger.info(f"Updating order for user with ID: {order.user_id}")
        try:
            async with self._uow() as uow:
                if not await uow.orders.exists(order.id):
                    raise OrderNotFoundError(order.id)

                removed = await uow.order_products.remove_all(order.id)
                self._logger.info(f"Removed {removed} existing line items from order {order.id}")

                order.total_amount = await self._persist_order_products(uow, order, order_products)

                await uow.orders.update(order)
                await uow.save_changes()
                await uow.commit()
        except (OrderNotFoundError, ProductNotFoundError) as e:
            self._logger.error(f"Error updating order with ID {order.id}: {e}")
            self._unbind_order_products(order_products)
            raise
        except SQLAlchemyError as e:
            self._logger.error(f"Error updating order with ID {order.id}: {e}")
            self._unbind_order_products(order_products)
            raise StoreFailureError("update_order", str(e)) from e

        self._logger.info(f"Order updated with ID: {order.id}")
        return order

    async def delete_order(self, order_id: int) -> None:
        """Delete an order and all of its line items.

        Deleting a missing order is a no-op.

        Args:
            order_id: Order identifier

        Raises:
            StoreFailureError: If the database rejects the operation
        """
        try:
            async with self._uow() as uow:
                if not await uow.orders.exists(order_id):
                    self._logger.warning(f"Order with ID {order_id} not found for deletion.")
                    return

                await uow.order_products.remove_all(order_id)
                await uow.orders.remove(order_id)

                await uow.save_changes()
                await uow.commit()
        except SQLAlchemyError as e:
            self._logger.error(f"Error deleting order with ID {order_id}: {e}")
            raise StoreFailureError("delete_order", str(e)) from e

        self._logger.info(f"Order deleted with ID: {order_id}")

    async def _persist_order_products(
        self,
        uow: UnitOfWork,
        order: Order,
        order_products: List[OrderProduct],
    ) -> Decimal:
        """Resolve products, compute subtotals and insert line items.

        Returns:
            Sum of all subtotals
        """
        order.assign_order_products(order_products)

        for order_product in order.order_products:
            self._logger.info(f"Processing product with ID: {order_product.product_id}")

            product = await uow.products.find_by_id(order_product.product_id)
            if product is None:
                self._logger.error(f"Product with ID {order_product.product_id} not found.")
                raise ProductNotFoundError(order_product.product_id)

            subtotal = order_product.attach_product(product)
            self._logger.info(
                f"Product found: {product.name}, Quantity: {order_product.quantity}, "
                f"Subtotal: {subtotal}"
            )
            await uow.order_products.add(order_product)

        return order.recalculate_total()

    @staticmethod
    def _unbind_order_products(order_products: List[OrderProduct]) -> None:
        """Clear ids flushed inside a transaction that was rolled back."""
        for order_product in order_products:
            order_product.id = None
            order_product.order_id = None

    def _discard_created(self, order: Order, order_products: List[OrderProduct]) -> None:
        self._unbind_order_products(order_products)
        order.id = None
        order.order_products = []
        order.total_amount = Decimal("0.00")
