"""SQLAlchemy implementations of OrderRepository and OrderProductRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coffeeshop.domain.entities import Order, OrderProduct
from coffeeshop.domain.repositories import OrderProductRepository, OrderRepository

from ..mappers import OrderMapper, OrderProductMapper
from ..models import OrderModel, OrderProductModel


logger = logging.getLogger(__name__)


def _order_with_products():
    """Order query with line items and their products eagerly loaded."""
    return select(OrderModel).options(
        selectinload(OrderModel.order_products).selectinload(OrderProductModel.product)
    )


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> Order:
        """Insert order header and flush to obtain its id.

        Args:
            order: Order domain aggregate

        Returns:
            Order with id populated
        """
        order_model = OrderMapper.to_persistence(order)
        self._session.add(order_model)
        await self._session.flush()  # Propagate to DB without committing

        order.id = order_model.id
        logger.debug(f"Inserted order header: {order.id}")
        return order

    async def update(self, order: Order) -> None:
        """Copy header fields onto the stored row.

        Args:
            order: Order domain aggregate with id set
        """
        existing = await self._session.get(OrderModel, order.id)
        if existing is None:
            raise LookupError(f"Order {order.id} does not exist")

        OrderMapper.update_persistence(order, existing)
        self._session.add(existing)

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        result = await self._session.execute(
            _order_with_products().where(OrderModel.id == order_id)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def find_all(self) -> List[Order]:
        """List every order.

        Returns:
            List of Order aggregates
        """
        result = await self._session.execute(_order_with_products().order_by(OrderModel.id))
        models = result.scalars().all()

        return [OrderMapper.to_domain(model) for model in models]

    async def exists(self, order_id: int) -> bool:
        """Check if order exists.

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        result = await self._session.execute(
            select(OrderModel.id).where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none() is not None

    async def remove(self, order_id: int) -> None:
        """Mark order header row for deletion.

        Args:
            order_id: Order identifier
        """
        existing = await self._session.get(OrderModel, order_id)
        if existing is not None:
            await self._session.delete(existing)


class SqlAlchemyOrderProductRepository(OrderProductRepository):
    """Concrete implementation of OrderProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, order_product: OrderProduct) -> OrderProduct:
        """Insert line item and flush to obtain its id.

        Args:
            order_product: Line item with order_id assigned

        Returns:
            Line item with id populated
        """
        if order_product.order_id is None:
            raise ValueError("Line item must be bound to an order before persisting")

        model = OrderProductMapper.to_persistence(order_product)
        self._session.add(model)
        await self._session.flush()

        order_product.id = model.id
        return order_product

    async def find_by_order_id(self, order_id: int) -> List[OrderProduct]:
        """List line items of an order.

        Args:
            order_id: Parent order identifier

        Returns:
            Line items with products populated
        """
        result = await self._session.execute(
            select(OrderProductModel)
            .options(selectinload(OrderProductModel.product))
            .where(OrderProductModel.order_id == order_id)
            .order_by(OrderProductModel.id)
        )
        return [OrderProductMapper.to_domain(model) for model in result.scalars().all()]

    async def remove_all(self, order_id: int) -> int:
        """Mark every line item of an order for deletion.

        Args:
            order_id: Parent order identifier

        Returns:
            Number of line items removed
        """
        result = await self._session.execute(
            select(OrderProductModel).where(OrderProductModel.order_id == order_id)
        )
        models = result.scalars().all()

        for model in models:
            await self._session.delete(model)

        return len(models)
