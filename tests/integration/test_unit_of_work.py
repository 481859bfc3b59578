"""Tests for UnitOfWork transaction handling."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from coffeeshop.data.models import OrderModel
from coffeeshop.data.uow import UnitOfWork, create_uow
from coffeeshop.domain.entities import Order, OrderProduct


@pytest.mark.asyncio
async def test_repositories_require_context(test_session_factory):
    uow = create_uow(test_session_factory)

    with pytest.raises(RuntimeError):
        uow.orders


@pytest.mark.asyncio
async def test_uncommitted_changes_are_discarded(test_session_factory):
    async with UnitOfWork(test_session_factory) as uow:
        order = await uow.orders.add(Order(user_id=1))
        assert order.id is not None

    async with test_session_factory() as session:
        assert await session.scalar(select(func.count()).select_from(OrderModel)) == 0


@pytest.mark.asyncio
async def test_exception_rolls_back(test_session_factory):
    with pytest.raises(RuntimeError):
        async with UnitOfWork(test_session_factory) as uow:
            await uow.orders.add(Order(user_id=1))
            raise RuntimeError("boom")

    async with test_session_factory() as session:
        assert await session.scalar(select(func.count()).select_from(OrderModel)) == 0


@pytest.mark.asyncio
async def test_commit_persists_and_line_item_queries(test_session_factory, products):
    espresso = products["espresso"]

    async with UnitOfWork(test_session_factory) as uow:
        order = await uow.orders.add(Order(user_id=5))
        line = OrderProduct(product_id=espresso.id, quantity=2, order_id=order.id)
        line.attach_product(espresso)
        await uow.order_products.add(line)
        await uow.commit()

    async with UnitOfWork(test_session_factory) as uow:
        lines = await uow.order_products.find_by_order_id(order.id)
        assert [(op.product.name, op.subtotal) for op in lines] == [("Espresso", Decimal("7.00"))]

        assert await uow.order_products.remove_all(order.id) == 1
        await uow.save_changes()
        assert await uow.order_products.find_by_order_id(order.id) == []


@pytest.mark.asyncio
async def test_line_item_requires_order(test_session_factory):
    async with UnitOfWork(test_session_factory) as uow:
        with pytest.raises(ValueError):
            await uow.order_products.add(OrderProduct(product_id=1, quantity=1))
