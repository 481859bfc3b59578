"""
Verify database setup.

Seeds the product catalog if it is empty, then runs one order through
create, read, update and delete.
"""
import asyncio
import logging
from decimal import Decimal

from sqlalchemy import func, select

from coffeeshop.application.services.order_service import OrderService
from coffeeshop.data.models import ProductModel
from coffeeshop.domain.entities import Order, OrderProduct
from coffeeshop.infrastructure.database.config import close_database, get_session_factory, init_database


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


MENU = [
    ("Espresso", Decimal("2.50")),
    ("Cappuccino", Decimal("3.50")),
    ("Latte", Decimal("4.00")),
    ("Croissant", Decimal("5.00")),
]


async def seed_products(session_factory) -> list[int]:
    """Insert the default menu when the products table is empty."""
    async with session_factory() as session:
        count = await session.scalar(select(func.count()).select_from(ProductModel))
        if not count:
            session.add_all(ProductModel(name=name, price=price) for name, price in MENU)
            await session.commit()
            logger.info(f"Seeded {len(MENU)} products")

        result = await session.execute(select(ProductModel.id).order_by(ProductModel.id))
        return list(result.scalars().all())


async def verify_database():
    """Run an order through its whole lifecycle."""

    logger.info("=" * 80)
    logger.info("DATABASE VERIFICATION")
    logger.info("=" * 80)

    try:
        await init_database()
        session_factory = get_session_factory()
        product_ids = await seed_products(session_factory)

        service = OrderService(session_factory)

        order = await service.create_order(
            Order(user_id=1),
            [
                OrderProduct(product_id=product_ids[0], quantity=2),
                OrderProduct(product_id=product_ids[1], quantity=1),
            ],
        )
        logger.info(f"Created order {order.id} with total {order.total_amount}")

        retrieved = await service.get_order_by_id(order.id)
        assert retrieved is not None, "Order not found after create"
        assert retrieved.total_amount == order.total_amount

        order.user_id = 2
        await service.update_order(order, [OrderProduct(product_id=product_ids[-1], quantity=3)])
        retrieved = await service.get_order_by_id(order.id)
        logger.info(
            f"Updated order {retrieved.id}: "
            f"{len(retrieved.order_products)} line items, total {retrieved.total_amount}"
        )

        await service.delete_order(order.id)
        assert await service.get_order_by_id(order.id) is None, "Order still present after delete"

        logger.info("All database checks passed")

    except Exception as e:
        logger.error(f"Database verification failed: {e}", exc_info=True)
        raise

    finally:
        await close_database()


if __name__ == "__main__":
    asyncio.run(verify_database())
