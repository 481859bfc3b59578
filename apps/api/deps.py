"""FastAPI dependencies for dependency injection."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coffeeshop.application.services.order_service import OrderService
from coffeeshop.infrastructure.database import get_session_factory as _db_session_factory
from coffeeshop.infrastructure.logging import get_logger


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return _db_session_factory()


def get_order_service() -> OrderService:
    """Get OrderService instance.

    Returns:
        OrderService instance
    """
    return OrderService(
        session_factory=get_session_factory(),
        logger=get_logger("coffeeshop.application.services.order_service"),
    )
