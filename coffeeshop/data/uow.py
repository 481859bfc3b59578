"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coffeeshop.infrastructure.logging import get_logger

from .repositories import (
    SqlAlchemyOrderProductRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)


logger = get_logger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            order = await uow.orders.add(order)
            await uow.save_changes()
            await uow.commit()

    Leaving the block without commit() discards pending changes.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._order_product_repository: Optional[SqlAlchemyOrderProductRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        await self._session.begin()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        try:
            if exc_type is not None:
                logger.error(f"Transaction failed: {exc_val}")
                await self.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._order_repository = None
            self._order_product_repository = None
            self._product_repository = None

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        session = self._require_session()
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(session)
        return self._order_repository

    @property
    def order_products(self) -> SqlAlchemyOrderProductRepository:
        """Lazy-load line item repository.

        Returns:
            SqlAlchemyOrderProductRepository instance
        """
        session = self._require_session()
        if self._order_product_repository is None:
            self._order_product_repository = SqlAlchemyOrderProductRepository(session)
        return self._order_product_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository.

        Returns:
            SqlAlchemyProductRepository instance
        """
        session = self._require_session()
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(session)
        return self._product_repository

    async def save_changes(self) -> None:
        """Flush pending changes to the database without committing."""
        await self._require_session().flush()

    async def commit(self) -> None:
        """Commit all pending changes."""
        session = self._require_session()
        try:
            await session.commit()
            logger.info("Transaction committed")
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self._require_session().rollback()
        logger.warning("Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
