"""Pytest configuration and fixtures for integration tests."""

import logging
from decimal import Decimal
from typing import AsyncGenerator, Dict

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from apps.api.deps import get_order_service
from apps.api.main import app
from coffeeshop.application.services.order_service import OrderService
from coffeeshop.data.models import Base, ProductModel
from coffeeshop.domain.entities import Product


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

MENU = {
    "espresso": ("Espresso", Decimal("3.50")),
    "croissant": ("Croissant", Decimal("5.00")),
    "latte": ("Latte", Decimal("4.25")),
}


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    yield session_factory


@pytest_asyncio.fixture
async def products(test_session_factory) -> Dict[str, Product]:
    """Seed the product catalog and return it keyed by short name."""
    models = {key: ProductModel(name=name, price=price) for key, (name, price) in MENU.items()}
    async with test_session_factory() as session:
        session.add_all(models.values())
        await session.commit()

    return {
        key: Product(id=model.id, name=model.name, price=MENU[key][1])
        for key, model in models.items()
    }


@pytest.fixture
def service_logger() -> logging.Logger:
    return logging.getLogger("tests.order_service")


@pytest.fixture
def order_service(test_session_factory, service_logger) -> OrderService:
    """OrderService bound to the test database."""
    return OrderService(session_factory=test_session_factory, logger=service_logger)


@pytest_asyncio.fixture
async def test_client(order_service) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create API client with the order service bound to the test database."""
    # Override dependency
    app.dependency_overrides[get_order_service] = lambda: order_service

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
