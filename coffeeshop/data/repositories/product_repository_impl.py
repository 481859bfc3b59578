"""SQLAlchemy implementation of ProductRepository."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from coffeeshop.domain.entities import Product
from coffeeshop.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Read-only product lookups backed by the products table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        """Retrieve product by identifier.

        Args:
            product_id: Product identifier

        Returns:
            Product if found, None otherwise
        """
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return None
        return ProductMapper.to_domain(model)
