"""Repository interface for the read-only product catalog."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.product import Product


class ProductRepository(ABC):
    """Read-only product lookups."""

    @abstractmethod
    async def find_by_id(self, product_id: int) -> Optional[Product]:
        """Retrieve product by identifier.

        Args:
            product_id: Product identifier

        Returns:
            Product if found, None otherwise
        """
        pass
