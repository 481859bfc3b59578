"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order, OrderProduct


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Insert order header and assign its store-generated id.

        Args:
            order: Order aggregate to insert

        Returns:
            The same order with id populated
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Persist changed header fields of an existing order.

        Args:
            order: Order aggregate with id set
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order with line items and products.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """List every order with line items and products.

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def exists(self, order_id: int) -> bool:
        """Check if order exists.

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        pass

    @abstractmethod
    async def remove(self, order_id: int) -> None:
        """Delete order header row.

        Args:
            order_id: Order identifier
        """
        pass


class OrderProductRepository(ABC):
    """Abstract repository for order line items."""

    @abstractmethod
    async def add(self, order_product: OrderProduct) -> OrderProduct:
        """Insert line item and assign its store-generated id.

        Args:
            order_product: Line item with order_id assigned

        Returns:
            The same line item with id populated
        """
        pass

    @abstractmethod
    async def find_by_order_id(self, order_id: int) -> List[OrderProduct]:
        """List line items belonging to an order.

        Args:
            order_id: Parent order identifier

        Returns:
            Line items with products populated
        """
        pass

    @abstractmethod
    async def remove_all(self, order_id: int) -> int:
        """Delete every line item of an order.

        Args:
            order_id: Parent order identifier

        Returns:
            Number of rows removed
        """
        pass
