"""
Order service error kinds.

Absence on single-order lookup is signaled with None, not with these.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure categories surfaced by OrderService."""

    NOT_FOUND = "not_found"
    REFERENCED_ENTITY_MISSING = "referenced_entity_missing"
    STORE_FAILURE = "store_failure"


class OrderServiceError(Exception):
    """Base class for all order service failures."""

    kind: ErrorKind = ErrorKind.STORE_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OrderNotFoundError(OrderServiceError):
    """Order targeted by an update does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, order_id: int):
        super().__init__(f"Order with ID {order_id} not found.")
        self.order_id = order_id


class ProductNotFoundError(OrderServiceError):
    """Line item references a product that does not exist."""

    kind = ErrorKind.REFERENCED_ENTITY_MISSING

    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found.")
        self.product_id = product_id


class StoreFailureError(OrderServiceError):
    """
    Underlying persistence failure.

    The original driver/ORM exception is chained as __cause__.
    """

    kind = ErrorKind.STORE_FAILURE

    def __init__(self, operation: str, detail: Optional[str] = None):
        message = f"Store failure during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
