"""Product catalog entry."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """Catalog item referenced by order line items. Read-only for orders."""
    id: Optional[int]
    name: str
    price: Decimal
