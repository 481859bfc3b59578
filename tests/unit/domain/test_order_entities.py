"""Tests for Order aggregate and line item calculations."""

from decimal import Decimal

import pytest

from coffeeshop.domain.entities import Order, OrderProduct, Product
from coffeeshop.domain.errors import (
    ErrorKind,
    OrderNotFoundError,
    OrderServiceError,
    ProductNotFoundError,
    StoreFailureError,
)


class TestOrderProduct:
    """Test line item behaviour."""

    def test_attach_product_computes_subtotal(self):
        line = OrderProduct(product_id=1, quantity=3)
        product = Product(id=1, name="Espresso", price=Decimal("3.50"))

        subtotal = line.attach_product(product)

        assert subtotal == Decimal("10.50")
        assert line.subtotal == Decimal("10.50")
        assert line.product is product

    def test_attach_wrong_product_rejected(self):
        line = OrderProduct(product_id=1, quantity=1)

        with pytest.raises(ValueError):
            line.attach_product(Product(id=2, name="Latte", price=Decimal("4.00")))

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValueError):
            OrderProduct(product_id=1, quantity=quantity)


class TestOrder:
    """Test order total and line item binding."""

    def test_recalculate_total(self):
        espresso = Product(id=1, name="Espresso", price=Decimal("3.50"))
        croissant = Product(id=2, name="Croissant", price=Decimal("5.00"))
        lines = [OrderProduct(product_id=1, quantity=2), OrderProduct(product_id=2, quantity=1)]
        lines[0].attach_product(espresso)
        lines[1].attach_product(croissant)

        order = Order(user_id=7, order_products=lines)

        assert order.recalculate_total() == Decimal("12.00")
        assert order.total_amount == Decimal("12.00")

    def test_recalculate_total_empty(self):
        order = Order(user_id=7)
        assert order.recalculate_total() == Decimal("0.00")

    def test_assign_order_products_stamps_order_id(self):
        order = Order(user_id=7, id=42)
        lines = [OrderProduct(product_id=1, quantity=1), OrderProduct(product_id=2, quantity=5)]

        order.assign_order_products(lines)

        assert [line.order_id for line in order.order_products] == [42, 42]


class TestErrors:
    """Test error kinds."""

    def test_error_kinds(self):
        assert OrderNotFoundError(1).kind is ErrorKind.NOT_FOUND
        assert ProductNotFoundError(2).kind is ErrorKind.REFERENCED_ENTITY_MISSING
        assert StoreFailureError("create_order").kind is ErrorKind.STORE_FAILURE

    def test_errors_share_base(self):
        for error in (OrderNotFoundError(1), ProductNotFoundError(2), StoreFailureError("x")):
            assert isinstance(error, OrderServiceError)

    def test_messages(self):
        assert str(ProductNotFoundError(5)) == "Product with ID 5 not found."
        assert str(StoreFailureError("delete_order", "disk I/O error")) == (
            "Store failure during delete_order: disk I/O error"
        )
