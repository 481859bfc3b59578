"""Integration tests for Orders API endpoints."""

from decimal import Decimal

import httpx
import pytest


def _order_payload(products, user_id=7):
    return {
        "user_id": user_id,
        "items": [
            {"product_id": products["espresso"].id, "quantity": 2},
            {"product_id": products["croissant"].id, "quantity": 1},
        ],
    }


@pytest.mark.asyncio
async def test_create_order_success(test_client: httpx.AsyncClient, products):
    """Test POST /orders endpoint - successful order creation."""
    response = await test_client.post("/api/v1/orders", json=_order_payload(products))

    assert response.status_code == 201, f"Expected 201, got {response.status_code}: {response.text}"

    data = response.json()
    assert data["user_id"] == 7
    assert Decimal(data["total_amount"]) == Decimal("12.00")
    assert len(data["order_products"]) == 2
    assert data["order_products"][0]["product"]["name"] == "Espresso"
    assert all(op["order_id"] == data["id"] for op in data["order_products"])

    # Verify data persistence by retrieving the order
    get_response = await test_client.get(f"/api/v1/orders/{data['id']}")
    assert get_response.status_code == 200
    assert Decimal(get_response.json()["total_amount"]) == Decimal("12.00")


@pytest.mark.asyncio
async def test_create_order_missing_product(test_client: httpx.AsyncClient, products):
    payload = {"user_id": 7, "items": [{"product_id": 9999, "quantity": 1}]}

    response = await test_client.post("/api/v1/orders", json=payload)

    assert response.status_code == 404
    assert "9999" in response.json()["detail"]

    list_response = await test_client.get("/api/v1/orders")
    assert list_response.json() == []


@pytest.mark.asyncio
async def test_create_order_rejects_zero_quantity(test_client: httpx.AsyncClient, products):
    payload = {"user_id": 7, "items": [{"product_id": products["latte"].id, "quantity": 0}]}

    response = await test_client.post("/api/v1/orders", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_order_not_found(test_client: httpx.AsyncClient):
    """Test GET /orders/{order_id} with non-existent order."""
    response = await test_client.get("/api/v1/orders/4040")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"].lower()


@pytest.mark.asyncio
async def test_list_orders(test_client: httpx.AsyncClient, products):
    """Test GET /orders endpoint - list orders."""
    for user_id in range(3):
        create_response = await test_client.post(
            "/api/v1/orders", json=_order_payload(products, user_id=user_id)
        )
        assert create_response.status_code == 201

    response = await test_client.get("/api/v1/orders")

    assert response.status_code == 200
    orders = response.json()
    assert [o["user_id"] for o in orders] == [0, 1, 2]


@pytest.mark.asyncio
async def test_update_order(test_client: httpx.AsyncClient, products):
    created = (await test_client.post("/api/v1/orders", json=_order_payload(products))).json()

    response = await test_client.put(
        f"/api/v1/orders/{created['id']}",
        json={"user_id": 8, "items": [{"product_id": products["latte"].id, "quantity": 4}]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == 8
    assert Decimal(data["total_amount"]) == Decimal("17.00")

    stored = (await test_client.get(f"/api/v1/orders/{created['id']}")).json()
    assert [op["product_id"] for op in stored["order_products"]] == [products["latte"].id]


@pytest.mark.asyncio
async def test_update_missing_order(test_client: httpx.AsyncClient, products):
    response = await test_client.put(
        "/api/v1/orders/555",
        json={"user_id": 8, "items": [{"product_id": products["latte"].id, "quantity": 1}]},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_order(test_client: httpx.AsyncClient, products):
    created = (await test_client.post("/api/v1/orders", json=_order_payload(products))).json()

    response = await test_client.delete(f"/api/v1/orders/{created['id']}")
    assert response.status_code == 204

    get_response = await test_client.get(f"/api/v1/orders/{created['id']}")
    assert get_response.status_code == 404

    # Deleting again is a no-op
    repeat = await test_client.delete(f"/api/v1/orders/{created['id']}")
    assert repeat.status_code == 204


@pytest.mark.asyncio
async def test_health(test_client: httpx.AsyncClient):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
