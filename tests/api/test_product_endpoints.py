"""
API endpoint tests for products
"""

import pytest


@pytest.mark.asyncio
async def test_create_then_get_product(client):
    response = await client.post(
        "/api/products",
        json={"name": "Webcam", "price": "59.5", "stock_quantity": 4},
    )

    assert response.status_code == 201
    product = (await client.get(f"/api/products/{response.json()}")).json()
    assert product["name"] == "Webcam"
    assert product["price"] == "59.50"
    assert product["stock_quantity"] == 4


@pytest.mark.asyncio
async def test_missing_product_is_404(client):
    assert (await client.get("/api/products/999999")).status_code == 404


@pytest.mark.asyncio
async def test_low_stock_default_and_explicit_threshold(client):
    assert (await client.get("/api/products/low-stock")).json() == []

    low = (await client.get("/api/products/low-stock", params={"threshold": 100})).json()
    assert [p["name"] for p in low] == ["Laptop", "Monitor"]


@pytest.mark.asyncio
async def test_update_stock_then_inventory_value(client):
    usb = (await client.get("/api/products/search", params={"name": "USB"})).json()[0]

    response = await client.patch(f"/api/products/{usb['id']}/stock", params={"quantity": 0})

    assert response.status_code == 200
    assert (await client.get("/api/products/inventory/value")).json() == "90495.25"


@pytest.mark.asyncio
async def test_put_and_delete(client):
    product_id = (await client.post("/api/products", json={"name": "Temp", "price": "1.00"})).json()

    response = await client.put(
        f"/api/products/{product_id}",
        json={"name": "Temp v2", "price": "2.00", "stock_quantity": 9},
    )
    assert response.status_code == 200
    assert (await client.get(f"/api/products/{product_id}")).json()["name"] == "Temp v2"

    assert (await client.delete(f"/api/products/{product_id}")).status_code == 204
    assert (await client.get(f"/api/products/{product_id}")).status_code == 404


@pytest.mark.asyncio
async def test_non_numeric_price_is_422(client):
    response = await client.post("/api/products", json={"name": "X", "price": "abc"})

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"][-1] == "price"
