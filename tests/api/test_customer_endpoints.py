"""
API endpoint tests for customers, plus health and error handling
"""

import pytest


@pytest.mark.asyncio
async def test_health_endpoint_database_connected(client):
    """Test health endpoint returns database status"""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "healthy"
    assert data["database_connected"] is True
    assert data["database_error"] is None


@pytest.mark.asyncio
async def test_responses_carry_request_id(client):
    response = await client.get("/api/customers")

    assert response.status_code == 200
    assert response.headers["X-Request-ID"]
    assert "X-API-Latency-ms" in response.headers


@pytest.mark.asyncio
async def test_create_then_get_customer(client):
    response = await client.post(
        "/api/customers",
        json={"name": "Test User", "email": "test@example.com", "status": "ACTIVE"},
    )

    assert response.status_code == 201
    customer_id = response.json()

    response = await client.get(f"/api/customers/{customer_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == customer_id
    assert data["name"] == "Test User"
    assert data["email"] == "test@example.com"
    assert data["status"] == "ACTIVE"


@pytest.mark.asyncio
async def test_missing_customer_is_404(client):
    response = await client.get("/api/customers/999999")

    assert response.status_code == 404
    assert (await client.get("/api/customers/email/nobody@example.com")).status_code == 404


@pytest.mark.asyncio
async def test_malformed_body_is_422(client):
    response = await client.post("/api/customers", json={"name": "No Email"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_email_is_generic_500(client):
    response = await client.post(
        "/api/customers",
        json={"name": "Copy", "email": "john.doe@example.com"},
    )

    assert response.status_code == 500
    data = response.json()
    assert data["detail"] == "Internal Server Error"
    assert data["request_id"] == response.headers["X-Request-ID"]
    assert "john.doe" not in response.text


@pytest.mark.asyncio
async def test_update_and_delete_customer(client):
    john = (await client.get("/api/customers/email/john.doe@example.com")).json()

    response = await client.put(
        f"/api/customers/{john['id']}",
        json={"name": "John Q. Doe", "email": "john.doe@example.com", "status": "INACTIVE"},
    )
    assert response.status_code == 200
    assert (await client.get(f"/api/customers/{john['id']}")).json()["status"] == "INACTIVE"

    created = (await client.post("/api/customers", json={"name": "Temp", "email": "temp@example.com"})).json()
    response = await client.delete(f"/api/customers/{created}")

    assert response.status_code == 204
    assert (await client.get(f"/api/customers/{created}")).status_code == 404


@pytest.mark.asyncio
async def test_batch_create(client):
    before = len((await client.get("/api/customers")).json())

    response = await client.post(
        "/api/customers/batch",
        json=[
            {"name": "Batch One", "email": "batch1@example.com"},
            {"name": "Batch Two", "email": "batch2@example.com"},
            {"name": "Batch Three", "email": "batch3@example.com"},
        ],
    )

    assert response.status_code == 201
    assert len((await client.get("/api/customers")).json()) == before + 3


@pytest.mark.asyncio
async def test_search_and_reports(client):
    response = await client.get("/api/customers/search", params={"name": "Bob", "status": "INACTIVE"})
    assert [c["name"] for c in response.json()] == ["Bob Johnson"]

    summaries = (await client.get("/api/customers/summaries")).json()
    assert summaries[0]["name"] == "John Doe"
    assert summaries[0]["total_spent"] == "1189.96"

    assert (await client.get("/api/customers/count/active")).json() == 4
    assert [c["name"] for c in (await client.get("/api/customers/no-orders")).json()] == ["Bob Johnson"]
    assert len((await client.get("/api/customers/top-active", params={"limit": 3})).json()) == 3
