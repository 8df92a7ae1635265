"""
API endpoint tests for users
"""

import pytest
from datetime import datetime, timedelta


@pytest.mark.asyncio
async def test_create_then_get_user(client):
    response = await client.post(
        "/api/users",
        json={"email": "new@example.com", "first_name": "New", "last_name": "User"},
    )

    assert response.status_code == 201
    user = (await client.get(f"/api/users/{response.json()}")).json()
    assert user["email"] == "new@example.com"
    assert user["active"] is True


@pytest.mark.asyncio
async def test_missing_user_is_404(client):
    assert (await client.get("/api/users/999999")).status_code == 404
    assert (await client.get("/api/users/email/nobody@example.com")).status_code == 404


@pytest.mark.asyncio
async def test_listings(client):
    assert len((await client.get("/api/users")).json()) == 5
    assert len((await client.get("/api/users/active")).json()) == 4
    assert (await client.get("/api/users/count/active")).json() == 4

    ages = [u["age"] for u in (await client.get("/api/users/age-range", params={"min_age": 26, "max_age": 30})).json()]
    assert sorted(ages) == [26, 28, 30]

    summaries = (await client.get("/api/users/summaries")).json()
    assert "Jane Smith" in {s["full_name"] for s in summaries}

    filtered = (await client.get("/api/users/filter", params={"email": "bob@example.com", "status": "INACTIVE"})).json()
    assert [u["first_name"] for u in filtered] == ["Bob"]


@pytest.mark.asyncio
async def test_by_department(client):
    grouped = (await client.get("/api/users/by-department")).json()

    assert sorted(grouped) == ["Engineering", "Marketing", "Sales"]
    assert len(grouped["Engineering"]) == 3


@pytest.mark.asyncio
async def test_update_email_and_put(client):
    alice = (await client.get("/api/users/email/alice@example.com")).json()

    response = await client.patch(f"/api/users/{alice['id']}/email", params={"email": "alice.w@example.com"})
    assert response.status_code == 200

    alice["email"] = "alice.w@example.com"
    alice["department"] = "Research"
    response = await client.put(f"/api/users/{alice['id']}", json=alice)

    assert response.status_code == 200
    assert response.json()["department"] == "Research"
    assert (await client.get("/api/users/email/alice.w@example.com")).json()["department"] == "Research"


@pytest.mark.asyncio
async def test_purge_inactive_and_delete(client):
    cutoff = (datetime.utcnow() + timedelta(days=1)).isoformat()

    response = await client.delete("/api/users/inactive", params={"created_before": cutoff})

    assert response.status_code == 200
    assert response.json() == {"deleted": 1}

    charlie = (await client.get("/api/users/email/charlie@example.com")).json()
    assert (await client.delete(f"/api/users/{charlie['id']}")).status_code == 204
    assert len((await client.get("/api/users")).json()) == 3
