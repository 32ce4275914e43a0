"""
Integration tests for driver management.
"""

import pytest


@pytest.mark.asyncio
async def test_create_driver(client):
    response = await client.post("/api/drivers", json={
        "name": "Maria Ivanova",
        "phone": "+359877000111",
        "licenseNumber": "C7654321",
        "licenseCategory": "C",
        "hireDate": "2025-01-15"
    })

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Maria Ivanova"
    assert data["license_number"] == "C7654321"
    assert data["license_category"] == "C"
    assert data["hire_date"] == "2025-01-15"
    assert data["status"] == "active"


@pytest.mark.asyncio
async def test_list_drivers(client, driver):
    await client.post("/api/drivers", json={"name": "Second Driver"})

    response = await client.get("/api/drivers")

    assert response.status_code == 200
    names = [d["name"] for d in response.json()["data"]]
    assert names == ["Ivan Petrov", "Second Driver"]


@pytest.mark.asyncio
async def test_update_driver(client, driver):
    response = await client.put(f"/api/drivers/{driver['id']}", json={
        "phone": "+359888000000",
        "licenseCategory": "B"
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone"] == "+359888000000"
    assert data["license_category"] == "B"
    assert data["name"] == "Ivan Petrov"
    assert data["license_number"] == "B1234567"


@pytest.mark.asyncio
async def test_delete_driver(client, driver):
    response = await client.delete(f"/api/drivers/{driver['id']}")

    assert response.json() == {"success": True}
    listing = await client.get("/api/drivers")
    assert listing.json()["data"] == []


@pytest.mark.asyncio
async def test_bad_hire_date_is_rejected(client):
    response = await client.post("/api/drivers", json={"name": "X", "hireDate": "not-a-date"})

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation error"
