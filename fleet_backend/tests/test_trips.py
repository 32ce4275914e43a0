"""
Integration tests for trips and their derived financials.
"""

import pytest


@pytest.fixture
async def trip(client, vehicle, driver):
    response = await client.post("/api/trips", json={
        "vehicleId": vehicle["id"],
        "driverId": driver["id"],
        "startTime": "2026-05-01T08:00:00",
        "startOdometer": 1000,
        "endOdometer": 1450,
        "route": "Sofia - Varna",
        "price": 500,
        "fuelCost": 80,
        "driverCost": 50,
        "otherCosts": 20,
        "cargoDescription": "Pallets",
        "cargoWeight": "12000",
        "clientName": "Acme Ltd"
    })
    assert response.status_code == 201
    return response.json()["data"]


# TEST 1: Derivation on create
@pytest.mark.asyncio
async def test_create_trip_derives_financials(trip):
    assert trip["distance"] == 450
    assert trip["total_costs"] == 150
    assert trip["profit"] == 350
    assert trip["profit_margin"] == pytest.approx(70)
    assert trip["cargo_weight"] == 12000
    assert trip["client_name"] == "Acme Ltd"


@pytest.mark.asyncio
async def test_trip_without_end_time_is_active(trip):
    assert trip["end_time"] is None
    assert trip["status"] == "active"


@pytest.mark.asyncio
async def test_trip_with_end_time_is_completed(client, vehicle):
    response = await client.post("/api/trips", json={
        "vehicleId": vehicle["id"],
        "startTime": "2026-05-01T08:00:00",
        "endTime": "2026-05-01T18:00:00",
        "price": 200
    })

    assert response.status_code == 201
    assert response.json()["data"]["status"] == "completed"


@pytest.mark.asyncio
async def test_trip_with_sparse_input(client):
    """Missing costs count as zero, missing odometers leave distance empty."""
    response = await client.post("/api/trips", json={"price": "abc", "fuelCost": "30"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["distance"] is None
    assert data["price"] == 0
    assert data["total_costs"] == 30
    assert data["profit"] == -30
    assert data["profit_margin"] == 0
    assert data["start_time"] is not None


# TEST 2: Listing
@pytest.mark.asyncio
async def test_list_trips_latest_first_with_summaries(client, trip, vehicle, driver):
    later = await client.post("/api/trips", json={
        "vehicleId": vehicle["id"],
        "startTime": "2026-06-01T08:00:00"
    })

    response = await client.get("/api/trips")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [t["id"] for t in data] == [later.json()["data"]["id"], trip["id"]]
    assert data[1]["vehicle"] == {"id": vehicle["id"], "reg_number": "CA1234AB", "brand": "Volvo"}
    assert data[1]["driver"] == {"id": driver["id"], "name": "Ivan Petrov"}
    assert data[0]["driver"] is None


# TEST 3: Update
@pytest.mark.asyncio
async def test_update_trip_recomputes_financials(client, trip):
    response = await client.put(f"/api/trips/{trip['id']}", json={
        "startOdometer": 1000,
        "endOdometer": 1600,
        "price": 1000,
        "fuelCost": 100,
        "driverCost": 100,
        "otherCosts": 50
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["distance"] == 600
    assert data["total_costs"] == 250
    assert data["profit"] == 750
    assert data["profit_margin"] == pytest.approx(75)
    assert data["route"] == "Sofia - Varna"


@pytest.mark.asyncio
async def test_update_plain_fields_keeps_financials(client, trip):
    response = await client.put(f"/api/trips/{trip['id']}", json={"notes": "Delayed at border"})

    data = response.json()["data"]
    assert data["notes"] == "Delayed at border"
    assert data["profit"] == 350
    assert data["distance"] == 450
    assert data["status"] == "active"


@pytest.mark.asyncio
async def test_update_trip_end_time_completes_it(client, trip):
    response = await client.put(f"/api/trips/{trip['id']}", json={"endTime": "2026-05-01T17:30:00"})

    data = response.json()["data"]
    assert data["status"] == "completed"
    assert data["end_time"] is not None


@pytest.mark.asyncio
async def test_update_missing_trip(client):
    response = await client.put("/api/trips/9999", json={"notes": "x"})

    assert response.json() == {"success": True, "data": None}


@pytest.mark.asyncio
async def test_update_single_odometer_keeps_stored_figures(client, trip):
    """Changing one reading recomputes distance from the stored other one."""
    response = await client.put(f"/api/trips/{trip['id']}", json={"endOdometer": 1500})

    data = response.json()["data"]
    assert data["start_odometer"] == 1000
    assert data["end_odometer"] == 1500
    assert data["distance"] == 500
    assert data["price"] == 500
    assert data["total_costs"] == 150
    assert data["profit"] == 350
    assert data["profit_margin"] == pytest.approx(70)


@pytest.mark.asyncio
async def test_update_single_cost_recomputes_totals(client, trip):
    response = await client.put(f"/api/trips/{trip['id']}", json={"fuelCost": "130"})

    data = response.json()["data"]
    assert data["fuel_cost"] == 130
    assert data["driver_cost"] == 50
    assert data["other_costs"] == 20
    assert data["total_costs"] == 200
    assert data["profit"] == 300
    assert data["profit_margin"] == pytest.approx(60)
    assert data["distance"] == 450


@pytest.mark.asyncio
async def test_update_clearing_end_time_reactivates_trip(client, trip):
    await client.put(f"/api/trips/{trip['id']}", json={"endTime": "2026-05-01T17:30:00"})

    response = await client.put(f"/api/trips/{trip['id']}", json={"endTime": None})

    assert response.json()["data"]["status"] == "active"


@pytest.mark.asyncio
async def test_oversized_price_degrades_to_zero(client):
    """A number beyond the float range is treated like any malformed price."""
    response = await client.post("/api/trips", json={"price": 10 ** 400, "fuelCost": 40})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["price"] == 0
    assert data["total_costs"] == 40
    assert data["profit"] == -40
    assert data["profit_margin"] == 0


# TEST 4: Delete
@pytest.mark.asyncio
async def test_delete_trip(client, trip):
    response = await client.delete(f"/api/trips/{trip['id']}")

    assert response.json() == {"success": True}
    listing = await client.get("/api/trips")
    assert listing.json()["data"] == []


@pytest.mark.asyncio
async def test_deleting_vehicle_with_trips_fails(client, trip, vehicle):
    """The foreign key keeps trips from losing their vehicle."""
    response = await client.delete(f"/api/vehicles/{vehicle['id']}")

    assert response.status_code == 500
    assert response.json()["success"] is False
