"""
Trip API Endpoints.

Trip writes run through the derivation engine: distance, total costs,
profit and profit margin are stored with the raw figures, and the status
follows the end time.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List
from fastapi import APIRouter, Depends, Path, status

from fleet_backend.app.domain.fleet.derivation import (
    derive_trip_financials, parse_number, parse_optional_number, trip_status
)
from fleet_backend.app.models.trip import Trip
from fleet_backend.app.schemas.common import ApiResponse, DeleteResponse
from fleet_backend.app.schemas.trip import TripWrite, TripResponse, TripListItem
from fleet_backend.app.services.store import FleetStore, get_store

router = APIRouter(prefix="/trips", tags=["Trips"])

ODOMETER_FIELDS = ("start_odometer", "end_odometer")
MONEY_FIELDS = ("price", "fuel_cost", "driver_cost", "other_costs")
FINANCIAL_FIELDS = ODOMETER_FIELDS + MONEY_FIELDS


def financial_columns(trip_data: TripWrite) -> Dict[str, Any]:
    financials = derive_trip_financials(
        start_odometer=trip_data.start_odometer,
        end_odometer=trip_data.end_odometer,
        price=trip_data.price,
        fuel_cost=trip_data.fuel_cost,
        driver_cost=trip_data.driver_cost,
        other_costs=trip_data.other_costs,
    )
    return financials.as_columns()


def derived_columns(trip: Trip) -> Dict[str, Any]:
    """Derived columns of a stored trip after an update was applied to it."""
    financials = derive_trip_financials(
        start_odometer=trip.start_odometer,
        end_odometer=trip.end_odometer,
        price=trip.price,
        fuel_cost=trip.fuel_cost,
        driver_cost=trip.driver_cost,
        other_costs=trip.other_costs,
    )
    return {
        "distance": financials.distance,
        "total_costs": financials.total_costs,
        "profit": financials.profit,
        "profit_margin": financials.profit_margin,
        "status": trip_status(trip.end_time),
    }

@router.get("", response_model=ApiResponse[List[TripListItem]])
async def list_trips(store: FleetStore = Depends(get_store)):
    """List trips, latest start first, with vehicle and driver summaries."""
    trips = await store.trips.select(
        order_by=[Trip.start_time.desc(), Trip.id.desc()],
        embed=["vehicle", "driver"],
    )
    return ApiResponse(data=[TripListItem.model_validate(t) for t in trips])


@router.post("", response_model=ApiResponse[TripResponse], status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripWrite,
    store: FleetStore = Depends(get_store)
):
    """
    Record a trip.

    Missing costs count as 0; ``distance`` stays null unless both odometer
    readings are given. Without ``startTime`` the trip starts now.
    """
    values = trip_data.model_dump(exclude=set(FINANCIAL_FIELDS))
    values.update(financial_columns(trip_data))
    values["cargo_weight"] = parse_optional_number(trip_data.cargo_weight)
    values["status"] = trip_status(trip_data.end_time)
    if values["start_time"] is None:
        values["start_time"] = datetime.now(timezone.utc)

    trip = await store.trips.insert(values)
    return ApiResponse(data=TripResponse.model_validate(trip))


@router.put("/{trip_id}", response_model=ApiResponse[TripResponse])
async def update_trip(
    trip_id: int = Path(..., description="Trip ID"),
    trip_data: TripWrite = ...,
    store: FleetStore = Depends(get_store)
):
    """
    Update a trip.

    Only supplied fields change. Distance, totals, profit, margin and
    status are then recomputed from the stored trip, so sending a single
    odometer reading or cost keeps the other figures.
    """
    supplied = trip_data.model_dump(exclude_unset=True)

    values = {key: value for key, value in supplied.items() if key not in FINANCIAL_FIELDS}
    for field in ODOMETER_FIELDS:
        if field in supplied:
            values[field] = parse_optional_number(supplied[field])
    for field in MONEY_FIELDS:
        if field in supplied:
            values[field] = parse_number(supplied[field])
    if "cargo_weight" in supplied:
        values["cargo_weight"] = parse_optional_number(trip_data.cargo_weight)

    trip = await store.trips.update(trip_id, values, derive=derived_columns)
    return ApiResponse(data=TripResponse.model_validate(trip) if trip else None)


@router.delete("/{trip_id}", response_model=DeleteResponse)
async def delete_trip(
    trip_id: int = Path(..., description="Trip ID"),
    store: FleetStore = Depends(get_store)
):
    await store.trips.delete(trip_id)
    return DeleteResponse()
