"""
Fuel Record API Endpoints.
"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Path, status

from fleet_backend.app.domain.fleet.derivation import (
    derive_fuel_total, parse_number, parse_optional_number
)
from fleet_backend.app.models.enums import DEFAULT_FUEL_TYPE
from fleet_backend.app.models.fuel_record import FuelRecord
from fleet_backend.app.schemas.common import ApiResponse, DeleteResponse
from fleet_backend.app.schemas.fuel import FuelRecordWrite, FuelRecordResponse, FuelRecordListItem
from fleet_backend.app.services.store import FleetStore, get_store

router = APIRouter(prefix="/fuel", tags=["Fuel"])

COST_FIELDS = ("liters", "price_per_liter")


def cost_columns(fuel_data: FuelRecordWrite) -> dict:
    return {
        "liters": parse_number(fuel_data.liters),
        "price_per_liter": parse_number(fuel_data.price_per_liter),
        "total_cost": derive_fuel_total(fuel_data.liters, fuel_data.price_per_liter),
    }


def total_cost_column(record: FuelRecord) -> dict:
    return {"total_cost": derive_fuel_total(record.liters, record.price_per_liter)}


@router.get("", response_model=ApiResponse[List[FuelRecordListItem]])
async def list_fuel_records(store: FleetStore = Depends(get_store)):
    """List fuel records, latest first, with vehicle summaries."""
    records = await store.fuel_records.select(
        order_by=[FuelRecord.fuel_date.desc(), FuelRecord.id.desc()],
        embed=["vehicle"],
    )
    return ApiResponse(data=[FuelRecordListItem.model_validate(r) for r in records])


@router.post("", response_model=ApiResponse[FuelRecordResponse], status_code=status.HTTP_201_CREATED)
async def create_fuel_record(
    fuel_data: FuelRecordWrite,
    store: FleetStore = Depends(get_store)
):
    """Record a refuel. ``total_cost`` is liters times price per liter."""
    values = fuel_data.model_dump(exclude={"liters", "price_per_liter"})
    values.update(cost_columns(fuel_data))
    values["odometer"] = parse_optional_number(fuel_data.odometer)
    values["fuel_date"] = fuel_data.fuel_date or date.today()
    values["fuel_type"] = fuel_data.fuel_type or DEFAULT_FUEL_TYPE

    record = await store.fuel_records.insert(values)
    return ApiResponse(data=FuelRecordResponse.model_validate(record))


@router.put("/{record_id}", response_model=ApiResponse[FuelRecordResponse])
async def update_fuel_record(
    record_id: int = Path(..., description="Fuel record ID"),
    fuel_data: FuelRecordWrite = ...,
    store: FleetStore = Depends(get_store)
):
    """
    Update a fuel record.

    Only supplied fields change; ``total_cost`` is recomputed from the
    stored liters and price per liter.
    """
    supplied = fuel_data.model_dump(exclude_unset=True)

    values = {key: value for key, value in supplied.items() if key not in COST_FIELDS}
    for field in COST_FIELDS:
        if field in supplied:
            values[field] = parse_number(supplied[field])
    if "odometer" in supplied:
        values["odometer"] = parse_optional_number(fuel_data.odometer)

    record = await store.fuel_records.update(record_id, values, derive=total_cost_column)
    return ApiResponse(data=FuelRecordResponse.model_validate(record) if record else None)


@router.delete("/{record_id}", response_model=DeleteResponse)
async def delete_fuel_record(
    record_id: int = Path(..., description="Fuel record ID"),
    store: FleetStore = Depends(get_store)
):
    await store.fuel_records.delete(record_id)
    return DeleteResponse()
