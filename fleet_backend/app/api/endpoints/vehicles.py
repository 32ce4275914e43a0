"""
Vehicle API Endpoints.

Plain CRUD over the vehicles table.
"""

from typing import List
from fastapi import APIRouter, Depends, Path, status

from fleet_backend.app.models.vehicle import Vehicle
from fleet_backend.app.models.enums import VehicleStatus, DEFAULT_VEHICLE_TYPE
from fleet_backend.app.schemas.common import ApiResponse, DeleteResponse
from fleet_backend.app.schemas.vehicle import VehicleCreate, VehicleUpdate, VehicleResponse
from fleet_backend.app.services.store import FleetStore, get_store

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])


@router.get("", response_model=ApiResponse[List[VehicleResponse]])
async def list_vehicles(store: FleetStore = Depends(get_store)):
    """List all vehicles, oldest first."""
    vehicles = await store.vehicles.select(order_by=[Vehicle.id.asc()])
    return ApiResponse(data=[VehicleResponse.model_validate(v) for v in vehicles])


@router.post("", response_model=ApiResponse[VehicleResponse], status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle_data: VehicleCreate,
    store: FleetStore = Depends(get_store)
):
    """Register a vehicle. New vehicles are always active."""
    vehicle = await store.vehicles.insert({
        "reg_number": vehicle_data.reg_number,
        "brand": vehicle_data.brand,
        "type": vehicle_data.type or DEFAULT_VEHICLE_TYPE,
        "status": VehicleStatus.ACTIVE.value,
    })
    return ApiResponse(data=VehicleResponse.model_validate(vehicle))


@router.put("/{vehicle_id}", response_model=ApiResponse[VehicleResponse])
async def update_vehicle(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    vehicle_data: VehicleUpdate = ...,
    store: FleetStore = Depends(get_store)
):
    """
    Update a vehicle.

    Only fields present in the body change. An unknown ID yields ``data: null``.
    """
    vehicle = await store.vehicles.update(vehicle_id, vehicle_data.model_dump(exclude_unset=True))
    return ApiResponse(data=VehicleResponse.model_validate(vehicle) if vehicle else None)


@router.delete("/{vehicle_id}", response_model=DeleteResponse)
async def delete_vehicle(
    vehicle_id: int = Path(..., description="Vehicle ID"),
    store: FleetStore = Depends(get_store)
):
    await store.vehicles.delete(vehicle_id)
    return DeleteResponse()
