"""
Driver API Endpoints.
"""

from typing import List
from fastapi import APIRouter, Depends, Path, status

from fleet_backend.app.models.driver import Driver
from fleet_backend.app.models.enums import DriverStatus
from fleet_backend.app.schemas.common import ApiResponse, DeleteResponse
from fleet_backend.app.schemas.driver import DriverCreate, DriverUpdate, DriverResponse
from fleet_backend.app.services.store import FleetStore, get_store

router = APIRouter(prefix="/drivers", tags=["Drivers"])


@router.get("", response_model=ApiResponse[List[DriverResponse]])
async def list_drivers(store: FleetStore = Depends(get_store)):
    drivers = await store.drivers.select(order_by=[Driver.id.asc()])
    return ApiResponse(data=[DriverResponse.model_validate(d) for d in drivers])


@router.post("", response_model=ApiResponse[DriverResponse], status_code=status.HTTP_201_CREATED)
async def create_driver(
    driver_data: DriverCreate,
    store: FleetStore = Depends(get_store)
):
    """Hire a driver. New drivers are always active."""
    values = driver_data.model_dump()
    values["status"] = DriverStatus.ACTIVE.value
    driver = await store.drivers.insert(values)
    return ApiResponse(data=DriverResponse.model_validate(driver))


@router.put("/{driver_id}", response_model=ApiResponse[DriverResponse])
async def update_driver(
    driver_id: int = Path(..., description="Driver ID"),
    driver_data: DriverUpdate = ...,
    store: FleetStore = Depends(get_store)
):
    """Update the supplied fields of a driver."""
    driver = await store.drivers.update(driver_id, driver_data.model_dump(exclude_unset=True))
    return ApiResponse(data=DriverResponse.model_validate(driver) if driver else None)


@router.delete("/{driver_id}", response_model=DeleteResponse)
async def delete_driver(
    driver_id: int = Path(..., description="Driver ID"),
    store: FleetStore = Depends(get_store)
):
    await store.drivers.delete(driver_id)
    return DeleteResponse()
