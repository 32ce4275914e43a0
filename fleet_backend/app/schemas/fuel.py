"""
Fuel record schemas.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional
from datetime import date, datetime

from fleet_backend.app.schemas.common import VehicleSummary


class FuelRecordWrite(BaseModel):
    """Schema for creating or updating a fuel record."""
    vehicle_id: Optional[int] = Field(None, alias="vehicleId")
    fuel_date: Optional[date] = Field(None, alias="fuelDate")
    liters: Any = None
    price_per_liter: Any = Field(None, alias="pricePerLiter")
    odometer: Any = None
    fuel_type: Optional[str] = Field(None, alias="fuelType")
    station_name: Optional[str] = Field(None, alias="stationName")
    notes: Optional[str] = None

    class Config:
        populate_by_name = True


class FuelRecordResponse(BaseModel):
    id: int
    vehicle_id: int
    fuel_date: date
    liters: float
    price_per_liter: float
    total_cost: float
    odometer: Optional[float]
    fuel_type: str
    station_name: Optional[str]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FuelRecordListItem(FuelRecordResponse):
    """Fuel record with its vehicle summary."""
    vehicle: Optional[VehicleSummary]
