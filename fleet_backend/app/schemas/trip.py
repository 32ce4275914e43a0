"""
Trip schemas.

Numeric trip inputs are accepted as numbers or strings and coerced by the
derivation engine, so they are typed loosely here.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional
from datetime import datetime

from fleet_backend.app.schemas.common import VehicleSummary, DriverSummary


class TripWrite(BaseModel):
    """Schema for creating or updating a trip."""
    vehicle_id: Optional[int] = Field(None, alias="vehicleId")
    driver_id: Optional[int] = Field(None, alias="driverId")
    start_time: Optional[datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime] = Field(None, alias="endTime")
    start_odometer: Any = Field(None, alias="startOdometer")
    end_odometer: Any = Field(None, alias="endOdometer")
    route: Optional[str] = None
    notes: Optional[str] = None

    # Financials
    price: Any = None
    fuel_cost: Any = Field(None, alias="fuelCost")
    driver_cost: Any = Field(None, alias="driverCost")
    other_costs: Any = Field(None, alias="otherCosts")

    # Cargo / client
    cargo_description: Optional[str] = Field(None, alias="cargoDescription")
    cargo_weight: Any = Field(None, alias="cargoWeight")
    client_name: Optional[str] = Field(None, alias="clientName")

    class Config:
        populate_by_name = True


class TripResponse(BaseModel):
    id: int
    vehicle_id: Optional[int]
    driver_id: Optional[int]
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    start_odometer: Optional[float]
    end_odometer: Optional[float]
    distance: Optional[float]
    route: Optional[str]
    notes: Optional[str]
    status: str
    price: float
    fuel_cost: float
    driver_cost: float
    other_costs: float
    total_costs: float
    profit: float
    profit_margin: float
    cargo_description: Optional[str]
    cargo_weight: Optional[float]
    client_name: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TripListItem(TripResponse):
    """Trip with vehicle and driver summaries."""
    vehicle: Optional[VehicleSummary]
    driver: Optional[DriverSummary]
