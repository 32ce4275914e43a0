"""
Vehicle assignment schemas.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from fleet_backend.app.schemas.common import VehicleSummary, DriverContactSummary


class AssignmentCreate(BaseModel):
    """Schema for assigning a driver to a vehicle."""
    vehicle_id: int = Field(..., alias="vehicleId")
    driver_id: int = Field(..., alias="driverId")
    notes: Optional[str] = None

    class Config:
        populate_by_name = True


class AssignmentResponse(BaseModel):
    id: int
    vehicle_id: int
    driver_id: int
    assigned_at: datetime
    ended_at: Optional[datetime]
    notes: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class ActiveAssignmentResponse(AssignmentResponse):
    """Active assignment with the vehicle and driver it binds."""
    vehicle: Optional[VehicleSummary]
    driver: Optional[DriverContactSummary]
