"""
Vehicle Pydantic schemas.

Request bodies use camelCase keys, responses use column names.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class VehicleCreate(BaseModel):
    """Schema for registering a vehicle."""
    reg_number: Optional[str] = Field(None, alias="regNumber", description="Registration number")
    brand: Optional[str] = None
    type: Optional[str] = Field(None, description="Vehicle type, defaults to truck")

    class Config:
        populate_by_name = True


class VehicleUpdate(BaseModel):
    """Schema for updating a vehicle. Only supplied fields change."""
    reg_number: Optional[str] = Field(None, alias="regNumber")
    brand: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None

    class Config:
        populate_by_name = True


class VehicleResponse(BaseModel):
    id: int
    reg_number: Optional[str]
    brand: Optional[str]
    type: str
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
