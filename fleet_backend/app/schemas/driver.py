"""
Driver Pydantic schemas.
"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional


class DriverCreate(BaseModel):
    """Schema for hiring a driver."""
    name: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = Field(None, alias="licenseNumber")
    license_category: Optional[str] = Field(None, alias="licenseCategory")
    hire_date: Optional[date] = Field(None, alias="hireDate")

    class Config:
        populate_by_name = True


class DriverUpdate(BaseModel):
    """Schema for updating a driver. Only supplied fields change."""
    name: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = Field(None, alias="licenseNumber")
    license_category: Optional[str] = Field(None, alias="licenseCategory")
    hire_date: Optional[date] = Field(None, alias="hireDate")
    status: Optional[str] = None

    class Config:
        populate_by_name = True


class DriverResponse(BaseModel):
    id: int
    name: Optional[str]
    phone: Optional[str]
    license_number: Optional[str]
    license_category: Optional[str]
    hire_date: Optional[date]
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
