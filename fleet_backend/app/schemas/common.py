"""
Shared response envelope and embedded summaries.

Every endpoint answers ``{"success": true, "data": ...}``; errors use the
same shape with ``"error"`` (see ``core.exceptions``).
"""

from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""
    success: bool = True
    data: Optional[T] = None


class DeleteResponse(BaseModel):
    """Envelope for deletes, which carry no data."""
    success: bool = True


class VehicleSummary(BaseModel):
    """Vehicle fields embedded in assignment, trip and fuel listings."""
    id: int
    reg_number: Optional[str]
    brand: Optional[str]

    class Config:
        from_attributes = True


class DriverSummary(BaseModel):
    """Driver fields embedded in trip listings."""
    id: int
    name: Optional[str]

    class Config:
        from_attributes = True


class DriverContactSummary(DriverSummary):
    """Driver fields embedded in assignment listings."""
    phone: Optional[str]
