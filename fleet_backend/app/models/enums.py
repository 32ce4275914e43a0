"""
Fleet status enumerations.

Values are stored as plain strings so clients may use their own vocabulary
for vehicles and drivers; these are the values the API writes itself.
"""

import enum


class VehicleStatus(str, enum.Enum):
    """Vehicle status enumeration."""
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"


class DriverStatus(str, enum.Enum):
    """Driver status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class TripStatus(str, enum.Enum):
    """
    Trip status enumeration.

    A trip is ACTIVE until an end time is recorded, then COMPLETED.
    """
    ACTIVE = "active"
    COMPLETED = "completed"


DEFAULT_VEHICLE_TYPE = "truck"
DEFAULT_FUEL_TYPE = "diesel"
