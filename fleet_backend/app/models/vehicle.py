"""
Vehicle database model.

A vehicle is identified by its registration number.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from fleet_backend.app.db.session import Base
from fleet_backend.app.models.enums import VehicleStatus, DEFAULT_VEHICLE_TYPE


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Identification
    reg_number = Column(String(50), nullable=True, index=True)
    brand = Column(String(100), nullable=True)
    type = Column(String(50), default=DEFAULT_VEHICLE_TYPE, nullable=False)

    status = Column(String(30), default=VehicleStatus.ACTIVE.value, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Vehicle(id={self.id}, reg_number='{self.reg_number}', brand='{self.brand}')>"
