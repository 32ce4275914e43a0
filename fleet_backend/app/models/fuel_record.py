"""
Fuel record database model.

One refuelling of a vehicle. ``total_cost`` is derived on write.
"""

from sqlalchemy import Column, Integer, Float, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from fleet_backend.app.db.session import Base
from fleet_backend.app.models.enums import DEFAULT_FUEL_TYPE


class FuelRecord(Base):
    __tablename__ = "fuel_records"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)
    fuel_date = Column(Date, nullable=False, index=True)

    liters = Column(Float, default=0.0, nullable=False)
    price_per_liter = Column(Float, default=0.0, nullable=False)
    total_cost = Column(Float, default=0.0, nullable=False)  # derived

    odometer = Column(Float, nullable=True)
    fuel_type = Column(String(30), default=DEFAULT_FUEL_TYPE, nullable=False)
    station_name = Column(String(200), nullable=True)
    notes = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    vehicle = relationship("Vehicle", lazy="raise")

    def __repr__(self):
        return f"<FuelRecord(id={self.id}, vehicle_id={self.vehicle_id}, liters={self.liters})>"
