"""
Trip database model.

A trip records one run of a vehicle with a driver, the odometer readings at
both ends and the money involved. ``distance``, ``total_costs``, ``profit``
and ``profit_margin`` are derived on write and stored alongside the raw
figures.
"""

from sqlalchemy import Column, Integer, Float, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from fleet_backend.app.db.session import Base
from fleet_backend.app.models.enums import TripStatus


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=True, index=True)
    driver_id = Column(Integer, ForeignKey("drivers.id"), nullable=True, index=True)

    # Timing
    start_time = Column(DateTime(timezone=True), nullable=True, index=True)
    end_time = Column(DateTime(timezone=True), nullable=True)

    # Odometer readings (km)
    start_odometer = Column(Float, nullable=True)
    end_odometer = Column(Float, nullable=True)
    distance = Column(Float, nullable=True)  # derived, NULL unless both readings exist

    route = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(30), default=TripStatus.ACTIVE.value, nullable=False, index=True)

    # Financials
    price = Column(Float, default=0.0, nullable=False)
    fuel_cost = Column(Float, default=0.0, nullable=False)
    driver_cost = Column(Float, default=0.0, nullable=False)
    other_costs = Column(Float, default=0.0, nullable=False)
    total_costs = Column(Float, default=0.0, nullable=False)  # derived
    profit = Column(Float, default=0.0, nullable=False)  # derived
    profit_margin = Column(Float, default=0.0, nullable=False)  # derived, percent

    # Cargo / client
    cargo_description = Column(String(255), nullable=True)
    cargo_weight = Column(Float, nullable=True)
    client_name = Column(String(200), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    vehicle = relationship("Vehicle", lazy="raise")
    driver = relationship("Driver", lazy="raise")

    def __repr__(self):
        return f"<Trip(id={self.id}, vehicle_id={self.vehicle_id}, status='{self.status}')>"
