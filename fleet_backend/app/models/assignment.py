"""
Vehicle assignment database model.

An assignment binds one driver to one vehicle for a period of time.
It is active while ``ended_at`` is NULL. Nothing prevents a vehicle or a
driver from having several active assignments at once.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from fleet_backend.app.db.session import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VehicleAssignment(Base):
    __tablename__ = "vehicle_assignments"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)
    driver_id = Column(Integer, ForeignKey("drivers.id"), nullable=False, index=True)

    # Python-side default keeps sub-second ordering of assignments
    assigned_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    ended_at = Column(DateTime(timezone=True), nullable=True, index=True)

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    vehicle = relationship("Vehicle", lazy="raise")
    driver = relationship("Driver", lazy="raise")

    @property
    def is_active(self) -> bool:
        return self.ended_at is None

    def __repr__(self):
        return f"<VehicleAssignment(id={self.id}, vehicle_id={self.vehicle_id}, driver_id={self.driver_id})>"
