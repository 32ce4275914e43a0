"""
Driver database model.
"""

from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from fleet_backend.app.db.session import Base
from fleet_backend.app.models.enums import DriverStatus


class Driver(Base):
    __tablename__ = "drivers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(200), nullable=True)
    phone = Column(String(50), nullable=True)

    # Licensing
    license_number = Column(String(100), nullable=True)
    license_category = Column(String(20), nullable=True)  # e.g. "C", "CE"

    hire_date = Column(Date, nullable=True)
    status = Column(String(30), default=DriverStatus.ACTIVE.value, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Driver(id={self.id}, name='{self.name}')>"
