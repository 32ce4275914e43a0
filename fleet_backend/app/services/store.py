"""
Data store access for the fleet tables.

Each table is reached through a ``TableStore`` offering the handful of
query shapes the API needs: select with filters, ordering and embedded
relations; insert returning the row; update by id returning the row; and
delete by id. Any database failure is rolled back, logged and re-raised as
``StoreOperationError`` so handlers never see driver exceptions.

Handlers get a ``FleetStore`` through the ``get_store`` dependency, which
can be overridden with a test double.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from fastapi import Depends
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from fleet_backend.app.core.exceptions import StoreOperationError
from fleet_backend.app.db.session import get_db
from fleet_backend.app.models.vehicle import Vehicle
from fleet_backend.app.models.driver import Driver
from fleet_backend.app.models.assignment import VehicleAssignment
from fleet_backend.app.models.trip import Trip
from fleet_backend.app.models.fuel_record import FuelRecord

logger = logging.getLogger("fleet.store")


class TableStore:
    """Query operations on a single mapped table."""

    def __init__(self, session: AsyncSession, model):
        self.session = session
        self.model = model

    @property
    def table(self) -> str:
        return self.model.__tablename__

    @asynccontextmanager
    async def _operation(self, name: str):
        try:
            yield
        except SQLAlchemyError as exc:
            await self.session.rollback()
            message = str(getattr(exc, "orig", None) or exc)
            logger.error("Store %s on %s failed: %s", name, self.table, message)
            raise StoreOperationError(message, table=self.table, operation=name) from exc

    async def select(
        self,
        filters: Iterable[Any] = (),
        order_by: Sequence[Any] = (),
        embed: Sequence[str] = (),
    ) -> List[Any]:
        """
        Return rows matching every filter expression.

        ``embed`` names many-to-one relationships to load in the same query.
        """
        query = select(self.model)
        for clause in filters:
            query = query.where(clause)
        if embed:
            query = query.options(*[joinedload(getattr(self.model, name)) for name in embed])
        if order_by:
            query = query.order_by(*order_by)

        async with self._operation("select"):
            result = await self.session.execute(query)
            return list(result.scalars().all())

    async def insert(self, values: Dict[str, Any]) -> Any:
        row = self.model(**values)
        async with self._operation("insert"):
            self.session.add(row)
            await self.session.commit()
            await self.session.refresh(row)
        return row

    async def update(
        self,
        row_id: int,
        values: Dict[str, Any],
        derive: Optional[Callable[[Any], Dict[str, Any]]] = None,
    ) -> Optional[Any]:
        """
        Apply ``values`` to the row and return it, or ``None`` if it does not exist.

        ``derive`` receives the row with ``values`` applied and returns the
        computed columns to store with it.
        """
        async with self._operation("update"):
            row = await self.session.get(self.model, row_id)
            if row is None:
                return None
            for field, value in values.items():
                setattr(row, field, value)
            if derive is not None:
                for field, value in derive(row).items():
                    setattr(row, field, value)
            await self.session.commit()
            await self.session.refresh(row)
        return row

    async def delete(self, row_id: int) -> None:
        async with self._operation("delete"):
            await self.session.execute(delete(self.model).where(self.model.id == row_id))
            await self.session.commit()


class FleetStore:
    """Entry point to every fleet table, bound to one session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.vehicles = TableStore(session, Vehicle)
        self.drivers = TableStore(session, Driver)
        self.assignments = TableStore(session, VehicleAssignment)
        self.trips = TableStore(session, Trip)
        self.fuel_records = TableStore(session, FuelRecord)


async def get_store(db: AsyncSession = Depends(get_db)) -> FleetStore:
    """FastAPI dependency providing the store for the current request."""
    return FleetStore(db)
