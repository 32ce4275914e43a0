"""
API Router.

Aggregates the resource endpoints mounted under ``/api``.
"""

from fastapi import APIRouter
from fleet_backend.app.api.endpoints import vehicles, drivers, assignments, trips, fuel

router = APIRouter()

router.include_router(vehicles.router)
router.include_router(drivers.router)
router.include_router(assignments.router)
router.include_router(trips.router)
router.include_router(fuel.router)
