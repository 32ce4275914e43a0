"""
Vehicle Assignment API Endpoints.

Assignments are never deleted, only ended. The listing shows active ones.
"""

from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, Path, status

from fleet_backend.app.models.assignment import VehicleAssignment
from fleet_backend.app.schemas.common import ApiResponse
from fleet_backend.app.schemas.assignment import (
    AssignmentCreate, AssignmentResponse, ActiveAssignmentResponse
)
from fleet_backend.app.services.store import FleetStore, get_store

router = APIRouter(prefix="/assignments", tags=["Assignments"])


@router.get("", response_model=ApiResponse[List[ActiveAssignmentResponse]])
async def list_active_assignments(store: FleetStore = Depends(get_store)):
    """
    List active assignments, most recently assigned first.

    Each entry embeds the vehicle (id, reg_number, brand) and the driver
    (id, name, phone).
    """
    assignments = await store.assignments.select(
        filters=[VehicleAssignment.ended_at.is_(None)],
        order_by=[VehicleAssignment.assigned_at.desc()],
        embed=["vehicle", "driver"],
    )
    return ApiResponse(data=[ActiveAssignmentResponse.model_validate(a) for a in assignments])


@router.post("", response_model=ApiResponse[AssignmentResponse], status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment_data: AssignmentCreate,
    store: FleetStore = Depends(get_store)
):
    """
    Assign a driver to a vehicle.

    Existing active assignments of the same vehicle or driver are left alone.
    """
    assignment = await store.assignments.insert(assignment_data.model_dump())
    return ApiResponse(data=AssignmentResponse.model_validate(assignment))


@router.put("/{assignment_id}/end", response_model=ApiResponse[AssignmentResponse])
async def end_assignment(
    assignment_id: int = Path(..., description="Assignment ID"),
    store: FleetStore = Depends(get_store)
):
    """Close an assignment now."""
    assignment = await store.assignments.update(
        assignment_id, {"ended_at": datetime.now(timezone.utc)}
    )
    return ApiResponse(data=AssignmentResponse.model_validate(assignment) if assignment else None)
