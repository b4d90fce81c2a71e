"""Time slot and availability endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.database import get_db
from courtbook.schemas.availability import AvailableSlot, TimeSlotDetail, TimeSlotWithBookings
from courtbook.schemas.common import ApiResponse
from courtbook.schemas.time_slot import TimeSlotCreate, TimeSlotRead, TimeSlotUpdate
from courtbook.services.availability_service import availability_service
from courtbook.services.time_slot_service import time_slot_service

router = APIRouter(prefix="/api/timeslots", tags=["timeslots"])


@router.get("/court/{court_id}", response_model=ApiResponse[List[TimeSlotWithBookings]])
async def list_court_time_slots(court_id: str, db: AsyncSession = Depends(get_db)):
    """List a court's active time slots with their active bookings."""
    slots = await time_slot_service.slots_for_court(db, court_id)
    return ApiResponse(data=slots)


@router.get("/available/{court_id}", response_model=ApiResponse[List[AvailableSlot]])
async def get_available_slots(
    court_id: str,
    date: Optional[str] = Query(default=None, description="Date as YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a court's slots for a date.

    Returns the active slots running on that date's day of week. Each slot
    carries its active bookings for the date and an ``isAvailable`` flag.

    Args:
        court_id: Court ID
        date: Date to check
        db: Database session

    Returns:
        Slots ordered by start time
    """
    slots = await availability_service.available_slots(db, court_id, date)
    return ApiResponse(data=slots)


@router.get("/{slot_id}", response_model=ApiResponse[TimeSlotDetail])
async def get_time_slot(slot_id: str, db: AsyncSession = Depends(get_db)):
    """Get a time slot with its court and bookings."""
    slot = await time_slot_service.get_time_slot(db, slot_id)
    return ApiResponse(data=slot)


@router.post("", response_model=ApiResponse[TimeSlotRead], status_code=201)
async def create_time_slot(slot: TimeSlotCreate, db: AsyncSession = Depends(get_db)):
    """Create a weekly time slot for a court."""
    db_slot = await time_slot_service.create_time_slot(db, slot)
    return ApiResponse(data=TimeSlotRead.model_validate(db_slot))


@router.put("/{slot_id}", response_model=ApiResponse[TimeSlotRead])
async def update_time_slot(
    slot_id: str,
    slot_update: TimeSlotUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a time slot."""
    slot = await time_slot_service.update_time_slot(db, slot_id, slot_update)
    return ApiResponse(data=TimeSlotRead.model_validate(slot))


@router.delete("/{slot_id}", response_model=ApiResponse[TimeSlotRead])
async def delete_time_slot(slot_id: str, db: AsyncSession = Depends(get_db)):
    """Deactivate a time slot."""
    slot = await time_slot_service.deactivate_time_slot(db, slot_id)
    return ApiResponse(
        data=TimeSlotRead.model_validate(slot), message="Time slot deleted successfully"
    )
