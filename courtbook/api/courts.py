"""Court endpoints."""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.database import get_db
from courtbook.schemas.common import ApiResponse
from courtbook.schemas.court import CourtCreate, CourtRead, CourtUpdate, CourtWithSlots
from courtbook.services.court_service import court_service

router = APIRouter(prefix="/api/courts", tags=["courts"])


@router.get("", response_model=ApiResponse[List[CourtWithSlots]])
async def list_courts(db: AsyncSession = Depends(get_db)):
    """
    List active courts.

    Each court includes its active weekly time slots.
    """
    courts = await court_service.list_courts(db)
    return ApiResponse(data=[CourtWithSlots.model_validate(c) for c in courts])


@router.get("/{court_id}", response_model=ApiResponse[CourtWithSlots])
async def get_court(court_id: str, db: AsyncSession = Depends(get_db)):
    """Get a specific court by ID."""
    court = await court_service.get_court(db, court_id)
    return ApiResponse(data=CourtWithSlots.model_validate(court))


@router.post("", response_model=ApiResponse[CourtRead], status_code=201)
async def create_court(court: CourtCreate, db: AsyncSession = Depends(get_db)):
    """Create a new court."""
    db_court = await court_service.create_court(db, court)
    return ApiResponse(data=CourtRead.model_validate(db_court))


@router.put("/{court_id}", response_model=ApiResponse[CourtRead])
async def update_court(
    court_id: str,
    court_update: CourtUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a court's name, description or active flag."""
    court = await court_service.update_court(db, court_id, court_update)
    return ApiResponse(data=CourtRead.model_validate(court))


@router.delete("/{court_id}", response_model=ApiResponse[CourtRead])
async def delete_court(court_id: str, db: AsyncSession = Depends(get_db)):
    """
    Deactivate a court.

    The court is hidden from listings but its slots and bookings are kept.
    """
    court = await court_service.deactivate_court(db, court_id)
    return ApiResponse(data=CourtRead.model_validate(court), message="Court deleted successfully")
