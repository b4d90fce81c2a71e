"""Booking endpoints. All of them require a bearer token."""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.api.deps import get_today
from courtbook.core.database import get_db
from courtbook.core.security import TokenUser, get_current_user
from courtbook.schemas.booking import BookingCreate, BookingRead, BookingUpdate
from courtbook.schemas.common import ApiResponse
from courtbook.services.booking_service import booking_service
from courtbook.services.user_service import user_service

router = APIRouter(
    prefix="/api/bookings",
    tags=["bookings"],
    dependencies=[Depends(get_current_user)],
)


def _read_all(bookings) -> List[BookingRead]:
    return [BookingRead.model_validate(b) for b in bookings]


@router.get("", response_model=ApiResponse[List[BookingRead]])
async def list_bookings(db: AsyncSession = Depends(get_db)):
    """List all bookings, newest first."""
    bookings = await booking_service.list_bookings(db)
    return ApiResponse(data=_read_all(bookings))


@router.get("/my-bookings", response_model=ApiResponse[List[BookingRead]])
async def list_my_bookings(
    current_user: TokenUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's bookings, latest date first."""
    user = await user_service.find_by_clerk_id(db, current_user.clerkId)
    if not user:
        return ApiResponse(data=[], message="No synced user for this account")
    bookings = await booking_service.bookings_for_user(db, user.id)
    return ApiResponse(data=_read_all(bookings))


@router.get("/court/{court_id}", response_model=ApiResponse[List[BookingRead]])
async def list_court_bookings(court_id: str, db: AsyncSession = Depends(get_db)):
    """List a court's bookings, latest date first."""
    bookings = await booking_service.bookings_for_court(db, court_id)
    return ApiResponse(data=_read_all(bookings))


@router.get("/date/{booking_date}", response_model=ApiResponse[List[BookingRead]])
async def list_date_bookings(booking_date: str, db: AsyncSession = Depends(get_db)):
    """List the bookings on a date, earliest slot first."""
    bookings = await booking_service.bookings_on_date(db, booking_date)
    return ApiResponse(data=_read_all(bookings))


@router.get("/{booking_id}", response_model=ApiResponse[BookingRead])
async def get_booking(booking_id: str, db: AsyncSession = Depends(get_db)):
    """Get a specific booking by ID."""
    booking = await booking_service.get_booking(db, booking_id)
    return ApiResponse(data=BookingRead.model_validate(booking))


@router.post("", response_model=ApiResponse[BookingRead], status_code=201)
async def create_booking(
    payload: BookingCreate,
    current_user: TokenUser = Depends(get_current_user),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """
    Book a time slot for a date.

    The date must be after today and the slot must be free on it; a slot
    already held by a pending or confirmed booking is rejected with 409.
    """
    user = await user_service.find_by_clerk_id(db, current_user.clerkId)
    booking = await booking_service.create_booking(db, payload, today, user=user)
    return ApiResponse(data=BookingRead.model_validate(booking))


@router.put("/{booking_id}/cancel", response_model=ApiResponse[BookingRead])
async def cancel_booking(booking_id: str, db: AsyncSession = Depends(get_db)):
    """Cancel a booking, releasing its slot for that date."""
    booking = await booking_service.cancel_booking(db, booking_id)
    return ApiResponse(data=BookingRead.model_validate(booking), message="Booking cancelled")


@router.put("/{booking_id}", response_model=ApiResponse[BookingRead])
async def update_booking(
    booking_id: str,
    update: BookingUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update customer details or move the booking to another status."""
    booking = await booking_service.update_booking(db, booking_id, update)
    return ApiResponse(data=BookingRead.model_validate(booking))


@router.delete("/{booking_id}", response_model=ApiResponse[None])
async def delete_booking(booking_id: str, db: AsyncSession = Depends(get_db)):
    """Permanently delete a booking."""
    await booking_service.delete_booking(db, booking_id)
    return ApiResponse(message="Booking deleted successfully")
