"""Booking schemas."""
from datetime import date, datetime
from typing import Optional

from courtbook.core.booking_status import BookingStatus
from courtbook.schemas.common import CamelModel
from courtbook.schemas.court import CourtRead
from courtbook.schemas.time_slot import TimeSlotRead
from courtbook.schemas.user import UserRead


class BookingCreate(CamelModel):
    """Schema for creating a booking.

    Every field is optional here; presence and format are checked by the
    booking service so that failures come back in a fixed order.
    """

    court_id: Optional[str] = None
    time_slot_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    booking_date: Optional[str] = None


class BookingUpdate(CamelModel):
    """Schema for updating a booking."""

    status: Optional[BookingStatus] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None


class BookingSummary(CamelModel):
    """Booking without its related records."""

    id: str
    court_id: str
    time_slot_id: str
    user_id: Optional[str] = None
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    booking_date: date
    status: BookingStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingRead(BookingSummary):
    """Booking joined with its court, time slot and user."""

    court: CourtRead
    time_slot: TimeSlotRead
    user: Optional[UserRead] = None
