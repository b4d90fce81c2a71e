"""Schemas for time slots viewed together with their bookings."""
from typing import List

from courtbook.schemas.booking import BookingSummary
from courtbook.schemas.court import CourtRead
from courtbook.schemas.time_slot import TimeSlotRead


class TimeSlotWithBookings(TimeSlotRead):
    """Time slot with its active bookings."""

    bookings: List[BookingSummary] = []


class TimeSlotDetail(TimeSlotWithBookings):
    """Time slot with its court and every booking ever made on it."""

    court: CourtRead


class AvailableSlot(TimeSlotWithBookings):
    """A time slot on a specific date.

    ``bookings`` holds the active bookings for that date only; the slot is
    available when there are none.
    """

    court: CourtRead
    is_available: bool
