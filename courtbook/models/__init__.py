"""Database models."""
from courtbook.models.booking import Booking
from courtbook.models.court import Court
from courtbook.models.time_slot import TimeSlot
from courtbook.models.user import User

__all__ = ["Booking", "Court", "TimeSlot", "User"]
