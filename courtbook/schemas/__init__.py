"""API schemas."""
from courtbook.schemas.availability import AvailableSlot, TimeSlotDetail, TimeSlotWithBookings
from courtbook.schemas.booking import BookingCreate, BookingRead, BookingSummary, BookingUpdate
from courtbook.schemas.common import ApiResponse, CamelModel
from courtbook.schemas.court import CourtCreate, CourtRead, CourtUpdate, CourtWithSlots
from courtbook.schemas.time_slot import TimeSlotCreate, TimeSlotRead, TimeSlotUpdate
from courtbook.schemas.user import (
    ProfileUpdate,
    SyncUserRequest,
    SyncUserResult,
    TokenResult,
    UserRead,
)

__all__ = [
    "ApiResponse",
    "AvailableSlot",
    "BookingCreate",
    "BookingRead",
    "BookingSummary",
    "BookingUpdate",
    "CamelModel",
    "CourtCreate",
    "CourtRead",
    "CourtUpdate",
    "CourtWithSlots",
    "ProfileUpdate",
    "SyncUserRequest",
    "SyncUserResult",
    "TimeSlotCreate",
    "TimeSlotDetail",
    "TimeSlotRead",
    "TimeSlotUpdate",
    "TimeSlotWithBookings",
    "TokenResult",
    "UserRead",
]
