"""Booking status values and the transitions allowed between them."""
import enum
from typing import Dict, FrozenSet, Tuple

from courtbook.core.exceptions import InvalidStatusTransitionError


class BookingStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# Bookings in these states occupy their slot for the booking date.
ACTIVE_STATUSES: Tuple[BookingStatus, ...] = (BookingStatus.PENDING, BookingStatus.CONFIRMED)

ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED}),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
}


def can_transition(current: BookingStatus, requested: BookingStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS[current]


def validate_transition(current: BookingStatus, requested: BookingStatus) -> BookingStatus:
    """
    Check a status change against the transition table.

    Args:
        current: Status the booking has now
        requested: Status the caller wants

    Returns:
        The requested status

    Raises:
        InvalidStatusTransitionError: If the table doesn't allow the change
    """
    if not can_transition(current, requested):
        raise InvalidStatusTransitionError(current, requested)
    return requested
