"""Domain exceptions.

Each exception carries the HTTP status it maps to, so the API layer can
render it without a lookup table. Handlers live in ``courtbook.core.errors``.
"""
from typing import Any, Dict, Optional


class CourtBookingError(Exception):
    """Base exception for all domain errors."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(CourtBookingError):
    """Missing or malformed input, including bad dates."""

    status_code = 400


class AuthenticationRequiredError(CourtBookingError):
    """No bearer token was presented."""

    status_code = 401


class InvalidTokenError(CourtBookingError):
    """The bearer token failed verification or has expired."""

    status_code = 403


class NotFoundError(CourtBookingError):
    """A referenced record does not exist."""

    status_code = 404


class ConflictError(CourtBookingError):
    status_code = 409


class SlotAlreadyBookedError(ConflictError):
    """The time slot already has an active booking on the requested date."""

    def __init__(self, time_slot_id: str, booking_date):
        super().__init__(
            "This time slot is already booked for the selected date",
            details={"timeSlotId": time_slot_id, "bookingDate": str(booking_date)},
        )


class DuplicateTimeSlotError(ConflictError):
    """A court already offers a slot with the same day, start and end."""


class InvalidStatusTransitionError(ConflictError):
    """A booking status change not allowed by the transition table."""

    def __init__(self, current, requested):
        super().__init__(
            f"Cannot change booking status from {current.value} to {requested.value}",
            details={"from": current.value, "to": requested.value},
        )
