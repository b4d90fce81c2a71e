"""Availability service resolving which time slots are free on a date."""
import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Union

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from courtbook.core.booking_status import ACTIVE_STATUSES
from courtbook.core.timeutils import parse_date, weekday_index
from courtbook.models.booking import Booking
from courtbook.models.time_slot import TimeSlot
from courtbook.schemas.availability import AvailableSlot
from courtbook.schemas.booking import BookingSummary
from courtbook.schemas.court import CourtRead
from courtbook.schemas.time_slot import TimeSlotRead

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Service for computing slot occupancy."""

    async def available_slots(
        self,
        db: AsyncSession,
        court_id: str,
        target_date: Union[str, date, None],
    ) -> List[AvailableSlot]:
        """
        Get a court's time slots for a date, annotated with occupancy.

        Only active slots whose day of week matches the date are returned.
        A slot is occupied when it has a PENDING or CONFIRMED booking on
        that date. An unknown court yields an empty list.

        Args:
            db: Database session
            court_id: Court ID
            target_date: Date as ``YYYY-MM-DD`` (or a date)

        Returns:
            Slots ordered by start time

        Raises:
            InvalidInputError: If the date is missing or malformed
        """
        day = parse_date(target_date)
        day_of_week = weekday_index(day)

        result = await db.execute(
            select(TimeSlot)
            .options(selectinload(TimeSlot.court))
            .where(
                and_(
                    TimeSlot.court_id == court_id,
                    TimeSlot.day_of_week == day_of_week,
                    TimeSlot.is_active.is_(True),
                )
            )
            .order_by(TimeSlot.start_time)
        )
        slots = result.scalars().all()

        if not slots:
            logger.debug(f"No slots for court {court_id} on {day} (weekday {day_of_week})")
            return []

        # One query for every active booking on this date, keyed by slot
        result = await db.execute(
            select(Booking).where(
                and_(
                    Booking.time_slot_id.in_([slot.id for slot in slots]),
                    Booking.booking_date == day,
                    Booking.status.in_(ACTIVE_STATUSES),
                )
            )
        )
        bookings_by_slot: Dict[str, List[Booking]] = defaultdict(list)
        for booking in result.scalars().all():
            bookings_by_slot[booking.time_slot_id].append(booking)

        available = []
        for slot in slots:
            claimed = bookings_by_slot.get(slot.id, [])
            available.append(
                AvailableSlot(
                    **TimeSlotRead.model_validate(slot).model_dump(),
                    court=CourtRead.model_validate(slot.court),
                    bookings=[BookingSummary.model_validate(b) for b in claimed],
                    is_available=not claimed,
                )
            )

        return available

    async def is_slot_free(self, db: AsyncSession, time_slot_id: str, day: date) -> bool:
        """Whether no active booking claims the slot on the given date."""
        result = await db.execute(
            select(Booking.id)
            .where(
                and_(
                    Booking.time_slot_id == time_slot_id,
                    Booking.booking_date == day,
                    Booking.status.in_(ACTIVE_STATUSES),
                )
            )
            .limit(1)
        )
        return result.first() is None


# Singleton instance
availability_service = AvailabilityService()
