"""Time slot catalog service."""
import logging
from typing import List

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from courtbook.core.booking_status import ACTIVE_STATUSES
from courtbook.core.exceptions import DuplicateTimeSlotError, InvalidInputError, NotFoundError
from courtbook.core.timeutils import validate_wall_clock
from courtbook.models.booking import Booking
from courtbook.models.court import Court
from courtbook.models.time_slot import TimeSlot
from courtbook.schemas.availability import TimeSlotDetail, TimeSlotWithBookings
from courtbook.schemas.time_slot import TimeSlotCreate, TimeSlotUpdate

logger = logging.getLogger(__name__)


def _validate_interval(start_time: str, end_time: str, day_of_week: int):
    validate_wall_clock(start_time, "startTime")
    validate_wall_clock(end_time, "endTime")
    if end_time <= start_time:
        raise InvalidInputError("endTime must be after startTime")
    if day_of_week < 0 or day_of_week > 6:
        raise InvalidInputError("Day of week must be between 0 (Sunday) and 6 (Saturday)")


class TimeSlotService:
    """Service for administering a court's weekly time slots."""

    async def create_time_slot(self, db: AsyncSession, slot: TimeSlotCreate) -> TimeSlot:
        """
        Create a weekly time slot for a court.

        Args:
            db: Database session
            slot: Court ID, start/end time and day of week

        Returns:
            Created time slot

        Raises:
            InvalidInputError: On missing fields or a bad interval
            NotFoundError: If the court doesn't exist
            DuplicateTimeSlotError: If the court already has this interval
        """
        if (
            not slot.court_id
            or not slot.start_time
            or not slot.end_time
            or slot.day_of_week is None
        ):
            raise InvalidInputError(
                "Court ID, start time, end time, and day of week are required"
            )
        _validate_interval(slot.start_time, slot.end_time, slot.day_of_week)

        result = await db.execute(select(Court.id).where(Court.id == slot.court_id))
        if result.first() is None:
            raise NotFoundError("Court not found")

        db_slot = TimeSlot(
            court_id=slot.court_id,
            start_time=slot.start_time,
            end_time=slot.end_time,
            day_of_week=slot.day_of_week,
        )
        try:
            db.add(db_slot)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise DuplicateTimeSlotError(
                "Court already has a time slot with this day, start and end"
            )
        await db.refresh(db_slot)

        logger.info(
            f"Created slot {db_slot.id} for court {db_slot.court_id}: "
            f"day {db_slot.day_of_week} {db_slot.start_time}-{db_slot.end_time}"
        )
        return db_slot

    async def slots_for_court(self, db: AsyncSession, court_id: str) -> List[TimeSlotWithBookings]:
        """Active slots of a court, each with its active bookings."""
        result = await db.execute(
            select(TimeSlot)
            .options(selectinload(TimeSlot.bookings.and_(Booking.status.in_(ACTIVE_STATUSES))))
            .where(and_(TimeSlot.court_id == court_id, TimeSlot.is_active.is_(True)))
            .order_by(TimeSlot.day_of_week, TimeSlot.start_time)
            .execution_options(populate_existing=True)
        )
        return [TimeSlotWithBookings.model_validate(slot) for slot in result.scalars().all()]

    async def get_time_slot(self, db: AsyncSession, slot_id: str) -> TimeSlotDetail:
        """Get a slot with its court and all its bookings."""
        result = await db.execute(
            select(TimeSlot)
            .options(selectinload(TimeSlot.court), selectinload(TimeSlot.bookings))
            .where(TimeSlot.id == slot_id)
            .execution_options(populate_existing=True)
        )
        slot = result.scalar_one_or_none()

        if not slot:
            raise NotFoundError("Time slot not found")

        return TimeSlotDetail.model_validate(slot)

    async def _get_plain(self, db: AsyncSession, slot_id: str) -> TimeSlot:
        result = await db.execute(select(TimeSlot).where(TimeSlot.id == slot_id))
        slot = result.scalar_one_or_none()
        if not slot:
            raise NotFoundError("Time slot not found")
        return slot

    async def update_time_slot(
        self, db: AsyncSession, slot_id: str, slot_update: TimeSlotUpdate
    ) -> TimeSlot:
        slot = await self._get_plain(db, slot_id)

        update_data = slot_update.model_dump(exclude_unset=True, exclude_none=True)
        _validate_interval(
            update_data.get("start_time", slot.start_time),
            update_data.get("end_time", slot.end_time),
            update_data.get("day_of_week", slot.day_of_week),
        )

        for field, value in update_data.items():
            setattr(slot, field, value)

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise DuplicateTimeSlotError(
                "Court already has a time slot with this day, start and end"
            )
        await db.refresh(slot)

        return slot

    async def deactivate_time_slot(self, db: AsyncSession, slot_id: str) -> TimeSlot:
        """Soft delete: existing bookings keep their slot."""
        slot = await self._get_plain(db, slot_id)
        slot.is_active = False
        await db.commit()
        await db.refresh(slot)

        logger.info(f"Deactivated slot {slot.id}")
        return slot


# Singleton instance
time_slot_service = TimeSlotService()
