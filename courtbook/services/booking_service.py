"""Booking service: admission checks, queries and status changes."""
import logging
from datetime import date
from typing import List, Optional, Sequence, Union

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from courtbook.core.booking_status import BookingStatus, validate_transition
from courtbook.core.exceptions import InvalidInputError, NotFoundError, SlotAlreadyBookedError
from courtbook.core.timeutils import parse_date, weekday_index
from courtbook.models.booking import Booking
from courtbook.models.time_slot import TimeSlot
from courtbook.models.user import User
from courtbook.schemas.booking import BookingCreate, BookingUpdate
from courtbook.services.availability_service import availability_service

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("court_id", "Court ID"),
    ("time_slot_id", "time slot ID"),
    ("customer_name", "customer name"),
    ("customer_email", "customer email"),
    ("booking_date", "booking date"),
)


def _booking_query():
    """Select bookings with court, time slot and user loaded."""
    return (
        select(Booking)
        .options(
            selectinload(Booking.court),
            selectinload(Booking.time_slot),
            selectinload(Booking.user),
        )
        .execution_options(populate_existing=True)
    )


class BookingService:
    """Service for managing bookings."""

    async def create_booking(
        self,
        db: AsyncSession,
        payload: BookingCreate,
        today: date,
        user: Optional[User] = None,
    ) -> Booking:
        """
        Create a booking if the slot is free on the requested date.

        Checks run in a fixed order and nothing is written until all pass:
        required fields, date format, date strictly after ``today``, slot
        belongs to the court and runs on that weekday, no active booking on
        the same slot and date.

        The partial unique index on active bookings backs up the conflict
        check, so a concurrent request that slips past it still fails with
        ``SlotAlreadyBookedError``.

        Args:
            db: Database session
            payload: Booking request
            today: Current date in the facility's timezone
            user: Local user making the booking, if synced

        Returns:
            The created booking with court, time slot and user loaded
        """
        missing = [label for field, label in REQUIRED_FIELDS if not getattr(payload, field)]
        if missing:
            raise InvalidInputError(
                "Court ID, time slot ID, customer name, customer email, "
                "and booking date are required",
                details={"missing": missing},
            )

        booking_date = parse_date(payload.booking_date, "booking date")
        if booking_date <= today:
            raise InvalidInputError("Booking date must be in the future")

        result = await db.execute(
            select(TimeSlot).where(
                and_(
                    TimeSlot.id == payload.time_slot_id,
                    TimeSlot.court_id == payload.court_id,
                    TimeSlot.is_active.is_(True),
                )
            )
        )
        slot = result.scalar_one_or_none()
        if not slot:
            raise NotFoundError(
                f"Time slot {payload.time_slot_id} not found for court {payload.court_id}"
            )

        if slot.day_of_week != weekday_index(booking_date):
            raise InvalidInputError(
                "Time slot is not offered on the selected date's day of week"
            )

        if not await availability_service.is_slot_free(db, slot.id, booking_date):
            logger.info(f"Rejected booking for slot {slot.id} on {booking_date}: already booked")
            raise SlotAlreadyBookedError(slot.id, booking_date)

        # Rollback expires loaded objects, so keep plain ids for the fallback
        slot_id = slot.id
        booking = Booking(
            court_id=payload.court_id,
            time_slot_id=slot_id,
            user_id=user.id if user else None,
            customer_name=payload.customer_name,
            customer_email=payload.customer_email,
            customer_phone=payload.customer_phone,
            booking_date=booking_date,
            status=BookingStatus.PENDING,
        )

        try:
            db.add(booking)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            if await availability_service.is_slot_free(db, slot_id, booking_date):
                raise
            logger.info(f"Lost booking race for slot {slot_id} on {booking_date}")
            raise SlotAlreadyBookedError(slot_id, booking_date)

        logger.info(f"Created booking {booking.id} for slot {slot_id} on {booking_date}")
        return await self.get_booking(db, booking.id)

    async def get_booking(self, db: AsyncSession, booking_id: str) -> Booking:
        """Get a booking by ID or raise NotFoundError."""
        result = await db.execute(_booking_query().where(Booking.id == booking_id))
        booking = result.scalar_one_or_none()
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    async def list_bookings(self, db: AsyncSession) -> Sequence[Booking]:
        result = await db.execute(_booking_query().order_by(Booking.created_at.desc()))
        return result.scalars().all()

    async def bookings_for_court(self, db: AsyncSession, court_id: str) -> Sequence[Booking]:
        result = await db.execute(
            _booking_query()
            .where(Booking.court_id == court_id)
            .order_by(Booking.booking_date.desc())
        )
        return result.scalars().all()

    async def bookings_for_user(self, db: AsyncSession, user_id: str) -> Sequence[Booking]:
        result = await db.execute(
            _booking_query()
            .where(Booking.user_id == user_id)
            .order_by(Booking.booking_date.desc())
        )
        return result.scalars().all()

    async def bookings_on_date(
        self, db: AsyncSession, target_date: Union[str, date]
    ) -> Sequence[Booking]:
        """Bookings on a date, earliest slot first."""
        day = parse_date(target_date)
        result = await db.execute(
            _booking_query()
            .join(Booking.time_slot)
            .where(Booking.booking_date == day)
            .order_by(TimeSlot.start_time)
        )
        return result.scalars().all()

    async def update_booking(
        self, db: AsyncSession, booking_id: str, update: BookingUpdate
    ) -> Booking:
        """
        Update customer details and optionally the status.

        A status change must be allowed by the transition table.
        """
        booking = await self.get_booking(db, booking_id)

        update_data = update.model_dump(exclude_unset=True, exclude_none=True)
        new_status = update_data.pop("status", None)
        if new_status is not None and new_status != booking.status:
            validate_transition(booking.status, new_status)
            logger.info(f"Booking {booking.id}: {booking.status.value} -> {new_status.value}")
            booking.status = new_status

        for field, value in update_data.items():
            setattr(booking, field, value)

        await db.commit()
        return await self.get_booking(db, booking_id)

    async def change_status(
        self, db: AsyncSession, booking_id: str, new_status: BookingStatus
    ) -> Booking:
        booking = await self.get_booking(db, booking_id)
        validate_transition(booking.status, new_status)
        logger.info(f"Booking {booking.id}: {booking.status.value} -> {new_status.value}")
        booking.status = new_status
        await db.commit()
        return await self.get_booking(db, booking_id)

    async def cancel_booking(self, db: AsyncSession, booking_id: str) -> Booking:
        """Cancel a booking, freeing its slot for the booking date."""
        return await self.change_status(db, booking_id, BookingStatus.CANCELLED)

    async def delete_booking(self, db: AsyncSession, booking_id: str) -> None:
        booking = await self.get_booking(db, booking_id)
        await db.delete(booking)
        await db.commit()
        logger.info(f"Deleted booking {booking_id}")

    async def complete_elapsed_bookings(self, db: AsyncSession, today: date) -> List[str]:
        """
        Mark confirmed bookings dated before ``today`` as completed.

        Returns:
            IDs of the bookings that were completed
        """
        result = await db.execute(
            select(Booking).where(
                and_(
                    Booking.status == BookingStatus.CONFIRMED,
                    Booking.booking_date < today,
                )
            )
        )
        bookings = result.scalars().all()

        completed = []
        for booking in bookings:
            booking.status = validate_transition(booking.status, BookingStatus.COMPLETED)
            completed.append(booking.id)

        if completed:
            await db.commit()
            logger.info(f"Completed {len(completed)} elapsed booking(s)")

        return completed


# Singleton instance
booking_service = BookingService()
