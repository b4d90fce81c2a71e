"""Helpers for building test data."""
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.booking_status import BookingStatus
from courtbook.core.timeutils import facility_today, weekday_index
from courtbook.models.booking import Booking
from courtbook.models.court import Court
from courtbook.models.time_slot import TimeSlot

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)


def next_weekday(day_of_week: int, after: Optional[date] = None) -> date:
    """First date strictly after ``after`` (default: today) on the given weekday."""
    day = (after or facility_today("UTC")) + timedelta(days=1)
    while weekday_index(day) != day_of_week:
        day += timedelta(days=1)
    return day


async def make_court(db: AsyncSession, name: str = "Centre Court", **kwargs) -> Court:
    court = Court(name=name, **kwargs)
    db.add(court)
    await db.commit()
    await db.refresh(court)
    return court


async def make_slot(
    db: AsyncSession,
    court: Court,
    day_of_week: int = MONDAY,
    start_time: str = "06:00",
    end_time: str = "07:00",
    is_active: bool = True,
) -> TimeSlot:
    slot = TimeSlot(
        court_id=court.id,
        day_of_week=day_of_week,
        start_time=start_time,
        end_time=end_time,
        is_active=is_active,
    )
    db.add(slot)
    await db.commit()
    await db.refresh(slot)
    return slot


async def make_booking(
    db: AsyncSession,
    slot: TimeSlot,
    booking_date: date,
    status: BookingStatus = BookingStatus.PENDING,
    customer_name: str = "Jamie Doe",
) -> Booking:
    """Insert a booking directly, bypassing the admission checks."""
    booking = Booking(
        court_id=slot.court_id,
        time_slot_id=slot.id,
        customer_name=customer_name,
        customer_email="jamie@example.com",
        booking_date=booking_date,
        status=status,
    )
    db.add(booking)
    await db.commit()
    await db.refresh(booking)
    return booking
