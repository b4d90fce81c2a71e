"""Seed the database with the demo courts and their weekly slots.

Run with ``python -m courtbook.seed``. Existing rows are left untouched, so
the command can be repeated safely.
"""
import asyncio
import logging
from typing import List, Tuple

from sqlalchemy import and_, select

from courtbook.core.config import settings
from courtbook.core.database import Database
from courtbook.models.court import Court
from courtbook.models.time_slot import TimeSlot

logger = logging.getLogger(__name__)

COURTS = [
    ("court-1", "Football Court 1", "Professional football turf with artificial grass"),
    ("court-2", "Football Court 2", "Professional football turf with artificial grass"),
    ("court-3", "Cricket Ground", "Full-size cricket ground with proper pitch"),
]

# Morning 06:00-12:00 and evening 16:00-22:00, hourly
SLOT_HOURS = list(range(6, 12)) + list(range(16, 22))


def hourly_intervals(hours: List[int]) -> List[Tuple[str, str]]:
    return [(f"{hour:02d}:00", f"{hour + 1:02d}:00") for hour in hours]


async def seed(database: Database) -> Tuple[int, int]:
    """
    Insert the demo courts and one slot per hour and weekday for each.

    Returns:
        Number of courts and time slots created
    """
    await database.create_all()
    courts_created = 0
    slots_created = 0

    async with database.session() as db:
        for court_id, name, description in COURTS:
            if await db.get(Court, court_id) is None:
                db.add(Court(id=court_id, name=name, description=description, is_active=True))
                courts_created += 1
        await db.flush()

        for day_of_week in range(7):
            for start_time, end_time in hourly_intervals(SLOT_HOURS):
                for court_id, _, _ in COURTS:
                    result = await db.execute(
                        select(TimeSlot.id).where(
                            and_(
                                TimeSlot.court_id == court_id,
                                TimeSlot.start_time == start_time,
                                TimeSlot.end_time == end_time,
                                TimeSlot.day_of_week == day_of_week,
                            )
                        )
                    )
                    if result.first() is None:
                        db.add(
                            TimeSlot(
                                court_id=court_id,
                                start_time=start_time,
                                end_time=end_time,
                                day_of_week=day_of_week,
                                is_active=True,
                            )
                        )
                        slots_created += 1

        await db.commit()

    logger.info(f"Created {courts_created} court(s) and {slots_created} time slot(s)")
    return courts_created, slots_created


async def main():
    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await seed(database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(main())
