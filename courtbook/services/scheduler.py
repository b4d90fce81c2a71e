"""Background scheduler for booking housekeeping."""
import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from courtbook.core.config import Settings
from courtbook.core.database import Database
from courtbook.core.timeutils import facility_today
from courtbook.services.booking_service import booking_service

logger = logging.getLogger(__name__)


class HousekeepingScheduler:
    """Periodically completes confirmed bookings whose date has passed."""

    def __init__(self, database: Database, settings: Settings):
        """Initialize the scheduler."""
        self.database = database
        self.settings = settings
        self.scheduler: Optional[AsyncIOScheduler] = None
        self.running = False

    async def start(self):
        """Start the scheduler."""
        if self.running:
            logger.warning("Scheduler is already running")
            return

        logger.info("Starting housekeeping scheduler")

        # Bound to the running loop, so built here rather than in __init__
        self.scheduler = AsyncIOScheduler(timezone=self.settings.FACILITY_TIMEZONE)
        self.scheduler.add_job(
            self.complete_elapsed_bookings,
            IntervalTrigger(minutes=self.settings.COMPLETION_INTERVAL_MINUTES),
            id="complete_elapsed_bookings",
            name="Complete elapsed bookings",
            replace_existing=True,
        )

        self.scheduler.start()
        self.running = True
        logger.info("Housekeeping scheduler started")

    async def stop(self):
        """Stop the scheduler."""
        if not self.running:
            return

        logger.info("Stopping housekeeping scheduler")
        self.scheduler.shutdown(wait=False)
        self.running = False
        logger.info("Housekeeping scheduler stopped")

    async def complete_elapsed_bookings(self) -> int:
        """
        Move CONFIRMED bookings dated before today to COMPLETED.

        Errors are logged and swallowed so one failed run doesn't stop
        the job from firing again.

        Returns:
            Number of bookings completed
        """
        today = facility_today(self.settings.FACILITY_TIMEZONE)
        logger.debug(f"Running housekeeping for bookings before {today}")

        async with self.database.session() as db:
            try:
                completed = await booking_service.complete_elapsed_bookings(db, today)
            except Exception as e:
                logger.error(f"Error completing elapsed bookings: {e}", exc_info=True)
                await db.rollback()
                return 0

        return len(completed)
