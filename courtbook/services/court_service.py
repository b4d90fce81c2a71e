"""Court catalog service."""
import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from courtbook.core.exceptions import InvalidInputError, NotFoundError
from courtbook.models.court import Court
from courtbook.models.time_slot import TimeSlot
from courtbook.schemas.court import CourtCreate, CourtUpdate

logger = logging.getLogger(__name__)


def _with_active_slots():
    return selectinload(Court.time_slots.and_(TimeSlot.is_active.is_(True)))


class CourtService:
    """Service for administering courts."""

    async def create_court(self, db: AsyncSession, court: CourtCreate) -> Court:
        if not court.name or not court.name.strip():
            raise InvalidInputError("Court name is required")

        db_court = Court(name=court.name.strip(), description=court.description)
        db.add(db_court)
        await db.commit()
        await db.refresh(db_court)

        logger.info(f"Created court {db_court.name} ({db_court.id})")
        return db_court

    async def list_courts(self, db: AsyncSession) -> Sequence[Court]:
        """Active courts with their active time slots."""
        result = await db.execute(
            select(Court)
            .options(_with_active_slots())
            .where(Court.is_active.is_(True))
            .order_by(Court.name)
            .execution_options(populate_existing=True)
        )
        return result.scalars().all()

    async def get_court(self, db: AsyncSession, court_id: str) -> Court:
        """Get a court with its active time slots or raise NotFoundError."""
        result = await db.execute(
            select(Court)
            .options(_with_active_slots())
            .where(Court.id == court_id)
            .execution_options(populate_existing=True)
        )
        court = result.scalar_one_or_none()

        if not court:
            raise NotFoundError("Court not found")

        return court

    async def _get_plain(self, db: AsyncSession, court_id: str) -> Court:
        result = await db.execute(select(Court).where(Court.id == court_id))
        court = result.scalar_one_or_none()
        if not court:
            raise NotFoundError("Court not found")
        return court

    async def update_court(
        self, db: AsyncSession, court_id: str, court_update: CourtUpdate
    ) -> Court:
        court = await self._get_plain(db, court_id)

        update_data = court_update.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in update_data and not update_data["name"].strip():
            raise InvalidInputError("Court name cannot be empty")

        for field, value in update_data.items():
            setattr(court, field, value)

        await db.commit()
        await db.refresh(court)

        return court

    async def deactivate_court(self, db: AsyncSession, court_id: str) -> Court:
        """Soft delete: the court and its history stay in the database."""
        court = await self._get_plain(db, court_id)
        court.is_active = False
        await db.commit()
        await db.refresh(court)

        logger.info(f"Deactivated court {court.name} ({court.id})")
        return court


# Singleton instance
court_service = CourtService()
