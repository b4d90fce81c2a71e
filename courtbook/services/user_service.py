"""User service for identity-provider sync and profiles."""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.exceptions import ConflictError, NotFoundError
from courtbook.models.user import User
from courtbook.schemas.user import ProfileUpdate, SyncUserRequest

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing locally mirrored users."""

    async def find_by_clerk_id(self, db: AsyncSession, clerk_id: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.clerk_id == clerk_id))
        return result.scalar_one_or_none()

    async def get_by_clerk_id(self, db: AsyncSession, clerk_id: str) -> User:
        user = await self.find_by_clerk_id(db, clerk_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def sync_user(self, db: AsyncSession, payload: SyncUserRequest) -> User:
        """
        Create or update the local user for an identity-provider account.

        Args:
            db: Database session
            payload: Identity fields from the provider

        Returns:
            The stored user

        Raises:
            ConflictError: If the email already belongs to another account
        """
        user = await self.find_by_clerk_id(db, payload.clerk_id)

        if user:
            user.email = payload.email
            user.first_name = payload.first_name or None
            user.last_name = payload.last_name or None
        else:
            user = User(
                clerk_id=payload.clerk_id,
                email=payload.email,
                first_name=payload.first_name or None,
                last_name=payload.last_name or None,
            )
            db.add(user)

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError(f"Email {payload.email} is already linked to another account")
        await db.refresh(user)

        logger.info(f"Synced user {user.clerk_id} ({user.id})")
        return user

    async def update_profile(
        self, db: AsyncSession, clerk_id: str, update: ProfileUpdate
    ) -> User:
        user = await self.get_by_clerk_id(db, clerk_id)

        update_data = update.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(user, field, value)

        await db.commit()
        await db.refresh(user)

        return user


# Singleton instance
user_service = UserService()
