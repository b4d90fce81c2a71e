"""Auth endpoints bridging the identity provider to local tokens."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.config import Settings
from courtbook.core.database import get_db
from courtbook.core.security import TokenUser, create_access_token, get_current_user, get_settings
from courtbook.models.user import User
from courtbook.schemas.common import ApiResponse
from courtbook.schemas.user import (
    ProfileUpdate,
    SyncUserRequest,
    SyncUserResult,
    TokenResult,
    UserRead,
)
from courtbook.services.user_service import user_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _token_for(user: User, settings: Settings) -> str:
    return create_access_token(
        TokenUser(
            clerkId=user.clerk_id,
            email=user.email,
            firstName=user.first_name,
            lastName=user.last_name,
        ),
        settings,
    )


@router.post("/sync-user", response_model=ApiResponse[SyncUserResult])
async def sync_user(
    payload: SyncUserRequest,
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
):
    """
    Sync a signed-in identity-provider account.

    Creates or updates the local user and returns it with a bearer token
    valid for ``ACCESS_TOKEN_EXPIRE_HOURS``.
    """
    user = await user_service.sync_user(db, payload)
    return ApiResponse(
        data=SyncUserResult(user=UserRead.model_validate(user), token=_token_for(user, settings)),
        message="User synced successfully",
    )


@router.get("/profile", response_model=ApiResponse[UserRead])
async def get_profile(
    current_user: TokenUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_by_clerk_id(db, current_user.clerkId)
    return ApiResponse(data=UserRead.model_validate(user))


@router.put("/profile", response_model=ApiResponse[UserRead])
async def update_profile(
    update: ProfileUpdate,
    current_user: TokenUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.update_profile(db, current_user.clerkId, update)
    return ApiResponse(data=UserRead.model_validate(user), message="Profile updated successfully")


@router.post("/refresh", response_model=ApiResponse[TokenResult])
async def refresh_token(
    current_user: TokenUser = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
):
    """Issue a fresh token for an existing user."""
    user = await user_service.get_by_clerk_id(db, current_user.clerkId)
    return ApiResponse(
        data=TokenResult(token=_token_for(user, settings)),
        message="Token refreshed successfully",
    )
