"""User and auth schemas."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from courtbook.schemas.common import CamelModel


class SyncUserRequest(CamelModel):
    """Identity-provider payload posted after sign-in."""

    clerk_id: str = Field(min_length=1)
    email: str = Field(min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProfileUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserRead(CamelModel):
    """Schema for user from database."""

    id: str
    clerk_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TokenResult(CamelModel):
    token: str


class SyncUserResult(CamelModel):
    user: UserRead
    token: str
