"""Bearer token issuing and verification."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from courtbook.core.config import Settings
from courtbook.core.exceptions import AuthenticationRequiredError, InvalidTokenError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """Identity decoded from a bearer token."""

    clerkId: str
    email: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def create_access_token(user: TokenUser, settings: Settings) -> str:
    """
    Create a signed access token for a synced user.

    Args:
        user: Identity claims to embed
        settings: Application settings holding the secret and lifetime

    Returns:
        The encoded JWT
    """
    to_encode: Dict[str, Any] = user.model_dump(exclude_none=True)
    to_encode["exp"] = datetime.now(timezone.utc) + timedelta(
        hours=settings.ACCESS_TOKEN_EXPIRE_HOURS
    )
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> TokenUser:
    """Verify a token's signature and expiry and return its identity."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.PyJWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise InvalidTokenError("Invalid or expired token")

    if not payload.get("clerkId") or not payload.get("email"):
        raise InvalidTokenError("Invalid or expired token")

    return TokenUser(
        clerkId=payload["clerkId"],
        email=payload["email"],
        firstName=payload.get("firstName"),
        lastName=payload.get("lastName"),
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> TokenUser:
    """FastAPI dependency resolving the caller from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredError("Access token required")
    return decode_access_token(credentials.credentials, settings)
