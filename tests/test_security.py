from datetime import datetime, timedelta, timezone

import jwt
import pytest

from courtbook.core.config import Settings
from courtbook.core.exceptions import InvalidTokenError
from courtbook.core.security import TokenUser, create_access_token, decode_access_token


@pytest.fixture
def token_settings():
    return Settings(JWT_SECRET="unit-secret", SCHEDULER_ENABLED=False)


def test_token_round_trip(token_settings):
    user = TokenUser(clerkId="user_1", email="a@example.com", firstName="Ada")
    token = create_access_token(user, token_settings)

    decoded = decode_access_token(token, token_settings)

    assert decoded == user


def test_token_expires_after_configured_hours(token_settings):
    token = create_access_token(TokenUser(clerkId="user_1", email="a@example.com"), token_settings)
    payload = jwt.decode(token, "unit-secret", algorithms=["HS256"])

    expires = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    expected = datetime.now(timezone.utc) + timedelta(hours=24)
    assert abs((expires - expected).total_seconds()) < 60


def test_wrong_secret_rejected(token_settings):
    token = create_access_token(TokenUser(clerkId="user_1", email="a@example.com"), token_settings)
    other = Settings(JWT_SECRET="another-secret", SCHEDULER_ENABLED=False)

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, other)


def test_expired_token_rejected(token_settings):
    token = jwt.encode(
        {
            "clerkId": "user_1",
            "email": "a@example.com",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=5),
        },
        "unit-secret",
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, token_settings)


def test_token_without_identity_rejected(token_settings):
    token = jwt.encode({"sub": "someone"}, "unit-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, token_settings)


def test_token_without_expiry_rejected(token_settings):
    token = jwt.encode({"clerkId": "user_1", "email": "a@example.com"}, "unit-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, token_settings)
