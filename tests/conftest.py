"""Shared fixtures: an isolated SQLite store per test and an app built on it."""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from courtbook.core.config import Settings
from courtbook.core.database import Database
from courtbook.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'courtbook.db'}",
        JWT_SECRET=TEST_SECRET,
        FACILITY_TIMEZONE="UTC",
        SCHEDULER_ENABLED=False,
    )


@pytest_asyncio.fixture
async def database(settings):
    database = Database(settings.DATABASE_URL)
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Sync a user through the API and return its bearer header."""
    response = client.post(
        "/api/auth/sync-user",
        json={
            "clerkId": "user_abc123",
            "email": "jamie@example.com",
            "firstName": "Jamie",
            "lastName": "Doe",
        },
    )
    assert response.status_code == 200
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def court(client):
    response = client.post(
        "/api/courts",
        json={"name": "Football Court 1", "description": "Artificial turf"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def create_slot(client, court):
    """Create time slots on the ``court`` fixture through the API."""

    def _make(day_of_week: int, start_time: str = "06:00", end_time: str = "07:00"):
        response = client.post(
            "/api/timeslots",
            json={
                "courtId": court["id"],
                "startTime": start_time,
                "endTime": end_time,
                "dayOfWeek": day_of_week,
            },
        )
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    return _make
