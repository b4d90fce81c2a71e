"""Database engine and session management."""
import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class Database:
    """Owns the async engine and hands out sessions.

    One instance is built per application in ``create_app`` and stored on
    ``app.state.db``; request handlers reach it through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True)
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def create_all(self):
        """Create the tables if they don't exist."""
        # Import models so they register on Base.metadata
        import courtbook.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready")

    async def dispose(self):
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a session from the app's database."""
    database: Database = request.app.state.db
    async with database.session() as session:
        yield session


def generate_id() -> str:
    """Primary key default for all tables."""
    return str(uuid.uuid4())
