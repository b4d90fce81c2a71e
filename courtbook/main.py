"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courtbook.api import auth, bookings, courts, time_slots
from courtbook.core.config import Settings, settings as default_settings
from courtbook.core.database import Database
from courtbook.core.errors import register_error_handlers
from courtbook.services.scheduler import HousekeepingScheduler

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application around an explicit settings object and store.

    Args:
        settings: Settings to use (defaults to the environment)
        database: Store handle (defaults to one built from ``DATABASE_URL``)

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings
    database = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    scheduler = HousekeepingScheduler(database, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        logger.info("Starting court booking service")
        logger.info(f"Debug mode: {settings.DEBUG}")

        await database.create_all()
        if settings.SCHEDULER_ENABLED:
            await scheduler.start()

        yield

        # Shutdown
        logger.info("Shutting down court booking service")
        await scheduler.stop()
        await database.dispose()

    app = FastAPI(
        title="Court Booking API",
        description="Book sports courts by weekly time slot and date",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database
    app.state.scheduler = scheduler

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(courts.router)
    app.include_router(time_slots.router)
    app.include_router(bookings.router)
    app.include_router(auth.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "scheduler_running": scheduler.running,
        }

    @app.get("/api/check/v1/ping")
    async def ping():
        return {"success": True, "message": "pong"}

    return app


app = create_app()
