"""Shared endpoint dependencies."""
from datetime import date

from fastapi import Depends

from courtbook.core.config import Settings
from courtbook.core.security import get_settings
from courtbook.core.timeutils import facility_today


async def get_today(settings: Settings = Depends(get_settings)) -> date:
    """Current date at the facility."""
    return facility_today(settings.FACILITY_TIMEZONE)
