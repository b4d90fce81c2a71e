"""Time slot schemas."""
from datetime import datetime
from typing import Optional

from courtbook.schemas.common import CamelModel


class TimeSlotCreate(CamelModel):
    """Schema for creating a time slot."""

    court_id: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    day_of_week: Optional[int] = None


class TimeSlotUpdate(CamelModel):
    """Schema for updating a time slot."""

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    day_of_week: Optional[int] = None
    is_active: Optional[bool] = None


class TimeSlotRead(CamelModel):
    """Schema for time slot from database."""

    id: str
    court_id: str
    start_time: str
    end_time: str
    day_of_week: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
