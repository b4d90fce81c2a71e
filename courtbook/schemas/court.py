"""Court schemas."""
from datetime import datetime
from typing import List, Optional

from courtbook.schemas.common import CamelModel
from courtbook.schemas.time_slot import TimeSlotRead


class CourtCreate(CamelModel):
    """Schema for creating a court."""

    name: Optional[str] = None
    description: Optional[str] = None


class CourtUpdate(CamelModel):
    """Schema for updating a court."""

    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class CourtRead(CamelModel):
    """Schema for court from database."""

    id: str
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CourtWithSlots(CourtRead):
    """Court with its active time slots."""

    time_slots: List[TimeSlotRead] = []
