"""Court model."""
from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from courtbook.core.database import Base, generate_id


class Court(Base):
    """Represents a bookable court at the facility."""

    __tablename__ = "courts"

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    time_slots = relationship("TimeSlot", back_populates="court", order_by="TimeSlot.start_time")
    bookings = relationship("Booking", back_populates="court")
