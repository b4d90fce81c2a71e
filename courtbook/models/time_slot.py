"""Time slot model."""
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from courtbook.core.database import Base, generate_id


class TimeSlot(Base):
    """A recurring weekly interval offered by a court.

    ``day_of_week`` counts from Sunday (0) to Saturday (6). Start and end
    are ``HH:MM`` wall-clock strings, so they sort lexically.
    """

    __tablename__ = "time_slots"

    id = Column(String, primary_key=True, default=generate_id)
    court_id = Column(String, ForeignKey("courts.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    day_of_week = Column(Integer, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    court = relationship("Court", back_populates="time_slots")
    bookings = relationship("Booking", back_populates="time_slot")

    __table_args__ = (
        UniqueConstraint(
            "court_id", "start_time", "end_time", "day_of_week", name="uq_time_slots_court_interval"
        ),
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_time_slots_day_of_week"),
    )
