"""Booking model."""
from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Index, String, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from courtbook.core.booking_status import ACTIVE_STATUSES, BookingStatus
from courtbook.core.database import Base, generate_id

# Partial index predicate over the active statuses
ACTIVE_STATUS_PREDICATE = text(
    "status IN (" + ", ".join(f"'{status.value}'" for status in ACTIVE_STATUSES) + ")"
)


class Booking(Base):
    """Reservation of one time slot on one calendar date."""

    __tablename__ = "bookings"

    id = Column(String, primary_key=True, default=generate_id)
    court_id = Column(String, ForeignKey("courts.id", ondelete="CASCADE"), nullable=False, index=True)
    time_slot_id = Column(String, ForeignKey("time_slots.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_phone = Column(String, nullable=True)
    booking_date = Column(Date, nullable=False, index=True)
    status = Column(
        Enum(BookingStatus, name="booking_status", native_enum=False, length=16),
        default=BookingStatus.PENDING,
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    court = relationship("Court", back_populates="bookings")
    time_slot = relationship("TimeSlot", back_populates="bookings")
    user = relationship("User", back_populates="bookings")

    __table_args__ = (
        # At most one active booking per slot and date
        Index(
            "uq_bookings_active_slot",
            "time_slot_id",
            "booking_date",
            unique=True,
            postgresql_where=ACTIVE_STATUS_PREDICATE,
            sqlite_where=ACTIVE_STATUS_PREDICATE,
        ),
    )
