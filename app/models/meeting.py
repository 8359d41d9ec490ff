"""Meeting Model"""

import enum
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.participant import Participant


class MeetingBucket(str, enum.Enum):
    """Role and status bucket a meeting falls into for one user."""
    HOST_CONFIRMED = "host_confirmed"
    HOST_NOT_CONFIRMED = "host_not_confirmed"  # everyone responded, host must confirm
    HOST_NOT_RESPONDED = "host_not_responded"  # waiting on guests
    GUEST_CONFIRMED = "guest_confirmed"
    GUEST_NOT_CONFIRMED = "guest_not_confirmed"  # responded, waiting on host
    GUEST_NOT_RESPONDED = "guest_not_responded"


class Meeting(Base):
    """Scheduled meeting with location and confirmation flags."""

    __tablename__ = "meetings"

    # Meeting info
    title: Mapped[str] = mapped_column(String(255), default="")
    description: Mapped[str] = mapped_column(Text, default="")

    # Location
    is_onsite: Mapped[bool] = mapped_column(Boolean, default=False)
    is_online: Mapped[bool] = mapped_column(Boolean, default=False)
    place: Mapped[str] = mapped_column(String(255), default="")
    url: Mapped[str] = mapped_column(String(1000), default="")

    # Status flags
    all_participants_responded: Mapped[bool] = mapped_column(
        Boolean, default=False, index=True
    )
    is_confirmed: Mapped[bool] = mapped_column(Boolean, default=False, index=True)

    # Schedule
    start_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    end_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    actual_start_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    actual_end_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    hour: Mapped[int] = mapped_column(Integer, default=0)  # duration in hours

    # Relationships
    participants: Mapped[List["Participant"]] = relationship(
        "Participant", back_populates="meeting", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Meeting {self.title} (confirmed={self.is_confirmed})>"
