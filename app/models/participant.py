"""Participant Model"""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.meeting import Meeting
    from app.models.user import User


class Participant(Base):
    """Membership of a user in a meeting, as host or guest."""

    __tablename__ = "participants"
    __table_args__ = (
        UniqueConstraint("user_id", "meeting_id", name="uq_participant_user_meeting"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    meeting_id: Mapped[int] = mapped_column(
        ForeignKey("meetings.id", ondelete="CASCADE"),
        index=True,
    )

    # Role and response
    is_host: Mapped[bool] = mapped_column(Boolean, default=False)
    has_responded: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="participations")
    meeting: Mapped["Meeting"] = relationship("Meeting", back_populates="participants")

    def __repr__(self) -> str:
        role = "host" if self.is_host else "guest"
        return f"<Participant User {self.user_id} in Meeting {self.meeting_id} ({role})>"
