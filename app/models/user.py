"""User Model"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.participant import Participant


class User(Base):
    """User account model."""

    __tablename__ = "users"

    # User information
    user_name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)

    # Account status
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # Relationships
    participations: Mapped[List["Participant"]] = relationship(
        "Participant", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"
