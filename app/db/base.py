"""Declarative base shared by all models."""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base model with primary key and timestamps."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Column values keyed by attribute name."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
