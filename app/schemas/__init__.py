"""Pydantic Schemas"""

from app.schemas.meeting import (
    GuestMeetings,
    HostMeetings,
    MeetingDashboard,
    MeetingResponse,
)

__all__ = [
    "MeetingResponse",
    "HostMeetings",
    "GuestMeetings",
    "MeetingDashboard",
]
