"""Meeting Pydantic Schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class MeetingResponse(BaseModel):
    """Meeting response schema."""
    id: int
    title: str = ""
    description: str = ""
    is_onsite: bool = False
    is_online: bool = False
    place: str = ""
    url: str = ""
    all_participants_responded: bool = False
    is_confirmed: bool = False
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    actual_start_time: Optional[datetime] = None
    actual_end_time: Optional[datetime] = None
    hour: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class HostMeetings(BaseModel):
    """Meetings the user hosts, by status."""
    confirmed: List[MeetingResponse] = Field(default_factory=list)
    not_confirmed: List[MeetingResponse] = Field(default_factory=list)
    not_responded: List[MeetingResponse] = Field(default_factory=list)


class GuestMeetings(BaseModel):
    """Meetings the user is invited to, by status."""
    confirmed: List[MeetingResponse] = Field(default_factory=list)
    not_confirmed: List[MeetingResponse] = Field(default_factory=list)
    not_responded: List[MeetingResponse] = Field(default_factory=list)


class MeetingDashboard(BaseModel):
    """All of a user's meetings grouped by role and status."""
    user_id: int
    host: HostMeetings
    guest: GuestMeetings
