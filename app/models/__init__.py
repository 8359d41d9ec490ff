"""SQLAlchemy Models"""

from app.models.user import User
from app.models.meeting import Meeting, MeetingBucket
from app.models.participant import Participant

__all__ = [
    "User",
    "Meeting",
    "MeetingBucket",
    "Participant",
]
