"""Service Layer - Business Logic"""

from app.services.meeting import MeetingService
from app.services import meeting_validation

__all__ = [
    "MeetingService",
    "meeting_validation",
]
