"""Repository Layer - Data Access Objects"""

from app.repositories.user import UserRepository
from app.repositories.meeting import MeetingRepository
from app.repositories.participant import ParticipantRepository

__all__ = [
    "UserRepository",
    "MeetingRepository",
    "ParticipantRepository",
]
