"""
Meeting Service
Validation gate and host/guest dashboard over the meeting repository.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import MeetingValidationError
from app.core.logging import get_logger, log_context
from app.models.meeting import Meeting, MeetingBucket
from app.repositories.meeting import MeetingRepository
from app.schemas.meeting import (
    GuestMeetings,
    HostMeetings,
    MeetingDashboard,
    MeetingResponse,
)
from app.services.meeting_validation import find_meeting_problems

logger = get_logger(__name__)


class MeetingService:
    """Service for meeting validation and retrieval by role."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.meeting_repo = MeetingRepository(session)

    def validate(self, meeting: Optional[Meeting]) -> Meeting:
        """
        Check a meeting before it is persisted.

        Args:
            meeting: Meeting to check

        Returns:
            The same meeting, if it passes every check

        Raises:
            MeetingNotFoundError: If meeting is None
            MeetingHourNegativeError: If the duration is negative
            MeetingValidationError: If any other check fails
        """
        problems = find_meeting_problems(meeting)
        if problems:
            logger.info("Meeting rejected", title=meeting.title, problems=problems)
            raise MeetingValidationError(problems)
        return meeting

    async def get_dashboard(self, user_id: int) -> MeetingDashboard:
        """
        Group all of a user's meetings into host and guest buckets.

        Raises:
            RecordNotFoundError: If any bucket query fails
        """
        with log_context(user_id=user_id):
            host = HostMeetings(
                confirmed=await self._bucket(user_id, MeetingBucket.HOST_CONFIRMED),
                not_confirmed=await self._bucket(user_id, MeetingBucket.HOST_NOT_CONFIRMED),
                not_responded=await self._bucket(user_id, MeetingBucket.HOST_NOT_RESPONDED),
            )
            guest = GuestMeetings(
                confirmed=await self._bucket(user_id, MeetingBucket.GUEST_CONFIRMED),
                not_confirmed=await self._bucket(user_id, MeetingBucket.GUEST_NOT_CONFIRMED),
                not_responded=await self._bucket(user_id, MeetingBucket.GUEST_NOT_RESPONDED),
            )

            logger.debug(
                "Dashboard loaded",
                hosting=len(host.confirmed) + len(host.not_confirmed) + len(host.not_responded),
                invited=len(guest.confirmed) + len(guest.not_confirmed) + len(guest.not_responded),
            )
        return MeetingDashboard(user_id=user_id, host=host, guest=guest)

    async def _bucket(self, user_id: int, bucket: MeetingBucket) -> List[MeetingResponse]:
        meetings = await self.meeting_repo.get_meetings_in_bucket(user_id, bucket)
        return [MeetingResponse.model_validate(meeting) for meeting in meetings]
