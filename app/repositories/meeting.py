"""Meeting Repository"""

from typing import List

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import MeetingNotFoundError, RecordNotFoundError
from app.core.logging import get_logger
from app.models.meeting import Meeting, MeetingBucket
from app.models.participant import Participant
from app.models.user import User
from app.repositories.base import BaseRepository

logger = get_logger(__name__)

# WHERE clauses per bucket, applied on top of the user join
BUCKET_FILTERS = {
    MeetingBucket.HOST_CONFIRMED: (
        Participant.is_host == True,
        Meeting.is_confirmed == True,
    ),
    MeetingBucket.HOST_NOT_CONFIRMED: (
        Participant.is_host == True,
        Meeting.is_confirmed == False,
        Meeting.all_participants_responded == True,
    ),
    MeetingBucket.HOST_NOT_RESPONDED: (
        Participant.is_host == True,
        Meeting.is_confirmed == False,
        Meeting.all_participants_responded == False,
    ),
    MeetingBucket.GUEST_CONFIRMED: (
        Participant.is_host == False,
        Meeting.is_confirmed == True,
    ),
    MeetingBucket.GUEST_NOT_CONFIRMED: (
        Participant.is_host == False,
        Participant.has_responded == True,
        Meeting.is_confirmed == False,
    ),
    MeetingBucket.GUEST_NOT_RESPONDED: (
        Participant.is_host == False,
        Participant.has_responded == False,
        Meeting.is_confirmed == False,
    ),
}


class MeetingRepository(BaseRepository[Meeting]):
    """
    Repository for Meeting reads.

    Every query failure is surfaced as RecordNotFoundError.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(Meeting, session)

    async def get_by_id(self, meeting_id: int) -> Meeting:
        """
        Get a meeting by ID.

        Raises:
            MeetingNotFoundError: If no meeting has this ID
            RecordNotFoundError: If the query fails
        """
        try:
            meeting = await super().get_by_id(meeting_id)
        except SQLAlchemyError as e:
            logger.error("Meeting lookup failed", meeting_id=meeting_id, error=str(e))
            raise RecordNotFoundError("Meeting") from e

        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        return meeting

    async def get_user_meetings(self, user_id: int) -> List[Meeting]:
        """Get every meeting the user takes part in, as host or guest."""
        return await self._fetch_all(self._user_meetings_query(user_id), user_id=user_id)

    async def get_meetings_in_bucket(
        self,
        user_id: int,
        bucket: MeetingBucket,
    ) -> List[Meeting]:
        """Get the user's meetings that fall into one role/status bucket."""
        query = self._user_meetings_query(user_id).where(*BUCKET_FILTERS[bucket])
        return await self._fetch_all(query, user_id=user_id, bucket=bucket.value)

    async def get_confirmed_meetings_for_host(self, user_id: int) -> List[Meeting]:
        """Confirmed meetings the user hosts."""
        return await self.get_meetings_in_bucket(user_id, MeetingBucket.HOST_CONFIRMED)

    async def get_not_confirmed_meetings_for_host(self, user_id: int) -> List[Meeting]:
        """Unconfirmed hosted meetings where every participant has responded."""
        return await self.get_meetings_in_bucket(user_id, MeetingBucket.HOST_NOT_CONFIRMED)

    async def get_not_responded_meetings_for_host(self, user_id: int) -> List[Meeting]:
        """Unconfirmed hosted meetings still waiting on responses."""
        return await self.get_meetings_in_bucket(user_id, MeetingBucket.HOST_NOT_RESPONDED)

    async def get_confirmed_meetings_for_guest(self, user_id: int) -> List[Meeting]:
        """Confirmed meetings the user is invited to."""
        return await self.get_meetings_in_bucket(user_id, MeetingBucket.GUEST_CONFIRMED)

    async def get_not_confirmed_meetings_for_guest(self, user_id: int) -> List[Meeting]:
        """Unconfirmed meetings the guest has already responded to."""
        return await self.get_meetings_in_bucket(user_id, MeetingBucket.GUEST_NOT_CONFIRMED)

    async def get_not_responded_meetings_for_guest(self, user_id: int) -> List[Meeting]:
        """Unconfirmed meetings the guest has not responded to."""
        return await self.get_meetings_in_bucket(user_id, MeetingBucket.GUEST_NOT_RESPONDED)

    def _user_meetings_query(self, user_id: int) -> Select:
        return (
            select(Meeting)
            .join(Participant, Participant.meeting_id == Meeting.id)
            .join(User, User.id == Participant.user_id)
            .where(User.id == user_id)
        )

    async def _fetch_all(self, query: Select, **log_context) -> List[Meeting]:
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error("Meeting query failed", error=str(e), **log_context)
            raise RecordNotFoundError("Meeting") from e
        return list(result.scalars().all())
