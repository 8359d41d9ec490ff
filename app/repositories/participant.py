"""Participant Repository"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.participant import Participant
from app.repositories.base import BaseRepository


class ParticipantRepository(BaseRepository[Participant]):
    """Repository for Participant operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Participant, session)

    async def get_meeting_participants(self, meeting_id: int) -> List[Participant]:
        """Get all participants of a meeting, host first."""
        result = await self.session.execute(
            select(Participant)
            .where(Participant.meeting_id == meeting_id)
            .order_by(Participant.is_host.desc(), Participant.id.asc())
        )
        return list(result.scalars().all())

    async def get_host(self, meeting_id: int) -> Optional[Participant]:
        """Get the hosting participant of a meeting."""
        result = await self.session.execute(
            select(Participant)
            .where(Participant.meeting_id == meeting_id)
            .where(Participant.is_host == True)
        )
        return result.scalar_one_or_none()
