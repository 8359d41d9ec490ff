"""
Tests for Meeting Repository
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError

from app.core.exceptions import MeetingNotFoundError, NotFoundError, RecordNotFoundError
from app.models import MeetingBucket
from app.repositories.meeting import MeetingRepository
from app.repositories.participant import ParticipantRepository
from app.repositories.user import UserRepository


def titles(meetings) -> set:
    return {meeting.title for meeting in meetings}


@pytest_asyncio.fixture
async def schedule(add_meeting, host, guest, other_guest):
    """
    Four meetings covering every bucket.

    host hosts three of them; guest hosts "retro" and invites host.
    """
    return {
        "kickoff": await add_meeting(
            host, [(guest, True), (other_guest, True)],
            title="kickoff", is_confirmed=True, all_participants_responded=True,
        ),
        "planning": await add_meeting(
            host, [(guest, True), (other_guest, True)],
            title="planning", all_participants_responded=True,
        ),
        "review": await add_meeting(
            host, [(guest, True), (other_guest, False)],
            title="review",
        ),
        "retro": await add_meeting(
            guest, [(host, False)],
            title="retro",
        ),
    }


class TestMeetingRepository:
    """Test suite for meeting retrieval."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, db_session, schedule):
        repo = MeetingRepository(db_session)

        meeting = await repo.get_by_id(schedule["planning"].id)

        assert meeting.title == "planning"
        assert meeting.all_participants_responded is True
        assert meeting.is_confirmed is False

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, db_session):
        repo = MeetingRepository(db_session)

        with pytest.raises(MeetingNotFoundError) as exc_info:
            await repo.get_by_id(999)

        assert exc_info.value.details == {"resource": "Meeting", "id": "999"}

    @pytest.mark.asyncio
    async def test_get_user_meetings(self, db_session, schedule, host, guest, other_guest):
        repo = MeetingRepository(db_session)

        assert titles(await repo.get_user_meetings(host.id)) == {
            "kickoff", "planning", "review", "retro",
        }
        assert titles(await repo.get_user_meetings(other_guest.id)) == {
            "kickoff", "planning", "review",
        }
        assert len(await repo.get_user_meetings(guest.id)) == 4

    @pytest.mark.asyncio
    async def test_get_user_meetings_unknown_user(self, db_session, schedule):
        repo = MeetingRepository(db_session)
        assert await repo.get_user_meetings(12345) == []

    @pytest.mark.asyncio
    async def test_host_buckets(self, db_session, schedule, host):
        repo = MeetingRepository(db_session)

        assert titles(await repo.get_confirmed_meetings_for_host(host.id)) == {"kickoff"}
        assert titles(await repo.get_not_confirmed_meetings_for_host(host.id)) == {"planning"}
        assert titles(await repo.get_not_responded_meetings_for_host(host.id)) == {"review"}

    @pytest.mark.asyncio
    async def test_host_as_guest(self, db_session, schedule, host):
        repo = MeetingRepository(db_session)

        assert await repo.get_confirmed_meetings_for_guest(host.id) == []
        assert await repo.get_not_confirmed_meetings_for_guest(host.id) == []
        assert titles(await repo.get_not_responded_meetings_for_guest(host.id)) == {"retro"}

    @pytest.mark.asyncio
    async def test_guest_buckets(self, db_session, schedule, guest, other_guest):
        repo = MeetingRepository(db_session)

        assert titles(await repo.get_confirmed_meetings_for_guest(guest.id)) == {"kickoff"}
        assert titles(await repo.get_not_confirmed_meetings_for_guest(guest.id)) == {
            "planning", "review",
        }
        assert await repo.get_not_responded_meetings_for_guest(guest.id) == []
        assert titles(await repo.get_not_responded_meetings_for_host(guest.id)) == {"retro"}

        assert titles(await repo.get_not_confirmed_meetings_for_guest(other_guest.id)) == {
            "planning",
        }
        assert titles(await repo.get_not_responded_meetings_for_guest(other_guest.id)) == {
            "review",
        }

    @pytest.mark.asyncio
    async def test_buckets_partition_user_meetings(
        self, db_session, schedule, host, guest, other_guest,
    ):
        repo = MeetingRepository(db_session)

        for user in (host, guest, other_guest):
            seen = []
            for bucket in MeetingBucket:
                seen.extend(m.id for m in await repo.get_meetings_in_bucket(user.id, bucket))

            all_ids = sorted(m.id for m in await repo.get_user_meetings(user.id))
            assert sorted(seen) == all_ids

    @pytest.mark.asyncio
    async def test_confirmed_never_in_not_responded(self, db_session, add_meeting, host, guest):
        repo = MeetingRepository(db_session)
        await add_meeting(
            host, [(guest, False)],
            title="locked", is_confirmed=True,
        )

        assert await repo.get_not_responded_meetings_for_guest(guest.id) == []
        assert await repo.get_not_responded_meetings_for_host(host.id) == []
        assert titles(await repo.get_confirmed_meetings_for_guest(guest.id)) == {"locked"}

    @pytest.mark.asyncio
    async def test_guest_not_responded_ignores_all_responded_flag(
        self, db_session, add_meeting, host, guest,
    ):
        repo = MeetingRepository(db_session)
        await add_meeting(
            host, [(guest, False)],
            title="stale flag", all_participants_responded=True,
        )

        assert titles(await repo.get_not_responded_meetings_for_guest(guest.id)) == {"stale flag"}
        assert await repo.get_not_confirmed_meetings_for_guest(guest.id) == []

    @pytest.mark.asyncio
    async def test_to_dict_has_every_column(self, db_session, add_meeting, host):
        meeting = await add_meeting(
            host,
            title="offsite", description="Quarterly planning",
            is_onsite=True, place="HQ", hour=3,
            all_participants_responded=True,
        )

        data = meeting.to_dict()

        assert set(data) == {
            "id", "title", "description", "is_onsite", "is_online", "place", "url",
            "all_participants_responded", "is_confirmed",
            "start_time", "end_time", "actual_start_time", "actual_end_time",
            "hour", "created_at", "updated_at",
        }
        assert data["id"] == meeting.id
        assert data["title"] == "offsite"
        assert data["is_onsite"] is True
        assert data["is_online"] is False
        assert data["place"] == "HQ"
        assert data["url"] == ""
        assert data["all_participants_responded"] is True
        assert data["is_confirmed"] is False
        assert data["hour"] == 3
        assert data["start_time"] is None
        assert data["created_at"] is not None


class TestMeetingRepositoryFailures:
    """Query failures collapse into RecordNotFoundError."""

    @pytest.fixture
    def failing_session(self):
        session = AsyncMock()
        session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("connection refused")
        )
        return session

    @pytest.mark.asyncio
    async def test_get_by_id_failure(self, failing_session):
        repo = MeetingRepository(failing_session)

        with pytest.raises(RecordNotFoundError) as exc_info:
            await repo.get_by_id(1)

        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bucket", list(MeetingBucket))
    async def test_bucket_failure(self, failing_session, bucket):
        repo = MeetingRepository(failing_session)

        with pytest.raises(NotFoundError):
            await repo.get_meetings_in_bucket(1, bucket)

    @pytest.mark.asyncio
    async def test_user_meetings_failure(self, failing_session):
        repo = MeetingRepository(failing_session)

        with pytest.raises(RecordNotFoundError):
            await repo.get_user_meetings(1)


class TestParticipantRepository:
    """Participant lookups used alongside meeting retrieval."""

    @pytest.mark.asyncio
    async def test_host_listed_first(self, db_session, schedule, host, guest, other_guest):
        repo = ParticipantRepository(db_session)

        participants = await repo.get_meeting_participants(schedule["review"].id)

        assert [p.user_id for p in participants] == [host.id, guest.id, other_guest.id]
        assert participants[0].is_host is True

    @pytest.mark.asyncio
    async def test_get_host(self, db_session, schedule, guest):
        repo = ParticipantRepository(db_session)

        participant = await repo.get_host(schedule["retro"].id)

        assert participant.user_id == guest.id

    @pytest.mark.asyncio
    async def test_count_and_get_all(self, db_session, schedule, other_guest):
        repo = ParticipantRepository(db_session)

        assert await repo.count() == 11
        assert await repo.count(user_id=other_guest.id) == 3
        responded = await repo.get_all(user_id=other_guest.id, has_responded=True)
        assert {p.meeting_id for p in responded} == {
            schedule["kickoff"].id, schedule["planning"].id,
        }


class TestUserRepository:
    """User lookups."""

    @pytest.mark.asyncio
    async def test_get_by_email(self, db_session, host):
        repo = UserRepository(db_session)

        found = await repo.get_by_email("hana@example.com")

        assert found.id == host.id
        assert await repo.get_by_email("nobody@example.com") is None
