"""
Pytest Configuration and Fixtures
"""

from typing import AsyncGenerator, Awaitable, Callable, Iterable, Optional, Tuple

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base
from app.db.session import engine_options
from app.models import Meeting, User
from app.repositories.meeting import MeetingRepository
from app.repositories.participant import ParticipantRepository
from app.repositories.user import UserRepository


# Each test gets its own in-memory database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    test_engine = create_async_engine(TEST_DATABASE_URL, **engine_options(TEST_DATABASE_URL))
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()

    await test_engine.dispose()


async def _create_user(session: AsyncSession, name: str) -> User:
    return await UserRepository(session).create({
        "user_name": name,
        "email": f"{name}@example.com",
    })


@pytest_asyncio.fixture
async def host(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "hana")


@pytest_asyncio.fixture
async def guest(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "gen")


@pytest_asyncio.fixture
async def other_guest(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "oscar")


AddMeeting = Callable[..., Awaitable[Meeting]]


@pytest.fixture
def add_meeting(db_session: AsyncSession) -> AddMeeting:
    """
    Factory that stores a meeting with its host and guests.

    Guests are given as (user, has_responded) pairs.
    """
    async def _add(
        host: User,
        guests: Optional[Iterable[Tuple[User, bool]]] = None,
        **fields,
    ) -> Meeting:
        fields.setdefault("title", "Planning")
        fields.setdefault("hour", 1)
        meeting = await MeetingRepository(db_session).create(fields)

        participant_repo = ParticipantRepository(db_session)
        await participant_repo.create({
            "user_id": host.id,
            "meeting_id": meeting.id,
            "is_host": True,
            "has_responded": True,
        })
        for user, has_responded in guests or []:
            await participant_repo.create({
                "user_id": user.id,
                "meeting_id": meeting.id,
                "is_host": False,
                "has_responded": has_responded,
            })
        return meeting

    return _add
