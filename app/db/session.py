"""
Database Session Management
Async session handling for PostgreSQL, or SQLite when DATABASE_URL points at it.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def engine_options(url: str) -> Dict[str, Any]:
    """Keyword arguments for create_async_engine suited to the URL's backend."""
    options: Dict[str, Any] = {"echo": settings.debug}

    if url.startswith("sqlite"):
        # SQLite has no connection pool sizing; in-memory needs one shared connection
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=3600,
    )
    return options


# Create async engine
engine = create_async_engine(
    settings.database_url_async,
    **engine_options(settings.database_url_async),
)

# Create async session maker
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield an async session and handle cleanup.
    Commits on success, rolls back on any error.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error("Database session error", error=str(e))
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database tables."""
    from app.db.base import Base
    import app.models  # noqa: F401  registers all tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database initialized successfully", tables=sorted(Base.metadata.tables))
