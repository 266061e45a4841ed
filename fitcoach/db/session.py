"""Async database engine and session factory."""

import logging
from collections.abc import AsyncGenerator

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fitcoach.core.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# No connection is opened until the first request
engine = create_async_engine(
    settings.async_database_url,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    pool_pre_ping=True,
    echo=settings.debug,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async DB session, committed when the request succeeds."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except HTTPException:
            # Raised on purpose by the endpoint; roll back without a traceback
            await session.rollback()
            raise
        except Exception:
            logger.exception("Rolling back database session")
            await session.rollback()
            raise
