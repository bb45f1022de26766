# coworker/adapters/outbound/persistence/database.py

"""
Async engine and session lifecycle.

The configured URL may name the synchronous psycopg2 driver (Alembic
uses it as is); the application always talks to PostgreSQL via asyncpg.
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from coworker.adapters.configuration.config import Settings, settings
from coworker.adapters.outbound.persistence.models import Base  # noqa: F401 (registers users, members, sessions)

logger = logging.getLogger(__name__)


def build_engine(app_settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine for `app_settings.DATABASE_URL`."""
    url = make_url(str(app_settings.DATABASE_URL)).set(drivername="postgresql+asyncpg")
    logger.info(f"Database: {url.host}:{url.port}/{url.database}")
    return create_async_engine(
        url,
        echo=app_settings.DEBUG,
        pool_size=20,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


engine = build_engine(settings)

# Sessions outlive their commits so repositories can return loaded rows
AsyncSessionLocal = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    One unit of work: commit when the block succeeds, roll back otherwise.

    Used by seeds and scripts; requests go through `get_db`.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding the request's session."""
    async with get_db_context() as session:
        yield session
