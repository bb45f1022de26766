# coworker/adapters/outbound/persistence/seeds/__init__.py

"""
Seeds module for database initialization.

Populates the database with a known user to log in with and a few
members to browse. Run with `python -m coworker.adapters.outbound.persistence.seeds`.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.outbound.persistence.seeds.members import run_members_seed
from coworker.adapters.outbound.persistence.seeds.users import run_users_seed

# Configure logger
logger = logging.getLogger(__name__)


async def run_all_seeds(db: AsyncSession) -> None:
    """
    Run every seed script in order.

    Args:
        db: Async database session
    """
    logger.info("Starting execution of all seeds")

    await run_users_seed(db)
    await run_members_seed(db)

    logger.info("All seeds executed successfully")


async def main() -> None:
    from coworker.adapters.outbound.persistence.database import engine, get_db_context
    from coworker.adapters.outbound.persistence.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with get_db_context() as db:
        await run_all_seeds(db)

    await engine.dispose()
