# coworker/adapters/outbound/persistence/seeds/users.py

"""
Seed for the test user.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.outbound.persistence.repositories import user_repository
from coworker.application.dtos.user_dto import UserCreate

logger = logging.getLogger(__name__)

SEED_USER = {
    "first_name": "Test",
    "last_name": "User",
    "email": "testuser@email.com",
    "password": "testuserpassword",
}


async def run_users_seed(db: AsyncSession) -> None:
    if await user_repository.get_by_email(db, SEED_USER["email"]):
        logger.info(f"User '{SEED_USER['email']}' already exists.")
        return

    user = await user_repository.create_with_password(db, obj_in=UserCreate(**SEED_USER))
    logger.info(f"User '{user.email}' created.")
