# coworker/adapters/outbound/persistence/seeds/members.py

"""
Seed for random members.
"""

import logging
import random
import string
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.outbound.persistence.repositories import member_repository
from coworker.application.dtos.member_dto import MemberCreate

logger = logging.getLogger(__name__)

MEMBER_COUNT = 10


def random_name(length: int = 6) -> str:
    return "".join(random.choice(string.ascii_lowercase) for _ in range(length)).capitalize()


def random_email() -> str:
    return f"{random_name().lower()}@email.com"


async def run_members_seed(db: AsyncSession, count: int = MEMBER_COUNT) -> None:
    for _ in range(count):
        await member_repository.create(
            db,
            obj_in=MemberCreate(first_name=random_name(), last_name=random_name(), email=random_email()),
        )
    logger.info(f"{count} members created.")
