# coworker/adapters/outbound/persistence/repositories/member_repository.py

"""
Repository for member operations.
"""

from typing import List
from uuid import UUID
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from coworker.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from coworker.adapters.outbound.persistence.models import Member
from coworker.application.dtos.member_dto import MemberCreate, MemberUpdate
from coworker.domain.exceptions import DatabaseOperationException


class AsyncMemberCRUD(AsyncCRUDBase[Member, MemberCreate, MemberUpdate]):
    """
    Async CRUD repository for the Member entity.

    Deletes are idempotent: removing ids that do not exist is not an error.
    """

    async def remove_many(self, db: AsyncSession, *, ids: List[UUID]) -> int:
        """
        Delete every member whose id is in `ids`.

        Returns:
            Number of rows deleted
        """
        try:
            result = await db.execute(delete(Member).where(Member.id.in_(ids)))
            await db.commit()
            self.logger.info(f"Removed {result.rowcount} of {len(ids)} requested members")
            return result.rowcount
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error removing members: {e}")
            raise DatabaseOperationException(
                detail="Error removing members",
                original_error=e
            )


member_repository = AsyncMemberCRUD(Member)
