# coworker/application/use_cases/member_use_cases.py

"""
Service for member management.

Implements the member use cases: create, read, paginated listing,
partial update and single or bulk deletion.
"""

import logging
from typing import List
from uuid import UUID
from fastapi_pagination import Params
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.outbound.persistence.repositories.member_repository import member_repository
from coworker.application.dtos.member_dto import (
    MemberCreate,
    MemberUpdate,
    MemberOutput,
    MemberListMeta,
    MemberListOutput,
)
from coworker.domain.exceptions import ResourceNotFoundException, InvalidInputException
from coworker.shared.utils.pagination import page_count

logger = logging.getLogger(__name__)


def parse_member_ids(comma_separated: str) -> List[UUID]:
    """
    Parse "id1,id2,..." into UUIDs.

    Raises:
        InvalidInputException: If any element is not a UUID
    """
    ids = []
    for raw_id in comma_separated.split(","):
        try:
            ids.append(UUID(raw_id.strip()))
        except ValueError:
            raise InvalidInputException(detail=f"Invalid member ID '{raw_id}'")
    return ids


class AsyncMemberService:
    """
    Service for member management.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active SQLAlchemy session
        """
        self.db = db_session

    async def create_member(self, member_input: MemberCreate) -> MemberOutput:
        member = await member_repository.create(self.db, obj_in=member_input)
        return MemberOutput.model_validate(member)

    async def get_member(self, member_id: UUID) -> MemberOutput:
        """
        Raises:
            ResourceNotFoundException: If the member does not exist
        """
        member = await member_repository.get(self.db, member_id)
        if not member:
            raise ResourceNotFoundException(detail="Member not found", resource_id=member_id)
        return MemberOutput.model_validate(member)

    async def list_members(self, params: Params) -> MemberListOutput:
        """
        Return one page of members with paging metadata.

        Args:
            params: page (1-based) and size

        Returns:
            The page plus page_id, page_size, page_count and total_count
        """
        raw = params.to_raw_params()
        members = await member_repository.get_multi(self.db, skip=raw.offset, limit=raw.limit)
        total_count = await member_repository.count(self.db)

        return MemberListOutput(
            meta=MemberListMeta(
                page_id=params.page,
                page_size=params.size,
                page_count=page_count(total_count, params.size),
                total_count=total_count,
            ),
            data=[MemberOutput.model_validate(m) for m in members],
        )

    async def update_member(self, member_id: UUID, member_input: MemberUpdate) -> MemberOutput:
        """
        Apply the non-empty fields of member_input.

        Raises:
            ResourceNotFoundException: If the member does not exist
        """
        member = await member_repository.get(self.db, member_id)
        if not member:
            raise ResourceNotFoundException(detail="Member not found", resource_id=member_id)

        updated = await member_repository.update(self.db, db_obj=member, obj_in=member_input.changes())
        return MemberOutput.model_validate(updated)

    async def delete_member(self, member_id: UUID) -> None:
        await member_repository.remove_many(self.db, ids=[member_id])

    async def delete_members(self, comma_separated_ids: str) -> None:
        """
        Delete several members given as a comma separated list of UUIDs.

        Raises:
            InvalidInputException: If the list contains an invalid UUID
        """
        ids = parse_member_ids(comma_separated_ids)
        await member_repository.remove_many(self.db, ids=ids)
