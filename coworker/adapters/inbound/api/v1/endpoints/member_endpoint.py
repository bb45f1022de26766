# coworker/adapters/inbound/api/v1/endpoints/member_endpoint.py

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query, Response, status
from fastapi_pagination import Params
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.inbound.api.auth_middleware import AuthenticatedRoute
from coworker.adapters.inbound.api.deps import get_current_payload, get_session
from coworker.application.dtos.member_dto import (
    MemberCreate,
    MemberListOutput,
    MemberOutput,
    MemberUpdate,
)
from coworker.application.use_cases.member_use_cases import AsyncMemberService
from coworker.domain.models.token_domain_model import Payload
from coworker.shared.utils.pagination import pagination_params

logger = logging.getLogger(__name__)

router = APIRouter(route_class=AuthenticatedRoute)


@router.post(
    "",
    response_model=MemberOutput,
    status_code=status.HTTP_200_OK,
    summary="Create member",
    responses={400: {"description": "Invalid body"}},
)
async def create_member(
        member_input: MemberCreate,
        db: AsyncSession = Depends(get_session),
        payload: Payload = Depends(get_current_payload),
):
    service = AsyncMemberService(db)
    member = await service.create_member(member_input)
    logger.info(f"Member {member.id} created by user {payload.subject_id}")
    return member


@router.get(
    "/{member_id}",
    response_model=MemberOutput,
    summary="Get member",
    responses={404: {"description": "Member not found"}},
)
async def get_member(
        member_id: UUID = Path(..., description="Member ID"),
        db: AsyncSession = Depends(get_session),
):
    service = AsyncMemberService(db)
    return await service.get_member(member_id)


@router.get(
    "",
    response_model=MemberListOutput,
    summary="List members",
    description="Paginated listing. `page_id` starts at 1; `page_size` is between 5 and 10.",
)
async def list_members(
        params: Params = Depends(pagination_params),
        db: AsyncSession = Depends(get_session),
):
    service = AsyncMemberService(db)
    return await service.list_members(params)


@router.put(
    "/{member_id}",
    response_model=MemberOutput,
    summary="Update member",
    description="Only non-empty fields are changed.",
    responses={404: {"description": "Member not found"}},
)
async def update_member(
        member_input: MemberUpdate,
        member_id: UUID = Path(..., description="Member ID"),
        db: AsyncSession = Depends(get_session),
        payload: Payload = Depends(get_current_payload),
):
    service = AsyncMemberService(db)
    member = await service.update_member(member_id, member_input)
    logger.info(f"Member {member_id} updated by user {payload.subject_id}")
    return member


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete member",
)
async def delete_member(
        member_id: UUID = Path(..., description="Member ID"),
        db: AsyncSession = Depends(get_session),
        payload: Payload = Depends(get_current_payload),
):
    service = AsyncMemberService(db)
    await service.delete_member(member_id)
    logger.info(f"Member {member_id} deleted by user {payload.subject_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete members",
    responses={400: {"description": "Missing or invalid ids"}},
)
async def delete_members(
        ids: str = Query(..., min_length=1, description="Comma separated member IDs"),
        db: AsyncSession = Depends(get_session),
        payload: Payload = Depends(get_current_payload),
):
    service = AsyncMemberService(db)
    await service.delete_members(ids)
    logger.info(f"Members deleted by user {payload.subject_id}: {ids}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
