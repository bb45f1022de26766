# coworker/adapters/inbound/api/v1/endpoints/session_endpoint.py

import logging
from fastapi import APIRouter, Depends, Request, Response, status

from coworker.adapters.configuration.config import Settings
from coworker.adapters.inbound.api.auth_middleware import AuthenticatedRoute
from coworker.adapters.inbound.api.deps import get_current_payload
from coworker.adapters.outbound.security.session_maker import SessionMaker
from coworker.domain.models.token_domain_model import Payload

logger = logging.getLogger(__name__)


def build_session_router(session_maker: SessionMaker, settings: Settings) -> APIRouter:
    """
    Routes that only exist with session authentication.

    Args:
        session_maker: Maker whose sessions are revoked on logout
        settings: Application settings (cookie name and flags)

    Returns:
        Router whose routes run the session auth gate first
    """
    router = APIRouter(route_class=AuthenticatedRoute)

    @router.post(
        "/logout",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Logout user",
        description="Deletes the current session and clears its cookie.",
        responses={401: {"description": "Missing, invalid or expired session"}},
    )
    async def logout_user(
            request: Request,
            payload: Payload = Depends(get_current_payload),
    ):
        await session_maker.revoke_token(request.cookies.get(settings.SESSION_COOKIE_NAME))
        logger.info(f"Session {payload.id} closed for user {payload.subject_id}")

        response = Response(status_code=status.HTTP_204_NO_CONTENT)
        response.delete_cookie(
            key=settings.SESSION_COOKIE_NAME,
            httponly=True,
            secure=settings.COOKIE_SECURE,
            samesite="none" if settings.COOKIE_SECURE else "lax",
        )
        return response

    return router
