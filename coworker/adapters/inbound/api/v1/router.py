# coworker/adapters/inbound/api/v1/router.py

from fastapi import APIRouter

from coworker.adapters.configuration.config import Settings
from coworker.adapters.inbound.api.v1.endpoints import member_endpoint, user_endpoint
from coworker.adapters.inbound.api.v1.endpoints.session_endpoint import build_session_router
from coworker.adapters.outbound.security.session_maker import SessionMaker
from coworker.application.ports.outbound import ITokenMaker


def build_api_router(settings: Settings, token_maker: ITokenMaker) -> APIRouter:
    """
    Assemble the v1 routes.

    Protected routers are declared with AuthenticatedRoute and rely on
    the gate the application stores on `app.state.auth_gate`.
    """
    api_router = APIRouter()

    # Public routes
    api_router.include_router(user_endpoint.router, prefix="/users", tags=["User"])

    # Protected routes
    api_router.include_router(user_endpoint.protected_router, prefix="/users", tags=["User"])
    api_router.include_router(member_endpoint.router, prefix="/members", tags=["Member"])

    if settings.AUTH_MODE == "session" and isinstance(token_maker, SessionMaker):
        api_router.include_router(
            build_session_router(token_maker, settings),
            prefix="/users",
            tags=["User"],
        )

    return api_router
