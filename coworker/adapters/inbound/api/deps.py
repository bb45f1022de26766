# coworker/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module wires the configured token maker and auth gate, and defines
the functions endpoints use via Depends() for database access and for
reading the authenticated identity.
"""

import logging
from datetime import timedelta

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.configuration.config import Settings
from coworker.adapters.inbound.api.auth_middleware import (
    AuthMiddleware,
    CookieSessionAuth,
    CookieTokenAuth,
    HeaderTokenAuth,
    get_auth_payload,
)
from coworker.adapters.outbound.persistence.database import get_db
from coworker.adapters.outbound.security.jwt_maker import JWTMaker
from coworker.adapters.outbound.security.session_maker import SessionMaker
from coworker.application.dtos.user_dto import UserOutput
from coworker.application.ports.outbound import ISessionStore, ITokenMaker
from coworker.application.use_cases.user_use_cases import AsyncUserService
from coworker.domain.exceptions import ConfigurationException
from coworker.domain.models.token_domain_model import Payload

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Database Session Management
########################################################################

get_session = get_db


########################################################################
# Wiring (called once while building the application)
########################################################################

def build_token_maker(settings: Settings, session_store: ISessionStore = None) -> ITokenMaker:
    """
    Create the token maker selected by AUTH_MODE.

    Raises:
        ConfigurationException: If the key is too short or the mode
            needs a session store that was not given
    """
    if settings.AUTH_MODE == "token":
        return JWTMaker(settings.TOKEN_SYMMETRIC_KEY, algorithm=settings.TOKEN_ALGORITHM)

    if session_store is None:
        raise ConfigurationException("session mode requires a session store")

    return SessionMaker(session_store)


def build_auth_middleware(settings: Settings, token_maker: ITokenMaker) -> AuthMiddleware:
    """Create the auth gate matching AUTH_MODE and TOKEN_TRANSPORT."""
    if settings.AUTH_MODE == "session":
        return CookieSessionAuth(token_maker, cookie_name=settings.SESSION_COOKIE_NAME)
    if settings.TOKEN_TRANSPORT == "cookie":
        return CookieTokenAuth(token_maker, cookie_name=settings.ACCESS_TOKEN_COOKIE_NAME)
    return HeaderTokenAuth(token_maker)


def credential_duration(settings: Settings) -> timedelta:
    if settings.AUTH_MODE == "session":
        return timedelta(minutes=settings.SESSION_DURATION_MINUTES)
    return timedelta(minutes=settings.ACCESS_TOKEN_DURATION_MINUTES)


########################################################################
# Request-time accessors
########################################################################

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_maker(request: Request) -> ITokenMaker:
    return request.app.state.token_maker


def get_current_payload(request: Request) -> Payload:
    """
    Payload of the verified credential.

    Only meaningful on routers guarded by an AuthMiddleware.
    """
    return get_auth_payload(request)


async def get_current_user(
        payload: Payload = Depends(get_current_payload),
        db: AsyncSession = Depends(get_session),
) -> UserOutput:
    """
    Get the current user from the verified credential.

    Raises:
        InvalidTokenException: If the subject no longer exists
    """
    service = AsyncUserService(db)
    return await service.get_authenticated_user(payload.subject_id)
