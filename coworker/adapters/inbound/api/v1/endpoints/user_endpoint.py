# coworker/adapters/inbound/api/v1/endpoints/user_endpoint.py

import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.configuration.config import Settings
from coworker.adapters.inbound.api.auth_middleware import AuthenticatedRoute
from coworker.adapters.inbound.api.deps import (
    credential_duration,
    get_app_settings,
    get_current_user,
    get_session,
    get_token_maker,
)
from coworker.application.dtos.user_dto import LoginInput, LoginOutput, UserCreate, UserOutput
from coworker.application.ports.outbound import ITokenMaker
from coworker.application.use_cases.auth_use_cases import AsyncAuthService
from coworker.application.use_cases.user_use_cases import AsyncUserService

logger = logging.getLogger(__name__)

# Routes reachable without a credential
router = APIRouter()

# Routes behind the auth gate
protected_router = APIRouter(route_class=AuthenticatedRoute)


@router.post(
    "",
    response_model=UserOutput,
    status_code=status.HTTP_200_OK,
    summary="Create user",
    description="""
    Registers a new user.

    - First and last name: letters only (no spaces, digits, punctuation or symbols)
    - Email: valid and unique
    - Password: at least 14 characters
    """,
    responses={
        400: {"description": "Invalid body"},
        403: {"description": "Email already in use"},
    },
)
async def create_user(
        user_input: UserCreate,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncUserService(db)
    return await service.create_user(user_input)


@router.post(
    "/login",
    response_model=LoginOutput,
    summary="Login user",
    description=(
            "Checks email and password and issues a credential. "
            "With session authentication the credential is only set as a cookie."
    ),
    responses={
        401: {"description": "Incorrect password"},
        404: {"description": "Unknown email"},
    },
)
async def login_user(
        login_input: LoginInput,
        response: Response,
        db: AsyncSession = Depends(get_session),
        settings: Settings = Depends(get_app_settings),
        token_maker: ITokenMaker = Depends(get_token_maker),
):
    service = AsyncAuthService(db, token_maker, credential_duration(settings))
    token, output = await service.login_user(login_input)

    if settings.AUTH_MODE == "session":
        _set_credential_cookie(response, settings, settings.SESSION_COOKIE_NAME, token)
        output.access_token = None
    elif settings.TOKEN_TRANSPORT == "cookie":
        _set_credential_cookie(response, settings, settings.ACCESS_TOKEN_COOKIE_NAME, f"Bearer {token}")

    return output


@protected_router.get(
    "/me",
    response_model=UserOutput,
    summary="Current user",
    description="Returns the user the presented credential belongs to.",
    responses={401: {"description": "Missing, invalid or expired credential"}},
)
async def read_current_user(current_user: UserOutput = Depends(get_current_user)):
    return current_user


def _set_credential_cookie(response: Response, settings: Settings, name: str, value: str) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=int(credential_duration(settings).total_seconds()),
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="none" if settings.COOKIE_SECURE else "lax",
    )
