# coworker/adapters/inbound/api/auth_middleware.py

"""
Authorization gate for protected routes.

Each variant is built around a token maker: it extracts the credential,
has the maker verify it and binds the resulting Payload to the request.
Protected routers use `AuthenticatedRoute`, which runs the gate stored
on `app.state.auth_gate` before the body is read or any dependency of
the endpoint is resolved.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Coroutine, Dict, Optional

from fastapi import Request, Response
from fastapi.routing import APIRoute

from coworker.application.ports.outbound import ITokenMaker
from coworker.domain.exceptions import (
    AuthenticationException,
    CredentialMalformedException,
    CredentialMissingException,
)
from coworker.domain.models.token_domain_model import Payload

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER_KEY = "Authorization"
AUTHORIZATION_TYPE_BEARER = "bearer"
AUTH_PAYLOAD_KEY = "auth_payload"
AUTH_GATE_KEY = "auth_gate"


def set_auth_payload(request: Request, payload: Payload) -> None:
    setattr(request.state, AUTH_PAYLOAD_KEY, payload)


def get_auth_payload(request: Request) -> Payload:
    """
    Return the payload bound by the auth dependency.

    Raises:
        CredentialMissingException: If the request was not authenticated
    """
    payload = getattr(request.state, AUTH_PAYLOAD_KEY, None)
    if not isinstance(payload, Payload):
        raise CredentialMissingException(detail="request is not authenticated")
    return payload


def parse_bearer_credential(value: str) -> str:
    """
    Split "<scheme> <token>" and return the token.

    Raises:
        CredentialMalformedException: If there are fewer than two fields
            or the scheme is not bearer (case-insensitive)
    """
    fields = value.split()
    if len(fields) < 2:
        raise CredentialMalformedException(detail="invalid authorization header format")

    authorization_type = fields[0]
    if authorization_type.lower() != AUTHORIZATION_TYPE_BEARER:
        raise CredentialMalformedException(
            detail=f"unsupported authorization type {authorization_type}"
        )
    return fields[1]


class AuthMiddleware(ABC):
    """
    Base class of the auth dependencies.

    Subclasses only decide where the credential comes from.
    """

    # Extra headers on every 401 this gate produces
    challenge_headers: Optional[Dict[str, str]] = None

    def __init__(self, token_maker: ITokenMaker):
        self.token_maker = token_maker

    @abstractmethod
    def extract_credential(self, request: Request) -> str:
        """Return the raw credential to verify or raise an AuthenticationException."""

    async def __call__(self, request: Request) -> Payload:
        try:
            credential = self.extract_credential(request)
            payload = await self.token_maker.verify_token(credential)
        except AuthenticationException as exc:
            logger.warning(
                f"Unauthorized request rejected: {exc.detail} | "
                f"Code: {exc.internal_code} | Path: {request.url.path}"
            )
            if self.challenge_headers:
                exc.headers = {**(exc.headers or {}), **self.challenge_headers}
            raise

        set_auth_payload(request, payload)
        return payload


class HeaderTokenAuth(AuthMiddleware):
    """Credential in `Authorization: Bearer <token>`."""

    challenge_headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, token_maker: ITokenMaker, header_name: str = AUTHORIZATION_HEADER_KEY):
        super().__init__(token_maker)
        self.header_name = header_name

    def extract_credential(self, request: Request) -> str:
        authorization_header = request.headers.get(self.header_name)
        if not authorization_header:
            raise CredentialMissingException(detail="authorization header is not provided")
        return parse_bearer_credential(authorization_header)


class CookieTokenAuth(AuthMiddleware):
    """Credential in a cookie holding "<scheme> <token>"."""

    def __init__(self, token_maker: ITokenMaker, cookie_name: str = "access_token"):
        super().__init__(token_maker)
        self.cookie_name = cookie_name

    def extract_credential(self, request: Request) -> str:
        cookie_value = request.cookies.get(self.cookie_name)
        if not cookie_value:
            raise CredentialMissingException(detail=f"{self.cookie_name} cookie is not provided")
        return parse_bearer_credential(cookie_value)


class CookieSessionAuth(AuthMiddleware):
    """
    Bare session token in a cookie.

    The maker parses the value as a UUID before any lookup.
    """

    def __init__(self, token_maker: ITokenMaker, cookie_name: str = "session_token"):
        super().__init__(token_maker)
        self.cookie_name = cookie_name

    def extract_credential(self, request: Request) -> str:
        session_token = request.cookies.get(self.cookie_name)
        if not session_token:
            raise CredentialMissingException(detail="session token not found")
        return session_token


class AuthenticatedRoute(APIRoute):
    """
    Route that refuses unauthenticated requests before doing any work.

    The gate is looked up on the application so one router module can be
    mounted by apps configured for different auth modes.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def authenticated_route_handler(request: Request) -> Response:
            auth: AuthMiddleware = getattr(request.app.state, AUTH_GATE_KEY)
            await auth(request)
            return await route_handler(request)

        return authenticated_route_handler
