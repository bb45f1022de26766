from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from coworker.adapters.configuration.config import settings
from coworker.adapters.inbound.api.auth_middleware import CookieSessionAuth, CookieTokenAuth, HeaderTokenAuth
from coworker.adapters.inbound.api.deps import build_auth_middleware, build_token_maker, credential_duration
from coworker.adapters.outbound.security.jwt_maker import JWTMaker
from coworker.adapters.outbound.security.session_maker import SessionMaker
from coworker.application.ports.outbound import ISessionStore
from coworker.domain.exceptions import ConfigurationException
from coworker.main import create_app


def settings_with(**changes):
    return settings.model_copy(update=changes)


class TestBuildTokenMaker:
    def test_token_mode(self):
        maker = build_token_maker(settings_with(AUTH_MODE="token"))

        assert isinstance(maker, JWTMaker)

    def test_token_mode_with_short_key(self):
        with pytest.raises(ConfigurationException):
            build_token_maker(settings_with(AUTH_MODE="token", TOKEN_SYMMETRIC_KEY="too-short"))

    def test_session_mode(self):
        maker = build_token_maker(settings_with(AUTH_MODE="session"), AsyncMock(spec=ISessionStore))

        assert isinstance(maker, SessionMaker)

    def test_session_mode_needs_store(self):
        with pytest.raises(ConfigurationException):
            build_token_maker(settings_with(AUTH_MODE="session"))


class TestBuildAuthMiddleware:
    def test_header_transport(self):
        auth = build_auth_middleware(settings_with(AUTH_MODE="token", TOKEN_TRANSPORT="header"), AsyncMock())

        assert isinstance(auth, HeaderTokenAuth)

    def test_cookie_transport(self):
        auth = build_auth_middleware(
            settings_with(AUTH_MODE="token", TOKEN_TRANSPORT="cookie", ACCESS_TOKEN_COOKIE_NAME="jwt"),
            AsyncMock(),
        )

        assert isinstance(auth, CookieTokenAuth)
        assert auth.cookie_name == "jwt"

    def test_session_mode(self):
        auth = build_auth_middleware(settings_with(AUTH_MODE="session"), AsyncMock())

        assert isinstance(auth, CookieSessionAuth)
        assert auth.cookie_name == settings.SESSION_COOKIE_NAME


class TestCredentialDuration:
    def test_token_duration(self):
        duration = credential_duration(settings_with(AUTH_MODE="token", ACCESS_TOKEN_DURATION_MINUTES=15))

        assert duration == timedelta(minutes=15)

    def test_session_duration(self):
        duration = credential_duration(settings_with(AUTH_MODE="session", SESSION_DURATION_MINUTES=60))

        assert duration == timedelta(hours=1)


class TestCreateApp:
    def test_short_key_fails_at_startup(self):
        with pytest.raises(ConfigurationException):
            create_app(app_settings=settings_with(AUTH_MODE="token", TOKEN_SYMMETRIC_KEY="x" * 31))
