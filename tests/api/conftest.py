"""
Fixtures for tests against the full application.

Repositories are patched per test and the database session is replaced
by a mock, so no database is needed.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.inbound.api.deps import get_session
from coworker.adapters.outbound.security.jwt_maker import JWTMaker
from coworker.main import create_app
from tests.conftest import TEST_SYMMETRIC_KEY


async def override_get_session():
    yield AsyncMock(spec=AsyncSession)


@pytest.fixture
def token_maker():
    return JWTMaker(TEST_SYMMETRIC_KEY)


@pytest.fixture
def app(token_maker):
    application = create_app(token_maker=token_maker)
    application.dependency_overrides[get_session] = override_get_session
    return application


@pytest.fixture
def client(app):
    # Not used as a context manager: the lifespan (table creation) does not run
    return TestClient(app)


@pytest.fixture
def auth_headers(token_maker, user_id):
    token, _ = asyncio.run(token_maker.create_token(user_id, timedelta(minutes=15)))
    return {"Authorization": f"Bearer {token}"}


def make_member(member_id, first_name="Taro", last_name="Yamada", email="taro@email.com"):
    return SimpleNamespace(
        id=member_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def make_user(user_id, email="testuser@email.com", hashed_password=""):
    return SimpleNamespace(
        id=user_id,
        first_name="Test",
        last_name="User",
        email=email,
        hashed_password=hashed_password,
    )
