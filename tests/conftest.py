"""
Pytest configuration and fixtures for the Coworker test suite.

Settings are read from the environment at import time, so the
variables below must be set before anything from `coworker` is imported.
"""

import os
import uuid
from datetime import datetime, timedelta, timezone

import pytest

# Set test environment
os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("POSTGRES_DB", "coworker_test")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("TOKEN_SYMMETRIC_KEY", "test-symmetric-key-0123456789abcdef0123")
os.environ.setdefault("ENVIRONMENT", "testing")

from coworker.application.ports.clock import Clock  # noqa: E402
from coworker.adapters.outbound.security.jwt_maker import JWTMaker  # noqa: E402

TEST_SYMMETRIC_KEY = os.environ["TOKEN_SYMMETRIC_KEY"]
OTHER_SYMMETRIC_KEY = "another-symmetric-key-fedcba9876543210fedcba"


class FixedClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def jwt_maker():
    return JWTMaker(TEST_SYMMETRIC_KEY)


@pytest.fixture
def user_id():
    return uuid.uuid4()
