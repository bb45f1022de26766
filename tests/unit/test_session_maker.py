import uuid
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from coworker.adapters.outbound.security.session_maker import SessionMaker
from coworker.application.ports.outbound import ISessionStore
from coworker.domain.exceptions import (
    CredentialMalformedException,
    DatabaseOperationException,
    ExpiredTokenException,
    InvalidTokenException,
    TokenIssueException,
)
from coworker.domain.models.session_domain_model import Session


def make_session(user_id, expired_at, created_at=None):
    return Session(
        id=uuid.uuid4(),
        user_id=user_id,
        session_token=uuid.uuid4(),
        expired_at=expired_at,
        created_at=created_at,
    )


@pytest.fixture
def store():
    return AsyncMock(spec=ISessionStore)


@pytest.fixture
def session_maker(store, fixed_clock):
    return SessionMaker(store, clock=fixed_clock)


class TestSessionMakerVerify:
    @pytest.mark.asyncio
    async def test_live_session_verifies(self, session_maker, store, fixed_clock, user_id):
        session = make_session(user_id, fixed_clock.now() + timedelta(hours=1), fixed_clock.now())
        store.get_session.return_value = session

        payload = await session_maker.verify_token(str(session.session_token))

        assert payload.subject_id == user_id
        assert payload.id == session.id
        assert payload.expires_at == session.expired_at
        store.get_session.assert_awaited_once_with(session.session_token)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["invalid", "", "1234", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
    async def test_malformed_token_skips_lookup(self, session_maker, store, token):
        with pytest.raises(CredentialMalformedException) as exc_info:
            await session_maker.verify_token(token)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "invalid session token format"
        store.get_session.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_session_is_invalid(self, session_maker, store):
        store.get_session.return_value = None
        token = uuid.uuid4()

        with pytest.raises(InvalidTokenException) as exc_info:
            await session_maker.verify_token(str(token))

        assert exc_info.value.detail == "session not found"
        store.get_session.assert_awaited_once_with(token)

    @pytest.mark.asyncio
    async def test_expired_session(self, session_maker, store, fixed_clock, user_id):
        store.get_session.return_value = make_session(user_id, fixed_clock.now() - timedelta(seconds=1))

        with pytest.raises(ExpiredTokenException):
            await session_maker.verify_token(str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_session_valid_at_exact_expiry(self, session_maker, store, fixed_clock, user_id):
        store.get_session.return_value = make_session(user_id, fixed_clock.now())

        payload = await session_maker.verify_token(str(uuid.uuid4()))

        assert payload.subject_id == user_id

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, session_maker, store):
        store.get_session.side_effect = DatabaseOperationException(detail="Error fetching session")

        with pytest.raises(DatabaseOperationException) as exc_info:
            await session_maker.verify_token(str(uuid.uuid4()))

        assert exc_info.value.status_code == 500


class TestSessionMakerCreateAndRevoke:
    @pytest.mark.asyncio
    async def test_create_token_stores_session(self, session_maker, store, fixed_clock, user_id):
        async def create_session(user_id, session_token, expired_at):
            return Session(
                id=uuid.uuid4(),
                user_id=user_id,
                session_token=session_token,
                expired_at=expired_at,
                created_at=fixed_clock.now(),
            )

        store.create_session.side_effect = create_session

        token, payload = await session_maker.create_token(user_id, timedelta(hours=24))

        kwargs = store.create_session.await_args.kwargs
        assert token == str(kwargs["session_token"])
        assert kwargs["user_id"] == user_id
        assert kwargs["expired_at"] == fixed_clock.now() + timedelta(hours=24)
        assert payload.subject_id == user_id
        assert payload.issued_at == fixed_clock.now()
        assert payload.expires_at == fixed_clock.now() + timedelta(hours=24)

    @pytest.mark.asyncio
    async def test_revoke_deletes_session(self, session_maker, store):
        token = uuid.uuid4()

        await session_maker.revoke_token(str(token))

        store.delete_session.assert_awaited_once_with(token)

    @pytest.mark.asyncio
    async def test_revoke_malformed_token(self, session_maker, store):
        with pytest.raises(CredentialMalformedException):
            await session_maker.revoke_token("invalid")

        store.delete_session.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duration_out_of_range(self, session_maker, store, user_id):
        with pytest.raises(TokenIssueException):
            await session_maker.create_token(user_id, timedelta.max)

        store.create_session.assert_not_awaited()
