import uuid
from datetime import timedelta

import pytest
from jose import jwt

from coworker.adapters.outbound.security.jwt_maker import JWTMaker, MIN_SECRET_KEY_SIZE
from coworker.domain.exceptions import (
    ConfigurationException,
    TokenIssueException,
    ExpiredTokenException,
    InvalidTokenException,
)
from tests.conftest import OTHER_SYMMETRIC_KEY, TEST_SYMMETRIC_KEY


class TestJWTMakerConstruction:
    @pytest.mark.parametrize("key", [
        "",
        "short",
        "x" * (MIN_SECRET_KEY_SIZE - 1),
        "0123456789abcdef0123456789abcde",
    ])
    def test_short_key_is_rejected(self, key):
        with pytest.raises(ConfigurationException) as exc_info:
            JWTMaker(key)
        assert "invalid key size" in str(exc_info.value)

    def test_minimum_key_is_accepted(self):
        JWTMaker("k" * MIN_SECRET_KEY_SIZE)

    def test_key_size_counts_bytes(self):
        # 11 three-byte characters
        JWTMaker("鍵" * 11)

    def test_asymmetric_algorithm_is_rejected(self):
        with pytest.raises(ConfigurationException):
            JWTMaker(TEST_SYMMETRIC_KEY, algorithm="RS256")


class TestJWTMakerTokens:
    @pytest.mark.asyncio
    async def test_fresh_token_verifies(self, jwt_maker, user_id):
        token, created = await jwt_maker.create_token(user_id, timedelta(minutes=1))

        assert token
        verified = await jwt_maker.verify_token(token)

        assert verified.subject_id == user_id
        assert verified.id == created.id
        assert verified.expires_at == created.expires_at
        assert verified.issued_at == created.issued_at

    @pytest.mark.asyncio
    async def test_issued_and_expiry_follow_duration(self, fixed_clock, user_id):
        maker = JWTMaker(TEST_SYMMETRIC_KEY, clock=fixed_clock)

        _, payload = await maker.create_token(user_id, timedelta(minutes=15))

        assert payload.issued_at == fixed_clock.now()
        assert payload.expires_at == fixed_clock.now() + timedelta(minutes=15)

    @pytest.mark.asyncio
    async def test_negative_duration_is_expired(self, jwt_maker, user_id):
        token, _ = await jwt_maker.create_token(user_id, timedelta(minutes=-1))

        with pytest.raises(ExpiredTokenException):
            await jwt_maker.verify_token(token)

    @pytest.mark.asyncio
    async def test_expiry_boundary(self, fixed_clock, user_id):
        maker = JWTMaker(TEST_SYMMETRIC_KEY, clock=fixed_clock)
        token, payload = await maker.create_token(user_id, timedelta(minutes=1))

        fixed_clock.advance(timedelta(minutes=1))
        assert fixed_clock.now() == payload.expires_at
        verified = await maker.verify_token(token)
        assert verified.subject_id == user_id

        fixed_clock.advance(timedelta(microseconds=1))
        with pytest.raises(ExpiredTokenException):
            await maker.verify_token(token)

    @pytest.mark.asyncio
    async def test_token_from_another_key_is_invalid(self, user_id):
        token, _ = await JWTMaker(TEST_SYMMETRIC_KEY).create_token(user_id, timedelta(minutes=1))

        with pytest.raises(InvalidTokenException):
            await JWTMaker(OTHER_SYMMETRIC_KEY).verify_token(token)

    @pytest.mark.asyncio
    async def test_expired_token_from_another_key_is_invalid(self, user_id):
        token, _ = await JWTMaker(TEST_SYMMETRIC_KEY).create_token(user_id, timedelta(minutes=-1))

        with pytest.raises(InvalidTokenException):
            await JWTMaker(OTHER_SYMMETRIC_KEY).verify_token(token)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "abc", "a.b.c", "not-a-token-at-all"])
    async def test_malformed_token_is_invalid(self, jwt_maker, token):
        with pytest.raises(InvalidTokenException):
            await jwt_maker.verify_token(token)

    @pytest.mark.asyncio
    async def test_tampered_token_is_invalid(self, jwt_maker, user_id):
        token, _ = await jwt_maker.create_token(user_id, timedelta(minutes=1))
        header, body, signature = token.split(".")
        tampered_signature = ("A" if signature[0] != "A" else "B") + signature[1:]

        with pytest.raises(InvalidTokenException):
            await jwt_maker.verify_token(f"{header}.{body}.{tampered_signature}")

    @pytest.mark.asyncio
    async def test_signed_token_without_expiry_claim_is_invalid(self, jwt_maker, user_id):
        token = jwt.encode({"sub": str(user_id)}, TEST_SYMMETRIC_KEY, algorithm="HS256")

        with pytest.raises(InvalidTokenException):
            await jwt_maker.verify_token(token)

    @pytest.mark.asyncio
    async def test_each_token_has_its_own_id(self, jwt_maker, user_id):
        _, first = await jwt_maker.create_token(user_id, timedelta(minutes=1))
        _, second = await jwt_maker.create_token(user_id, timedelta(minutes=1))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_issued_at_keeps_microseconds(self, fixed_clock, user_id):
        fixed_clock.advance(timedelta(microseconds=123456))
        maker = JWTMaker(TEST_SYMMETRIC_KEY, clock=fixed_clock)
        token, _ = await maker.create_token(user_id, timedelta(minutes=1))

        verified = await maker.verify_token(token)

        assert verified.issued_at == fixed_clock.now()
        assert verified.issued_at.microsecond == 123456

    @pytest.mark.asyncio
    async def test_duration_out_of_range(self, jwt_maker, user_id):
        with pytest.raises(TokenIssueException) as exc_info:
            await jwt_maker.create_token(user_id, timedelta.max)

        assert exc_info.value.status_code == 500
        assert exc_info.value.internal_code == "TOKEN_ISSUE_ERROR"
