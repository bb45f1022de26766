# coworker/adapters/outbound/security/jwt_maker.py

"""
Signed access tokens.

Tokens are JWTs signed with a symmetric key. Besides the registered
claims (jti, sub, iat, exp) each token carries `issued_at` and
`expires_at` with microsecond precision; expiry is checked against the latter.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from jose import jwt, JWTError

from coworker.application.ports.clock import Clock, UTCClock
from coworker.application.ports.outbound import ITokenMaker
from coworker.domain.exceptions import (
    ConfigurationException,
    InvalidTokenException,
    TokenIssueException,
)
from coworker.domain.models.token_domain_model import Payload

logger = logging.getLogger(__name__)

MIN_SECRET_KEY_SIZE = 32


class JWTMaker(ITokenMaker):
    """
    Token maker for self-contained signed tokens.

    No server-side state: the signature protects subject and expiry.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", clock: Optional[Clock] = None):
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_SIZE:
            raise ConfigurationException(
                f"invalid key size: must be at least {MIN_SECRET_KEY_SIZE} bytes"
            )
        if not algorithm.startswith("HS"):
            raise ConfigurationException(f"unsupported signing algorithm: {algorithm}")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._clock = clock or UTCClock()

    async def create_token(self, subject_id: UUID, duration: timedelta) -> Tuple[str, Payload]:
        """
        Create a signed token for the subject.

        - subject_id: the user's UUID.
        - duration: validity window starting now (may be negative).
        """
        try:
            payload = Payload.new(subject_id, duration, self._clock.now())
        except OverflowError as e:
            logger.error(f"Token duration out of range: {duration}")
            raise TokenIssueException(detail="Token duration out of range", original_error=e)

        claims = {
            "jti": str(payload.id),
            "sub": str(payload.subject_id),
            "iat": int(payload.issued_at.timestamp()),
            "exp": int(payload.expires_at.timestamp()),
            "issued_at": payload.issued_at.isoformat(),
            "expires_at": payload.expires_at.isoformat(),
        }
        try:
            token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        except JWTError as e:
            logger.error(f"Unable to sign token: {type(e).__name__}")
            raise TokenIssueException(original_error=e)
        return token, payload

    async def verify_token(self, token: str) -> Payload:
        """
        Verify signature and expiry of a token.

        Signature failures and malformed tokens raise InvalidTokenException;
        authentic tokens past their expiry raise ExpiredTokenException.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError:
            raise InvalidTokenException()

        payload = self._payload_from_claims(claims)
        payload.valid(self._clock.now())
        return payload

    @staticmethod
    def _payload_from_claims(claims: dict) -> Payload:
        try:
            expires_at = datetime.fromisoformat(claims["expires_at"])
            issued_at = datetime.fromisoformat(claims["issued_at"])
            return Payload(
                id=UUID(claims["jti"]),
                subject_id=UUID(claims["sub"]),
                issued_at=issued_at,
                expires_at=expires_at,
            )
        except (KeyError, TypeError, ValueError, OverflowError):
            raise InvalidTokenException()
