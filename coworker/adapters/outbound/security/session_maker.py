# coworker/adapters/outbound/security/session_maker.py

"""
Opaque session credentials.

The client only holds a random UUID; subject and expiry live in the
session store and are looked up on every request.
"""

import logging
import uuid
from datetime import timedelta
from typing import Optional, Tuple
from uuid import UUID

from coworker.application.ports.clock import Clock, UTCClock
from coworker.application.ports.outbound import ISessionStore, ITokenMaker
from coworker.domain.exceptions import (
    CredentialMalformedException,
    InvalidTokenException,
    TokenIssueException,
)
from coworker.domain.models.session_domain_model import Session
from coworker.domain.models.token_domain_model import Payload

logger = logging.getLogger(__name__)


class SessionMaker(ITokenMaker):
    """Token maker backed by stored sessions."""

    def __init__(self, store: ISessionStore, clock: Optional[Clock] = None):
        self._store = store
        self._clock = clock or UTCClock()

    async def create_token(self, subject_id: UUID, duration: timedelta) -> Tuple[str, Payload]:
        now = self._clock.now()
        try:
            expired_at = now + duration
        except OverflowError as e:
            logger.error(f"Session duration out of range: {duration}")
            raise TokenIssueException(detail="Session duration out of range", original_error=e)

        session = await self._store.create_session(
            user_id=subject_id,
            session_token=uuid.uuid4(),
            expired_at=expired_at,
        )
        logger.info(f"Session {session.id} opened for user {subject_id}")
        return str(session.session_token), self._payload_from_session(session, issued_at=now)

    async def verify_token(self, token: str) -> Payload:
        """
        Resolve a session token into a payload.

        Raises:
            CredentialMalformedException: token is not a UUID (no lookup is made)
            InvalidTokenException: no session matches the token
            ExpiredTokenException: the session has expired
            DatabaseOperationException: the store failed
        """
        session_token = self.parse_session_token(token)

        session = await self._store.get_session(session_token)
        if session is None:
            raise InvalidTokenException(detail="session not found")

        payload = self._payload_from_session(session)
        payload.valid(self._clock.now())
        return payload

    async def revoke_token(self, token: str) -> None:
        """Delete the session behind `token` (logout)."""
        session_token = self.parse_session_token(token)
        await self._store.delete_session(session_token)

    @staticmethod
    def parse_session_token(token: str) -> UUID:
        try:
            return UUID(token)
        except (ValueError, TypeError, AttributeError):
            raise CredentialMalformedException(detail="invalid session token format")

    @staticmethod
    def _payload_from_session(session: Session, issued_at=None) -> Payload:
        return Payload(
            id=session.id,
            subject_id=session.user_id,
            issued_at=issued_at or session.created_at,
            expires_at=session.expired_at,
        )
