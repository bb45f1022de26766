# coworker/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from coworker.domain.models.session_domain_model import Session
from coworker.domain.models.token_domain_model import Payload


class ITokenMaker(ABC):
    """
    Issues and verifies access credentials.

    One implementation is selected per deployment; callers never branch
    on which one they hold.
    """

    @abstractmethod
    async def create_token(self, subject_id: UUID, duration: timedelta) -> Tuple[str, Payload]:
        """Issue a credential for subject_id valid for `duration`."""
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Payload:
        """
        Check a presented credential and return its payload.

        Raises:
            CredentialMalformedException: the credential cannot be parsed
            InvalidTokenException: authentication failed or unknown credential
            ExpiredTokenException: the credential is past its expiry
        """
        pass


class ISessionStore(ABC):
    """Storage of login sessions looked up by their opaque token."""

    @abstractmethod
    async def get_session(self, session_token: UUID) -> Optional[Session]:
        """Return the session or None when no row matches."""
        pass

    @abstractmethod
    async def create_session(self, user_id: UUID, session_token: UUID, expired_at: datetime) -> Session:
        """Persist a new session."""
        pass

    @abstractmethod
    async def delete_session(self, session_token: UUID) -> None:
        """Remove a session; unknown tokens are ignored."""
        pass
