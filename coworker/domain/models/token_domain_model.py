# coworker/domain/models/token_domain_model.py

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from coworker.domain.exceptions import ExpiredTokenException


@dataclass(frozen=True)
class Payload:
    """
    Claims carried by an access credential.

    Attributes:
        id: Identifier of the token itself (not of the user)
        subject_id: User the credential asserts
        issued_at: Moment the token was created (UTC)
        expires_at: Moment after which the token is rejected (UTC)
    """
    id: UUID
    subject_id: UUID
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def new(cls, subject_id: UUID, duration: timedelta, now: datetime) -> "Payload":
        """Build a payload for subject_id that expires `duration` after `now`."""
        return cls(
            id=uuid.uuid4(),
            subject_id=subject_id,
            issued_at=now,
            expires_at=now + duration,
        )

    def is_expired(self, now: datetime) -> bool:
        # Strictly after: a token checked at exactly expires_at is still valid.
        return now > self.expires_at

    def valid(self, now: datetime) -> None:
        """Raise ExpiredTokenException if the payload has expired at `now`."""
        if self.is_expired(now):
            raise ExpiredTokenException()
