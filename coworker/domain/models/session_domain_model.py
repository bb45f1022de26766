# coworker/domain/models/session_domain_model.py

from uuid import UUID
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Session:
    """Domain model for a stored login session."""
    id: UUID
    user_id: UUID
    session_token: UUID  # opaque value held by the client
    expired_at: datetime
    created_at: Optional[datetime] = None
