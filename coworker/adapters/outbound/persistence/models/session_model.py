# coworker/adapters/outbound/persistence/models/session_model.py

"""
Login session model.

Rows are created at login, read on every authenticated request by
`session_token`, never updated and deleted on logout.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from coworker.adapters.outbound.persistence.models.base_model import Base


class Session(Base):
    """
    Stored session looked up by its opaque token.

    Attributes:
        id: Primary key
        user_id: Owning user
        session_token: Value presented by the client in the cookie
        expired_at: Expiry, checked at request time
        created_at: Creation timestamp
    """
    __tablename__ = "sessions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    session_token = Column(UUID(as_uuid=True), unique=True, nullable=False, index=True)
    expired_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="sessions")
