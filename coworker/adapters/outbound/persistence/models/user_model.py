# coworker/adapters/outbound/persistence/models/user_model.py

"""
User model.

Users are the accounts that log in; they own sessions.
"""

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from coworker.adapters.outbound.persistence.models.base_model import Base


class User(Base):
    """
    System user.

    Attributes:
        id: Unique identifier (UUID)
        first_name: Given name
        last_name: Family name
        email: Login email, unique
        hashed_password: bcrypt hash of the password
        created_at: Creation timestamp
        sessions: Login sessions opened by the user
    """
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    sessions = relationship("Session", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User(email={self.email})>"
