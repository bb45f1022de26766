# coworker/adapters/outbound/persistence/models/member_model.py

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID

from coworker.adapters.outbound.persistence.models.base_model import Base


class Member(Base):
    """
    Workforce member (employee-like record).

    Members do not log in; email is optional.
    """
    __tablename__ = "members"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, name={self.first_name} {self.last_name})>"
