# coworker/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports every SQLAlchemy model so the metadata is complete
whenever this package is imported.
"""

from coworker.adapters.outbound.persistence.models.base_model import Base
from coworker.adapters.outbound.persistence.models.user_model import User
from coworker.adapters.outbound.persistence.models.member_model import Member
from coworker.adapters.outbound.persistence.models.session_model import Session

__all__ = [
    "Base",
    "User",
    "Member",
    "Session",
]
