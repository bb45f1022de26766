# coworker/adapters/outbound/persistence/repositories/__init__.py

"""
CRUD (Create, Read, Update, Delete) module.

This module exports classes and instances of the repositories
for the system entities, implementing the Repository pattern.
"""

from coworker.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from coworker.adapters.outbound.persistence.repositories.member_repository import AsyncMemberCRUD, member_repository
from coworker.adapters.outbound.persistence.repositories.user_repository import AsyncUserCRUD, user_repository
from coworker.adapters.outbound.persistence.repositories.session_repository import (
    AsyncSessionRepository,
    SQLSessionStore,
    session_repository,
)

__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncMemberCRUD",
    "AsyncUserCRUD",
    "AsyncSessionRepository",
    "SQLSessionStore",

    # Instances
    "member_repository",
    "user_repository",
    "session_repository",
]
