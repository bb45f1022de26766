# coworker/application/use_cases/__init__.py

from coworker.application.use_cases.member_use_cases import AsyncMemberService
from coworker.application.use_cases.user_use_cases import AsyncUserService
from coworker.application.use_cases.auth_use_cases import AsyncAuthService

__all__ = [
    "AsyncMemberService",
    "AsyncUserService",
    "AsyncAuthService",
]
