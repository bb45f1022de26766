# coworker/application/use_cases/user_use_cases.py

import logging
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.outbound.persistence.repositories.user_repository import user_repository
from coworker.application.dtos.user_dto import UserCreate, UserOutput
from coworker.domain.exceptions import InvalidTokenException

logger = logging.getLogger(__name__)


class AsyncUserService:
    """
    Service for user accounts.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def create_user(self, user_input: UserCreate) -> UserOutput:
        """
        Register a new user.

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
        """
        user = await user_repository.create_with_password(self.db, obj_in=user_input)
        return UserOutput.model_validate(user)

    async def get_authenticated_user(self, user_id: UUID) -> UserOutput:
        """
        Load the user a verified credential points at.

        Raises:
            InvalidTokenException: If the user no longer exists
        """
        user = await user_repository.get(self.db, user_id)
        if not user:
            logger.warning(f"Credential subject {user_id} has no matching user")
            raise InvalidTokenException(detail="user not found")
        return UserOutput.model_validate(user)
