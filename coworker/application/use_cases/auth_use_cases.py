# coworker/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

Login checks the password and asks the configured token maker for a
credential.
"""

import logging
from datetime import timedelta
from typing import Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from coworker.adapters.outbound.persistence.repositories.user_repository import user_repository
from coworker.adapters.outbound.security.password_manager import PasswordManager
from coworker.application.dtos.user_dto import LoginInput, LoginOutput, UserOutput
from coworker.application.ports.outbound import ITokenMaker
from coworker.domain.exceptions import InvalidCredentialsException, ResourceNotFoundException

logger = logging.getLogger(__name__)


class AsyncAuthService:
    """
    Service for user authentication.
    """

    def __init__(self, db_session: AsyncSession, token_maker: ITokenMaker, token_duration: timedelta):
        """
        Args:
            db_session: Active SQLAlchemy session
            token_maker: Maker selected for this deployment
            token_duration: Validity of issued credentials
        """
        self.db = db_session
        self.token_maker = token_maker
        self.token_duration = token_duration

    async def login_user(self, login_input: LoginInput) -> Tuple[str, LoginOutput]:
        """
        Authenticate a user and issue a credential.

        Returns:
            The raw credential and the response body

        Raises:
            ResourceNotFoundException: If no user has this email
            InvalidCredentialsException: If the password does not match
        """
        user = await user_repository.get_by_email(self.db, login_input.email)
        if not user:
            raise ResourceNotFoundException(detail="User not found")

        if not await PasswordManager.verify_password(login_input.password, user.hashed_password):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentialsException(detail="Incorrect password")

        token, payload = await self.token_maker.create_token(user.id, self.token_duration)
        logger.info(f"User {user.id} logged in; credential expires at {payload.expires_at.isoformat()}")

        return token, LoginOutput(
            access_token=token,
            access_token_expires_at=payload.expires_at,
            user=UserOutput.model_validate(user),
        )
