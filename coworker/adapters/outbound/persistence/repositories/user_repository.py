# coworker/adapters/outbound/persistence/repositories/user_repository.py

"""
Repository for user operations.

This module implements the repository that performs database operations
related to users: email lookup and creation with a hashed password.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from fastapi.encoders import jsonable_encoder

from coworker.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from coworker.adapters.outbound.persistence.models import User
from coworker.adapters.outbound.security.password_manager import PasswordManager
from coworker.application.dtos.user_dto import UserCreate
from coworker.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)


class AsyncUserCRUD(AsyncCRUDBase[User, UserCreate, UserCreate]):
    """
    Async implementation of CRUD repository for the User entity.
    """

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        """
        Find a user by email.

        Args:
            db: Async database session
            email: User's email

        Returns:
            User found or None if doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(User).where(User.email == email)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user by email: {e}")
            raise DatabaseOperationException(
                detail="Error fetching user by email",
                original_error=e
            )

    async def create_with_password(self, db: AsyncSession, *, obj_in: UserCreate) -> User:
        """
        Create a new user storing only the password hash.

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
            DatabaseOperationException: In case of database error
        """
        obj_in_data = jsonable_encoder(obj_in)
        password = obj_in_data.pop("password")

        db_obj = User(**obj_in_data)
        db_obj.hashed_password = await PasswordManager.hash_password(password)

        try:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
            self.logger.info(f"User created with ID: {db_obj.id}")
            return db_obj

        except IntegrityError as e:
            await db.rollback()
            self.logger.warning(f"Attempt to create user with existing email: {obj_in.email}")
            raise ResourceAlreadyExistsException(
                detail=f"User with email '{obj_in.email}' already exists"
            ) from e
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating user: {e}")
            raise DatabaseOperationException(
                detail="Error creating user",
                original_error=e
            )


user_repository = AsyncUserCRUD(User)
