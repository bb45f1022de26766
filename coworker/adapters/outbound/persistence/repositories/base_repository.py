# coworker/adapters/outbound/persistence/repositories/base_repository.py

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from fastapi.encoders import jsonable_encoder
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
import logging

from coworker.adapters.outbound.persistence.models.base_model import Base
from coworker.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)
# Define generic types for Pydantic DTOs
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Async base class for implementing the Repository pattern.

    Provides generic CRUD operations that can be used by any entity.
    Includes consistent error handling and logging.

    Attributes:
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID.

        Args:
            db: Async database session
            id: ID of the entity

        Returns:
            Entity found or None if it doesn't exist
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def get_multi(
            self, db: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        """
        Get multiple entities with pagination, oldest first.

        Args:
            db: Async database session
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return

        Returns:
            List of found entities

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = (
                select(self.model)
                .order_by(self.model.created_at, self.model.id)
                .offset(skip)
                .limit(limit)
            )
            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Create a new entity.

        Args:
            db: Async database session
            obj_in: Creation schema with entity data

        Returns:
            Newly created entity

        Raises:
            ResourceAlreadyExistsException: If the entity already exists
            DatabaseOperationException: If another database error occurs
        """
        try:
            obj_in_data = jsonable_encoder(obj_in)
            db_obj = self.model(**obj_in_data)

            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return db_obj

        except IntegrityError as e:
            await db.rollback()
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Attempt to create duplicate {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.model.__name__} with these data already exists"
                )
            self.logger.error(f"Integrity error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error creating {self.model.__name__}",
                original_error=e
            )

    async def update(
            self, db: AsyncSession, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Update an existing entity.

        Args:
            db: Async database session
            db_obj: Model instance to update
            obj_in: Update schema or dictionary with data to update

        Returns:
            Updated entity

        Raises:
            ResourceAlreadyExistsException: If the update violates a uniqueness constraint
            DatabaseOperationException: If another database error occurs
        """
        try:
            if isinstance(obj_in, dict):
                update_data = obj_in
            else:
                update_data = obj_in.model_dump(exclude_unset=True)

            for field, value in update_data.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} updated")
            return db_obj

        except IntegrityError as e:
            await db.rollback()
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Uniqueness violation updating {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"Could not update {self.model.__name__}: value already exists"
                )
            self.logger.error(f"Integrity error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error updating {self.model.__name__}",
                original_error=e
            )

    async def count(self, db: AsyncSession) -> int:
        """
        Count all entities of the model.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            result = await db.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()

        except SQLAlchemyError as e:
            self.logger.error(f"Error counting {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error counting {self.model.__name__}s",
                original_error=e
            )
