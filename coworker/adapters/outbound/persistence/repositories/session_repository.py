# coworker/adapters/outbound/persistence/repositories/session_repository.py

from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from coworker.adapters.outbound.persistence.models.session_model import Session as SessionModel
from coworker.application.ports.outbound import ISessionStore
from coworker.domain.exceptions import DatabaseOperationException
from coworker.domain.models.session_domain_model import Session


class AsyncSessionRepository:
    """Repository for login sessions."""

    @staticmethod
    async def create(db: AsyncSession, user_id: UUID, session_token: UUID, expired_at: datetime) -> SessionModel:
        """
        Store a new session.

        Args:
            db: Async database session
            user_id: Owning user
            session_token: Opaque token handed to the client
            expired_at: When the session stops being accepted

        Returns:
            The created Session record
        """
        try:
            session = SessionModel(
                user_id=user_id,
                session_token=session_token,
                expired_at=expired_at,
            )
            db.add(session)
            await db.commit()
            await db.refresh(session)
            return session
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseOperationException(
                detail="Error creating session",
                original_error=e
            )

    @staticmethod
    async def get_by_token(db: AsyncSession, session_token: UUID) -> Optional[SessionModel]:
        """
        Find a session by the token the client presented.

        Returns:
            Session found or None if it doesn't exist
        """
        try:
            query = select(SessionModel).where(SessionModel.session_token == session_token)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseOperationException(
                detail="Error fetching session",
                original_error=e
            )

    @staticmethod
    async def delete_by_token(db: AsyncSession, session_token: UUID) -> None:
        try:
            await db.execute(delete(SessionModel).where(SessionModel.session_token == session_token))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseOperationException(
                detail="Error deleting session",
                original_error=e
            )


# Create instance
session_repository = AsyncSessionRepository()


class SQLSessionStore(ISessionStore):
    """
    Session store on top of the relational database.

    Opens one short-lived AsyncSession per call so a single store can be
    shared by every request.
    """

    def __init__(self, session_factory: async_sessionmaker, repository: AsyncSessionRepository = session_repository):
        self._session_factory = session_factory
        self._repository = repository

    async def get_session(self, session_token: UUID) -> Optional[Session]:
        async with self._session_factory() as db:
            row = await self._repository.get_by_token(db, session_token)
            return self._to_domain(row) if row is not None else None

    async def create_session(self, user_id: UUID, session_token: UUID, expired_at: datetime) -> Session:
        async with self._session_factory() as db:
            row = await self._repository.create(db, user_id, session_token, expired_at)
            return self._to_domain(row)

    async def delete_session(self, session_token: UUID) -> None:
        async with self._session_factory() as db:
            await self._repository.delete_by_token(db, session_token)

    @staticmethod
    def _to_domain(row: SessionModel) -> Session:
        return Session(
            id=row.id,
            user_id=row.user_id,
            session_token=row.session_token,
            expired_at=row.expired_at,
            created_at=row.created_at,
        )
