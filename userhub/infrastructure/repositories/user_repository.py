"""User Repository implementation using SQLAlchemy.

This module provides the persistent implementation of `IUserRepository`. Each
operation opens its own session from the injected session factory, so one
repository instance can be shared by every request.

Email uniqueness is enforced by the unique index on `users.email`: a losing
concurrent insert surfaces as `IntegrityError` and is reported as
`UserAlreadyExistsError`. Any other driver failure is wrapped in
`DatabaseError`.
"""

import uuid
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from userhub.core.exceptions import DatabaseError, UserAlreadyExistsError, UserNotFoundError
from userhub.domain.entities.user import User
from userhub.domain.interfaces.repositories import IUserRepository

logger = get_logger(__name__)


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of the user repository.

    Args:
        session_factory: Factory producing `AsyncSession` objects bound to the
            application's engine.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create(self, user: User) -> None:
        try:
            async with self.session_factory() as session:
                session.add(user.clone())
                await session.commit()
        except IntegrityError as e:
            logger.info("User insert rejected by unique constraint", user_id=user.id.hex)
            raise UserAlreadyExistsError() from e
        except SQLAlchemyError as e:
            logger.error("User insert failed", user_id=user.id.hex, error=str(e))
            raise DatabaseError("failed to create user") from e

    async def get_by_id(self, user_id: uuid.UUID) -> User:
        try:
            async with self.session_factory() as session:
                user = await session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error("User lookup by ID failed", user_id=user_id.hex, error=str(e))
            raise DatabaseError("failed to load user") from e

        if user is None:
            raise UserNotFoundError()
        return user

    async def get_by_email(self, email: str) -> User:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(User).where(User.email == email))
                user = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("User lookup by email failed", error=str(e))
            raise DatabaseError("failed to load user") from e

        if user is None:
            raise UserNotFoundError()
        return user

    async def get_all(self) -> List[User]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(User).order_by(User.created_at))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("User listing failed", error=str(e))
            raise DatabaseError("failed to list users") from e

    async def update(self, user: User) -> None:
        try:
            async with self.session_factory() as session:
                stored = await session.get(User, user.id)
                if stored is None:
                    raise UserNotFoundError()
                stored.name = user.name
                stored.email = user.email
                stored.updated_at = user.updated_at
                await session.commit()
        except IntegrityError as e:
            logger.info("User update rejected by unique constraint", user_id=user.id.hex)
            raise UserAlreadyExistsError() from e
        except SQLAlchemyError as e:
            logger.error("User update failed", user_id=user.id.hex, error=str(e))
            raise DatabaseError("failed to update user") from e

    async def delete(self, user_id: uuid.UUID) -> None:
        try:
            async with self.session_factory() as session:
                stored = await session.get(User, user_id)
                if stored is None:
                    raise UserNotFoundError()
                await session.delete(stored)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("User delete failed", user_id=user_id.hex, error=str(e))
            raise DatabaseError("failed to delete user") from e

    async def count(self) -> int:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(func.count()).select_from(User))
                return int(result.scalar_one())
        except SQLAlchemyError as e:
            logger.error("User count failed", error=str(e))
            raise DatabaseError("failed to count users") from e
