"""Repository interfaces for abstracting data persistence in the domain layer.

This module defines the abstract base class (interface) for the user
repository, which acts as a "port" in the context of Hexagonal Architecture.
The domain services use this interface to look users up and persist them
without being coupled to a specific store.

The concrete implementations reside in the `infrastructure` layer: an
in-memory map for tests and local development, and a SQL table.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List

from userhub.domain.entities.user import User


class IUserRepository(ABC):
    """An interface defining the contract for user persistence operations.

    Implementations own their concurrency control and enforce email uniqueness
    themselves; services treat the `UserAlreadyExistsError` raised by `create`
    and `update` as authoritative. Apart from `UserNotFoundError` and
    `UserAlreadyExistsError`, errors raised by an implementation are opaque to
    the services and propagate to the caller unchanged.
    """

    @abstractmethod
    async def create(self, user: User) -> None:
        """Persists a new user.

        Raises:
            UserAlreadyExistsError: If the email is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, user_id: uuid.UUID) -> User:
        """Retrieves a user by their unique identifier.

        Raises:
            UserNotFoundError: If no user has this id.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """Retrieves a user by their email address (exact match).

        Raises:
            UserNotFoundError: If no user has this email.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Returns every stored user."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, user: User) -> None:
        """Replaces the stored name, email and update timestamp of a user.

        Raises:
            UserNotFoundError: If the user does not exist.
            UserAlreadyExistsError: If the new email belongs to another user.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, user_id: uuid.UUID) -> None:
        """Removes a user.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def count(self) -> int:
        """Returns the number of stored users."""
        raise NotImplementedError
