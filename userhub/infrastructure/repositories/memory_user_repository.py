"""In-memory user repository.

Keeps users in a dict keyed by id plus an email index. Mutations run under an
`asyncio.Lock`, so the uniqueness check and the insert in `create` happen
atomically with respect to other coroutines on the same event loop. Users are
copied on the way in and on the way out.
"""

import asyncio
import uuid
from typing import Dict, List

from structlog import get_logger

from userhub.core.exceptions import UserAlreadyExistsError, UserNotFoundError
from userhub.domain.entities.user import User
from userhub.domain.interfaces.repositories import IUserRepository

logger = get_logger(__name__)


class InMemoryUserRepository(IUserRepository):
    def __init__(self) -> None:
        self._users: Dict[uuid.UUID, User] = {}
        self._emails: Dict[str, uuid.UUID] = {}
        self._lock = asyncio.Lock()

    async def create(self, user: User) -> None:
        async with self._lock:
            if user.email in self._emails:
                raise UserAlreadyExistsError()
            self._users[user.id] = user.clone()
            self._emails[user.email] = user.id
        logger.debug("User stored", user_id=user.id.hex)

    async def get_by_id(self, user_id: uuid.UUID) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError()
        return user.clone()

    async def get_by_email(self, email: str) -> User:
        user_id = self._emails.get(email)
        if user_id is None:
            raise UserNotFoundError()
        return self._users[user_id].clone()

    async def get_all(self) -> List[User]:
        return [user.clone() for user in self._users.values()]

    async def update(self, user: User) -> None:
        async with self._lock:
            existing = self._users.get(user.id)
            if existing is None:
                raise UserNotFoundError()

            if existing.email != user.email:
                owner = self._emails.get(user.email)
                if owner is not None and owner != user.id:
                    raise UserAlreadyExistsError()
                del self._emails[existing.email]
                self._emails[user.email] = user.id

            self._users[user.id] = user.clone()
        logger.debug("User updated", user_id=user.id.hex)

    async def delete(self, user_id: uuid.UUID) -> None:
        async with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                raise UserNotFoundError()
            del self._emails[user.email]
        logger.debug("User deleted", user_id=user_id.hex)

    async def count(self) -> int:
        return len(self._users)
