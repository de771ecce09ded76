"""User management service.

CRUD operations behind the protected `/users` routes. Creation shares the
registration pipeline of `UserAuthenticationService`, so a user created here
can log in like any registered user.
"""

import uuid
from typing import Optional

from userhub.core.exceptions import UserAlreadyExistsError
from userhub.domain.entities.profile import UserList, UserProfile
from userhub.domain.interfaces.repositories import IUserRepository
from userhub.domain.services.auth.user_authentication import UserAuthenticationService


class UserManagementService:
    def __init__(self, user_repository: IUserRepository, auth_service: UserAuthenticationService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def create_user(self, name: str, email: str, password: str) -> UserProfile:
        user = await self.auth_service.register_user(name, email, password)
        return UserProfile.from_entity(user)

    async def get_user(self, user_id: uuid.UUID) -> UserProfile:
        user = await self.user_repository.get_by_id(user_id)
        return UserProfile.from_entity(user)

    async def list_users(self) -> UserList:
        users = await self.user_repository.get_all()
        profiles = [UserProfile.from_entity(user) for user in users]
        return UserList(users=profiles, total=len(profiles))

    async def update_user(
        self,
        user_id: uuid.UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> UserProfile:
        """Update the name and/or email of a user.

        Empty or missing fields are left untouched.

        Raises:
            UserNotFoundError: If the user does not exist.
            UserAlreadyExistsError: If ``email`` belongs to another user.
        """
        user = await self.user_repository.get_by_id(user_id)

        if name:
            user.update_name(name)

        if email and email != user.email:
            try:
                existing = await self.user_repository.get_by_email(email)
            except Exception:
                # Lookup failures count as "not found"; the repository update
                # still rejects a taken email.
                existing = None
            if existing is not None and existing.id != user_id:
                raise UserAlreadyExistsError()
            user.update_email(email)

        await self.user_repository.update(user)
        return UserProfile.from_entity(user)

    async def delete_user(self, user_id: uuid.UUID) -> None:
        await self.user_repository.delete(user_id)

    async def count_users(self) -> int:
        return await self.user_repository.count()
