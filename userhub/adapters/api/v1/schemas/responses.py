"""Response Pydantic models."""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from userhub.domain.entities.profile import LoginResult, RegisterResult, UserList, UserProfile


class UserOut(BaseModel):
    """Public representation of a user. Never includes the password hash."""

    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserOut":
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            created_at=profile.created_at,
        )


class RegisterResponse(BaseModel):
    id: str
    message: str

    @classmethod
    def from_result(cls, result: RegisterResult) -> "RegisterResponse":
        return cls(id=result.id, message=result.message)


class LoginResponse(BaseModel):
    token: str
    user: UserOut

    @classmethod
    def from_result(cls, result: LoginResult) -> "LoginResponse":
        return cls(token=result.token, user=UserOut.from_profile(result.user))


class UsersListResponse(BaseModel):
    users: List[UserOut]
    total: int

    @classmethod
    def from_list(cls, user_list: UserList) -> "UsersListResponse":
        return cls(
            users=[UserOut.from_profile(profile) for profile in user_list.users],
            total=user_list.total,
        )


class MessageResponse(BaseModel):
    message: str
