"""Public projections of the User aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

from userhub.domain.entities.user import User


@dataclass(frozen=True)
class UserProfile:
    """The subset of a user record that is safe to return to callers.

    The password hash is deliberately absent.
    """

    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> UserProfile:
        return cls(
            id=user.id.hex,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class RegisterResult:
    id: str
    message: str = "User registered successfully"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: UserProfile


@dataclass(frozen=True)
class UserList:
    users: List[UserProfile]
    total: int
