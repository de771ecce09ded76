import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Column, Field, SQLModel, String

from userhub.core.exceptions import InvalidUserDataError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """Represents a User entity and acts as an Aggregate Root.

    The same class is the row model of the SQL repository and the object held
    by the in-memory repository. The password hash never leaves the service
    layer; API responses are built from `UserProfile`.

    Attributes:
        id: Opaque unique identifier, rendered outward as a 32-character hex string.
        name: Display name.
        email: Unique email address, compared case-sensitively as stored.
        hashed_password: bcrypt hash in modular crypt format.
        created_at: When the account was created (UTC).
        updated_at: When the account was last modified (UTC).
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(sa_column=Column(String, nullable=False))
    email: str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    hashed_password: str = Field(sa_column=Column(String, nullable=False))
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    @classmethod
    def create(cls, name: str, email: str, hashed_password: str) -> "User":
        """Builds a new user with a fresh id and both timestamps set to now.

        Raises:
            InvalidUserDataError: If any of the fields is empty.
        """
        if not name or not email or not hashed_password:
            raise InvalidUserDataError("name, email, and password are required")

        now = _utcnow()
        return cls(
            id=uuid.uuid4(),
            name=name,
            email=email,
            hashed_password=hashed_password,
            created_at=now,
            updated_at=now,
        )

    def update_name(self, name: str) -> None:
        self.name = name
        self.updated_at = _utcnow()

    def update_email(self, email: str) -> None:
        self.email = email
        self.updated_at = _utcnow()

    def clone(self) -> "User":
        """Returns a detached copy, so callers cannot mutate stored state."""
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            hashed_password=self.hashed_password,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
