"""Request-payload Pydantic models.

Constraints are declared on the fields; FastAPI rejects violating payloads
with a 422 before any service is called.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Payload expected by ``POST /auth/register`` and ``POST /users``."""

    name: str = Field(..., min_length=2, examples=["Alice"])
    email: EmailStr = Field(..., examples=["alice@example.com"])
    password: str = Field(..., min_length=6, examples=["secret1"])


class LoginRequest(BaseModel):
    """Payload expected by ``POST /auth/login``."""

    email: EmailStr = Field(..., examples=["alice@example.com"])
    password: str = Field(..., min_length=1, examples=["secret1"])


class UpdateUserRequest(BaseModel):
    """Payload expected by ``PUT /users/{id}``. Omitted fields are unchanged."""

    name: Optional[str] = Field(default=None, min_length=2, examples=["Alice Smith"])
    email: Optional[EmailStr] = Field(default=None, examples=["alice.smith@example.com"])
