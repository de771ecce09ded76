from .requests import LoginRequest, RegisterRequest, UpdateUserRequest
from .responses import (
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    UserOut,
    UsersListResponse,
)

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "UpdateUserRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterResponse",
    "UserOut",
    "UsersListResponse",
]
