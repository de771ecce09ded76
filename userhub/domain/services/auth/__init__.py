from .password import PasswordHasher
from .token import TokenConfig, TokenService
from .user_authentication import UserAuthenticationService

__all__ = [
    "PasswordHasher",
    "TokenConfig",
    "TokenService",
    "UserAuthenticationService",
]
