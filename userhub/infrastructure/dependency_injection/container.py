"""Service wiring.

Builds the domain services for one application instance from its settings
and user repository. The application factory stores the resulting container
on ``app.state`` and request dependencies read it from there, so two apps in
the same process never share configuration.
"""

from dataclasses import dataclass
from datetime import timedelta

from userhub.core.config.settings import Settings
from userhub.domain.interfaces.repositories import IUserRepository
from userhub.domain.services.auth import (
    PasswordHasher,
    TokenConfig,
    TokenService,
    UserAuthenticationService,
)
from userhub.domain.services.users import UserManagementService


@dataclass(frozen=True)
class ServiceContainer:
    user_repository: IUserRepository
    token_service: TokenService
    auth_service: UserAuthenticationService
    user_service: UserManagementService


def build_token_config(settings: Settings) -> TokenConfig:
    return TokenConfig(
        secret=settings.JWT_SECRET.get_secret_value(),
        lifetime=timedelta(hours=settings.JWT_EXPIRATION_HOURS),
        algorithm=settings.JWT_ALGORITHM,
    )


def build_services(settings: Settings, user_repository: IUserRepository) -> ServiceContainer:
    token_service = TokenService(build_token_config(settings), user_repository)
    auth_service = UserAuthenticationService(
        user_repository=user_repository,
        password_hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        token_service=token_service,
    )
    return ServiceContainer(
        user_repository=user_repository,
        token_service=token_service,
        auth_service=auth_service,
        user_service=UserManagementService(user_repository, auth_service),
    )
