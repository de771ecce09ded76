"""Request dependencies resolving the services of the running application."""

from fastapi import Request

from userhub.domain.services.auth import UserAuthenticationService
from userhub.domain.services.users import UserManagementService
from userhub.infrastructure.dependency_injection.container import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_auth_service(request: Request) -> UserAuthenticationService:
    return get_services(request).auth_service


def get_user_service(request: Request) -> UserManagementService:
    return get_services(request).user_service
