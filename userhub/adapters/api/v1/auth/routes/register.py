"""/auth/register route module."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from userhub.adapters.api.v1.schemas import RegisterRequest, RegisterResponse
from userhub.core.dependencies.services import get_auth_service
from userhub.domain.services.auth import UserAuthenticationService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates a new user account with name, email, and password.",
)
async def register_user(
    payload: RegisterRequest,
    auth_service: Annotated[UserAuthenticationService, Depends(get_auth_service)],
) -> RegisterResponse:
    """Register a new user.

    Errors raised by the service (duplicate email, invalid data, storage
    failures) are turned into responses by the global exception handlers.
    """
    result = await auth_service.register(payload.name, payload.email, payload.password)
    logger.info("User registered", user_id=result.id)
    return RegisterResponse.from_result(result)
