"""/auth/login route module."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from userhub.adapters.api.v1.schemas import LoginRequest, LoginResponse
from userhub.core.dependencies.services import get_auth_service
from userhub.domain.services.auth import UserAuthenticationService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate a user",
    description=(
        "Authenticates a user with email and password and returns an access token "
        "together with the user's public profile."
    ),
)
async def login_user(
    payload: LoginRequest,
    auth_service: Annotated[UserAuthenticationService, Depends(get_auth_service)],
) -> LoginResponse:
    """Authenticate a user with email and password.

    Unknown emails and wrong passwords produce the same 401 response.
    """
    result = await auth_service.login(payload.email, payload.password)
    logger.info("User logged in", user_id=result.user.id)
    return LoginResponse.from_result(result)
