from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from structlog import get_logger

from userhub.core.dependencies.services import get_auth_service
from userhub.core.exceptions import AuthenticationError, UserNotFoundError
from userhub.domain.entities.profile import UserProfile
from userhub.domain.services.auth import UserAuthenticationService

__all__ = [
    "get_current_user",
    "CurrentUser",
]

logger = get_logger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _auth_fail(detail: str) -> HTTPException:  # noqa: D401
    """Consistently shaped *401* UNAUTHORIZED response."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


# ---------------------------------------------------------------------------
# Public dependencies
# ---------------------------------------------------------------------------


async def get_current_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(_bearer_scheme)],
    auth_service: Annotated[UserAuthenticationService, Depends(get_auth_service)],
) -> UserProfile:
    """Return the profile of the user the bearer token was issued to.

    A missing header, a non-Bearer scheme, an invalid token and a token whose
    account has been deleted all produce the same 401 response. The last two
    cases are told apart in the logs only.
    """
    # HTTPBearer yields None both for a missing header and for another scheme.
    if credentials is None:
        if request.headers.get("Authorization"):
            raise _auth_fail("Invalid authorization header format")
        raise _auth_fail("Authorization header required")

    try:
        return await auth_service.validate_token(credentials.credentials)
    except UserNotFoundError as exc:
        logger.warning("Token refers to a removed user", path=request.url.path)
        raise _auth_fail("Invalid token") from exc
    except AuthenticationError as exc:
        logger.info("Token rejected", path=request.url.path, error=exc.code)
        raise _auth_fail("Invalid token") from exc


CurrentUser = Annotated[UserProfile, Depends(get_current_user)]
