"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into appropriate HTTP responses. The domain never logs its
own failures; these handlers do.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from userhub.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    InvalidSecretError,
    UserAlreadyExistsError,
    UserHubError,
    UserNotFoundError,
    ValidationError,
)

__all__ = [
    "authentication_error_handler",
    "user_already_exists_error_handler",
    "validation_error_handler",
    "user_not_found_error_handler",
    "invalid_secret_error_handler",
    "database_error_handler",
    "userhub_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    Covers invalid credentials and invalid tokens. The message is the coarse
    one carried by the exception, so the response never reveals which check
    failed.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def user_already_exists_error_handler(
    request: Request, exc: UserAlreadyExistsError
) -> JSONResponse:
    """Handles `UserAlreadyExistsError`, returning a `409 Conflict`."""
    logger.info("Duplicate user rejected", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handles `ValidationError` and its subclasses, returning a `400 Bad Request`."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


async def user_not_found_error_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    """Handles `UserNotFoundError`, returning a `404 Not Found`."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


async def invalid_secret_error_handler(request: Request, exc: InvalidSecretError) -> JSONResponse:
    """Handles `InvalidSecretError`, returning a `500 Internal Server Error`.

    A missing signing secret is an operator problem: it is logged as an error
    and the client only receives a generic message.
    """
    logger.error("Token signing secret is not configured", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal server error"},
    )


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handles `DatabaseError`, returning a `500 Internal Server Error`."""
    logger.error("Database error", error=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal server error"},
    )


async def userhub_error_handler(request: Request, exc: UserHubError) -> JSONResponse:
    """Handles any other `UserHubError`, returning a `400 Bad Request`."""
    logger.warning("Unhandled application error", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(UserAlreadyExistsError, user_already_exists_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(UserNotFoundError, user_not_found_error_handler)
    app.add_exception_handler(InvalidSecretError, invalid_secret_error_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(UserHubError, userhub_error_handler)
