"""Middleware configuration for the FastAPI application.

This module handles the configuration and registration of all middleware
components: CORS and per-request access logging.
"""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from structlog import get_logger

logger = get_logger("userhub.access")


def configure_middleware(app: FastAPI, allowed_origins: list) -> None:
    """Configure all middleware for the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance
        allowed_origins (list): Origins accepted by the CORS middleware
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_logging_middleware)


async def request_logging_middleware(request: Request, call_next):
    """Logs method, path, status code and duration of every request.

    Args:
        request (Request): The incoming request
        call_next: The next middleware or route handler

    Returns:
        Response: The response of the downstream handler, unchanged
    """
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    return response
