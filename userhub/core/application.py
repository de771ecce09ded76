"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI
application with all necessary middleware, exception handlers, and routers
registered.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from userhub.adapters.api.v1 import api_router
from userhub.core.config.settings import Settings
from userhub.core.config.settings import settings as default_settings
from userhub.core.handlers import register_exception_handlers
from userhub.core.lifecycle import create_lifespan_manager
from userhub.core.middleware import configure_middleware
from userhub.domain.interfaces.repositories import IUserRepository
from userhub.infrastructure.database.async_db import (
    create_engine_from_settings,
    create_session_factory,
)
from userhub.infrastructure.dependency_injection.container import build_services
from userhub.infrastructure.repositories.memory_user_repository import InMemoryUserRepository
from userhub.infrastructure.repositories.user_repository import UserRepository


def create_application(
    settings: Optional[Settings] = None,
    user_repository: Optional[IUserRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the process-wide settings.
        user_repository: Storage to use; when omitted it is chosen by
            ``settings.STORAGE_BACKEND``.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="User management and authentication API.",
        debug=settings.DEBUG,
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    app.state.settings = settings
    if user_repository is None:
        if settings.STORAGE_BACKEND == "database":
            app.state.engine = create_engine_from_settings(settings)
            user_repository = UserRepository(create_session_factory(app.state.engine))
        else:
            user_repository = InMemoryUserRepository()
    app.state.services = build_services(settings, user_repository)

    configure_middleware(app, settings.ALLOWED_ORIGINS)
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app
