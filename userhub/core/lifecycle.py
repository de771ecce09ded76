"""Application lifecycle management.

This module handles application startup and shutdown events: creating the
users table when the SQL backend is selected, running the periodic user-count
report, and releasing the database engine on shutdown.
"""

import asyncio
import contextlib
from contextlib import asynccontextmanager

from fastapi import FastAPI

from userhub.core.logging import logger
from userhub.domain.services.users import UserManagementService
from userhub.infrastructure.database.async_db import create_db_and_tables


async def report_user_count(user_service: UserManagementService, interval: float) -> None:
    """Logs the number of stored users every ``interval`` seconds until cancelled.

    A failed count is logged and the loop carries on with the next tick.
    """
    while True:
        await asyncio.sleep(interval)
        try:
            count = await user_service.count_users()
        except Exception as e:
            logger.error("user_count_failed", error=str(e))
        else:
            logger.info("user_count", count=count)


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = app.state.settings
        engine = getattr(app.state, "engine", None)

        # Startup
        if engine is not None:
            await create_db_and_tables(engine)

        reporter = None
        if settings.USER_COUNT_LOG_INTERVAL_SECONDS > 0:
            reporter = asyncio.create_task(
                report_user_count(
                    app.state.services.user_service,
                    settings.USER_COUNT_LOG_INTERVAL_SECONDS,
                )
            )
        logger.info(
            "application_startup",
            env=settings.APP_ENV,
            version=settings.VERSION,
            storage=settings.STORAGE_BACKEND,
        )

        yield

        # Shutdown
        if reporter is not None:
            reporter.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await reporter
        if engine is not None:
            await engine.dispose()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
