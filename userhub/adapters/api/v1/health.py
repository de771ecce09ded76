from datetime import datetime, timezone
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from userhub.core.dependencies.services import get_user_service
from userhub.core.logging import logger
from userhub.domain.services.users import UserManagementService

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    users: Optional[int]
    timestamp: datetime


@router.get("", response_model=HealthResponse)
async def health_check(
    request: Request,
    user_service: Annotated[UserManagementService, Depends(get_user_service)],
) -> HealthResponse:
    """
    Reports service health; "degraded" when the user store cannot be counted.
    """
    try:
        users = await user_service.count_users()
        overall_status = "ok"
    except Exception as e:
        logger.error("user_store_health_check_failed", error=str(e))
        users = None
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        env=request.app.state.settings.APP_ENV,
        users=users,
        timestamp=datetime.now(timezone.utc),
    )
