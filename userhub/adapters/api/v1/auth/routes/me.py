"""/auth/me route module."""

from fastapi import APIRouter

from userhub.adapters.api.v1.schemas import UserOut
from userhub.core.dependencies.auth import CurrentUser

router = APIRouter()


@router.get("", response_model=UserOut, summary="Return the authenticated user's profile")
async def read_current_user(current_user: CurrentUser) -> UserOut:
    return UserOut.from_profile(current_user)
