"""/users route module.

CRUD endpoints for user records. Every route requires a valid bearer token.
"""

import re
import uuid
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from userhub.adapters.api.v1.schemas import (
    MessageResponse,
    RegisterRequest,
    UpdateUserRequest,
    UserOut,
    UsersListResponse,
)
from userhub.core.dependencies.auth import get_current_user
from userhub.core.dependencies.services import get_user_service
from userhub.domain.services.users import UserManagementService

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_current_user)])

UserService = Annotated[UserManagementService, Depends(get_user_service)]

# Ids appear in URLs only as 32 lowercase hex digits, one path per user.
_USER_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def parse_user_id(user_id: str) -> uuid.UUID:
    """Path dependency turning the hex id of the URL into a UUID (400 if malformed)."""
    if not _USER_ID_PATTERN.fullmatch(user_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid user ID")
    return uuid.UUID(hex=user_id)


UserId = Annotated[uuid.UUID, Depends(parse_user_id)]


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, summary="Create a user")
async def create_user(payload: RegisterRequest, user_service: UserService) -> UserOut:
    profile = await user_service.create_user(payload.name, payload.email, payload.password)
    logger.info("User created", user_id=profile.id)
    return UserOut.from_profile(profile)


@router.get("", response_model=UsersListResponse, summary="List all users")
async def list_users(user_service: UserService) -> UsersListResponse:
    return UsersListResponse.from_list(await user_service.list_users())


@router.get("/{user_id}", response_model=UserOut, summary="Get a user by id")
async def get_user(user_id: UserId, user_service: UserService) -> UserOut:
    return UserOut.from_profile(await user_service.get_user(user_id))


@router.put("/{user_id}", response_model=UserOut, summary="Update a user's name and/or email")
async def update_user(user_id: UserId, payload: UpdateUserRequest, user_service: UserService) -> UserOut:
    profile = await user_service.update_user(user_id, name=payload.name, email=payload.email)
    logger.info("User updated", user_id=profile.id)
    return UserOut.from_profile(profile)


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete a user")
async def delete_user(user_id: UserId, user_service: UserService) -> MessageResponse:
    await user_service.delete_user(user_id)
    logger.info("User deleted", user_id=user_id.hex)
    return MessageResponse(message="User deleted successfully")
