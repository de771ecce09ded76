"""Authentication router package: registration, login and token introspection."""

from fastapi import APIRouter

from .routes import login as login_route
from .routes import me as me_route
from .routes import register as register_route

router = APIRouter(prefix="/auth", tags=["auth"])

router.include_router(register_route.router, prefix="/register")
router.include_router(login_route.router, prefix="/login")
router.include_router(me_route.router, prefix="/me")

__all__ = ["router"]
