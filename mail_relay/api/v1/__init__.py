"""Version 1 API routes for the mail relay service."""

from fastapi import APIRouter

from .email_routes import router as email_router
from .status_routes import router as status_router

router = APIRouter()
router.include_router(email_router)
router.include_router(status_router)

__all__ = ["router"]
