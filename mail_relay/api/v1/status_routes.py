"""Health and status routes."""

from fastapi import APIRouter, Depends

from mail_relay.api.dependencies import get_app_settings
from mail_relay.core.clock import utc_timestamp
from mail_relay.core.config import Settings
from mail_relay.schemas import HealthResponse, LogsResponse

router = APIRouter(tags=["status"])


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    return HealthResponse(
        status="Backend is running",
        timestamp=utc_timestamp(),
        environment=settings.ENVIRONMENT,
    )


@router.get("/logs", response_model=LogsResponse)
async def logs(settings: Settings = Depends(get_app_settings)) -> LogsResponse:
    """Report whether the delivery provider key is present."""

    return LogsResponse(
        message="Backend is operational",
        sendgrid_configured=settings.sendgrid_configured,
        timestamp=utc_timestamp(),
    )


__all__ = ["router"]
