"""Routes for relaying snapshot PDFs by email."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mail_relay.api.dependencies import get_email_service
from mail_relay.core.clock import utc_timestamp
from mail_relay.core.exceptions import ValidationError
from mail_relay.schemas import (
    ErrorResponse,
    SendEmailFailure,
    SendEmailResponse,
    SendPdfEmailRequest,
)
from mail_relay.services import EmailService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["email"])


@router.post(
    "/send-pdf-email",
    response_model=SendEmailResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SendEmailFailure},
    },
)
async def send_pdf_email(
    payload: Optional[SendPdfEmailRequest] = None,
    email_service: EmailService = Depends(get_email_service),
):
    """Render the snapshot email and deliver it with the PDF attached."""

    payload = payload or SendPdfEmailRequest()

    try:
        result = await email_service.send_pdf_email(payload)
    except ValidationError:
        raise
    except Exception as exc:
        logger.exception("Error sending email to %s", payload.recipient_email)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc), "timestamp": utc_timestamp()},
        )

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": result.error, "timestamp": result.timestamp},
        )

    return SendEmailResponse(success=True, message=result.message, timestamp=result.timestamp)


__all__ = ["router"]
