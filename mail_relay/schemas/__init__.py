"""Pydantic schemas used by the mail relay service."""

from mail_relay.schemas.email import (
    ErrorResponse,
    SendEmailFailure,
    SendEmailResponse,
    SendPdfEmailRequest,
)
from mail_relay.schemas.status import HealthResponse, LogsResponse

__all__ = [
    "SendPdfEmailRequest",
    "SendEmailResponse",
    "SendEmailFailure",
    "ErrorResponse",
    "HealthResponse",
    "LogsResponse",
]
