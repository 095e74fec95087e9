"""Schemas for the send-pdf-email endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SendPdfEmailRequest(BaseModel):
    """Incoming relay request.

    Every field is optional here so that missing values reach the request
    validator and are reported with the relay's own error messages.
    """

    model_config = ConfigDict(populate_by_name=True)

    recipient_email: Optional[str] = Field(None, alias="recipientEmail")
    recipient_name: Optional[str] = Field(None, alias="recipientName")
    sender_name: Optional[str] = Field(None, alias="senderName")
    sender_type: Optional[str] = Field(None, alias="senderType")
    pdf_base64: Optional[str] = Field(None, alias="pdfBase64")
    pdf_filename: Optional[str] = Field(None, alias="pdfFilename")
    cc_email: Optional[str] = Field(None, alias="ccEmail")
    quarters_label: Optional[str] = Field(None, alias="quartersLabel")


class SendEmailResponse(BaseModel):
    success: bool
    message: str
    timestamp: str


class SendEmailFailure(BaseModel):
    error: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None


__all__ = ["SendPdfEmailRequest", "SendEmailResponse", "SendEmailFailure", "ErrorResponse"]
