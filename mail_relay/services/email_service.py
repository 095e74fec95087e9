"""High level email orchestration for the mail relay service."""

from __future__ import annotations

import logging
from typing import Optional

from mail_relay.core.clock import utc_timestamp
from mail_relay.core.exceptions import DeliveryError
from mail_relay.models import EmailAttachment, RenderedMessage, SenderType, SendResult
from mail_relay.repository import SendGridRepository
from mail_relay.schemas import SendPdfEmailRequest
from mail_relay.services.template_renderer import TemplateRenderer
from mail_relay.services.validation import decode_pdf, validate_send_request

logger = logging.getLogger(__name__)


class EmailService:
    """Validate, render and deliver pipeline snapshot emails."""

    def __init__(
        self,
        *,
        repository: SendGridRepository,
        renderer: Optional[TemplateRenderer] = None,
    ):
        self._repository = repository
        self._renderer = renderer or TemplateRenderer()

    def compose(self, payload: SendPdfEmailRequest) -> RenderedMessage:
        sender_type = SenderType.resolve(payload.sender_type)
        rendered = self._renderer.render(sender_type, payload.sender_name, payload.recipient_name)
        attachment = EmailAttachment(
            filename=payload.pdf_filename,
            data=decode_pdf(payload.pdf_base64),
        )
        return RenderedMessage(
            subject=rendered.subject,
            html_body=rendered.html_body,
            text_body=rendered.text_body,
            attachment=attachment,
        )

    async def send_pdf_email(self, payload: SendPdfEmailRequest) -> SendResult:
        """Send the snapshot PDF to the requested recipient.

        Validation problems raise :class:`ValidationError` before anything is
        sent. Provider failures are not raised; they come back as a failed
        :class:`SendResult` carrying the provider's message.
        """

        validate_send_request(payload)
        message = self.compose(payload)

        if payload.quarters_label:
            logger.debug("Ignoring quartersLabel %r; not used in rendering", payload.quarters_label)

        try:
            await self._repository.send_email(
                message,
                recipient=payload.recipient_email,
                cc=payload.cc_email,
            )
        except DeliveryError as exc:
            logger.error("Error sending email to %s: %s", payload.recipient_email, exc.message)
            return SendResult(success=False, error=exc.message, timestamp=utc_timestamp())

        logger.info("Email sent successfully to %s", payload.recipient_email)
        return SendResult(
            success=True,
            message=f"Email sent to {payload.recipient_email}",
            timestamp=utc_timestamp(),
        )


__all__ = ["EmailService"]
