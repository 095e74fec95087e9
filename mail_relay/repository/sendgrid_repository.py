"""Repository responsible for handing emails to the SendGrid v3 Mail Send API."""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Optional

import httpx

from mail_relay.core.config import Settings
from mail_relay.core.exceptions import DeliveryError
from mail_relay.models import RenderedMessage

logger = logging.getLogger(__name__)

MAIL_SEND_PATH = "/v3/mail/send"


def _provider_error_message(response: httpx.Response) -> str:
    """Pick the first structured error SendGrid reported, else the status line."""
    fallback = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback

    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and first.get("message"):
                return str(first["message"])
    return fallback


class SendGridRepository:
    """Handles the low level communication with the SendGrid API."""

    def __init__(
        self,
        config: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = config
        self._base_url = config.SENDGRID_API_URL.rstrip("/")
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return self._settings.sendgrid_configured

    def build_payload(
        self,
        message: RenderedMessage,
        *,
        recipient: str,
        cc: Optional[str] = None,
    ) -> Dict[str, Any]:
        personalization: Dict[str, Any] = {"to": [{"email": recipient}]}
        if cc:
            personalization["cc"] = [{"email": cc}]

        attachment = message.attachment
        return {
            "personalizations": [personalization],
            "from": {"email": self._settings.MAIL_FROM_EMAIL},
            "subject": message.subject,
            "content": [
                {"type": "text/plain", "value": message.text_body},
                {"type": "text/html", "value": message.html_body},
            ],
            "attachments": [
                {
                    "content": base64.b64encode(attachment.data).decode("ascii"),
                    "filename": attachment.filename,
                    "type": attachment.content_type,
                    "disposition": attachment.disposition,
                }
            ],
        }

    async def send_email(
        self,
        message: RenderedMessage,
        *,
        recipient: str,
        cc: Optional[str] = None,
    ) -> None:
        if not self.is_configured:
            raise DeliveryError("SENDGRID_API_KEY must be configured to send emails")

        payload = self.build_payload(message, recipient=recipient, cc=cc)
        headers = {"Authorization": f"Bearer {self._settings.SENDGRID_API_KEY}"}

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._settings.SENDGRID_TIMEOUT,
                transport=self._transport,
            ) as client:
                response = await client.post(MAIL_SEND_PATH, json=payload, headers=headers)
        except httpx.RequestError as exc:
            raise DeliveryError(str(exc) or exc.__class__.__name__) from exc

        if response.is_error:
            detail = _provider_error_message(response)
            logger.warning(
                "SendGrid returned HTTP %s for %s: %s",
                response.status_code,
                recipient,
                response.text,
            )
            raise DeliveryError(detail, status_code=response.status_code)


__all__ = ["SendGridRepository", "MAIL_SEND_PATH"]
