"""Service layer for the mail relay."""

from mail_relay.services.email_service import EmailService
from mail_relay.services.template_renderer import RenderedTemplate, TemplateRenderer
from mail_relay.services.validation import decode_pdf, validate_send_request

__all__ = [
    "EmailService",
    "TemplateRenderer",
    "RenderedTemplate",
    "decode_pdf",
    "validate_send_request",
]
