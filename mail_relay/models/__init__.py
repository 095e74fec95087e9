"""Domain models for the mail relay service."""

from mail_relay.models.email import EmailAttachment, RenderedMessage, SenderType, SendResult

__all__ = ["SenderType", "EmailAttachment", "RenderedMessage", "SendResult"]
