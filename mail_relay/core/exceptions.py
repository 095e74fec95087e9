"""Error taxonomy for the mail relay service."""

from __future__ import annotations


class MailRelayError(Exception):
    """Base class for errors raised by the relay."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MailRelayError):
    """The caller sent an incomplete or malformed request."""


class DeliveryError(MailRelayError):
    """The delivery provider rejected the message or could not be reached."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


__all__ = ["MailRelayError", "ValidationError", "DeliveryError"]
