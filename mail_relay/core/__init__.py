"""Core utilities for the mail relay service."""

from mail_relay.core.config import Settings, get_settings
from mail_relay.core.error_handlers import register_exception_handlers
from mail_relay.core.exceptions import DeliveryError, ValidationError
from mail_relay.core.middleware import BodySizeLimitMiddleware, UnhandledErrorMiddleware

__all__ = [
    "Settings",
    "get_settings",
    "register_exception_handlers",
    "DeliveryError",
    "ValidationError",
    "BodySizeLimitMiddleware",
    "UnhandledErrorMiddleware",
]
