"""HTTP surface of the mail relay service."""

from mail_relay.api.v1 import router as relay_router

__all__ = ["relay_router"]
