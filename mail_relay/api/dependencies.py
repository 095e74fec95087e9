"""Common dependencies for the mail relay routes."""

from fastapi import Request

from mail_relay.core.config import Settings
from mail_relay.services import EmailService


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


def get_email_service(request: Request) -> EmailService:
    return request.app.state.email_service


__all__ = ["get_app_settings", "get_email_service"]
