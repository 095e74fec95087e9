"""Repositories for the mail relay service."""

from mail_relay.repository.sendgrid_repository import SendGridRepository

__all__ = ["SendGridRepository"]
