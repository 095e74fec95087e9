"""
Pytest configuration and fixtures for the mail relay tests.
"""
from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport

from mail_relay.core.config import Settings
from mail_relay.main import create_app
from mail_relay.services import EmailService, TemplateRenderer

FIXED_NOW = datetime(2025, 1, 5, 9, 30)


class StubRepository:
    """Stands in for SendGrid; records every message handed to it."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def send_email(self, message, *, recipient, cc=None) -> None:
        self.calls.append({"message": message, "recipient": recipient, "cc": cc})
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(SENDGRID_API_KEY="SG.test-key", ENVIRONMENT="test")


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer(clock=lambda: FIXED_NOW)


@pytest.fixture
def repository() -> StubRepository:
    return StubRepository()


@pytest.fixture
def email_service(repository: StubRepository, renderer: TemplateRenderer) -> EmailService:
    return EmailService(repository=repository, renderer=renderer)


@pytest.fixture
def app(settings: Settings, repository: StubRepository, renderer: TemplateRenderer):
    return create_app(settings, repository=repository, renderer=renderer)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as http_client:
        yield http_client


@pytest.fixture
def valid_payload() -> dict[str, str]:
    return {
        "recipientEmail": "a@b.com",
        "recipientName": "Pat",
        "senderName": "Alex",
        "senderType": "owner",
        "pdfBase64": "JVBERi0=",
        "pdfFilename": "q.pdf",
    }
