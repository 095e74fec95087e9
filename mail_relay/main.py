"""Entry point for the mail relay service."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mail_relay.api import relay_router
from mail_relay.core.config import Settings, get_settings
from mail_relay.core.error_handlers import register_exception_handlers
from mail_relay.core.middleware import BodySizeLimitMiddleware, UnhandledErrorMiddleware
from mail_relay.repository import SendGridRepository
from mail_relay.services import EmailService, TemplateRenderer


def create_app(
    settings: Optional[Settings] = None,
    *,
    repository: Optional[SendGridRepository] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> FastAPI:
    """Build the application around an immutable ``Settings`` value."""

    settings = settings or get_settings()

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.settings = settings
    app.state.email_service = EmailService(
        repository=repository or SendGridRepository(settings),
        renderer=renderer,
    )

    register_exception_handlers(app)

    # Last added runs outermost: CORS -> body limit -> unhandled errors.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.MAX_REQUEST_BYTES)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.CORS_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(relay_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
