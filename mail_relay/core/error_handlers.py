"""Centralized exception handlers for the mail relay service."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from mail_relay.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _detail_message(detail: Any) -> str:
    if detail is None:
        return "An error occurred"
    if isinstance(detail, (list, tuple)):
        return "; ".join(_detail_message(item) for item in detail)
    return str(detail)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log ``exc`` with its traceback and reduce it to a generic 500 body."""

    logger.exception(
        "Unhandled exception while processing %s %s",
        request.method,
        request.url,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that render every failure as an ``{"error": ...}`` body."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):  # type: ignore[override]
        response = JSONResponse(
            status_code=exc.status_code,
            content={"error": _detail_message(exc.detail)},
        )

        if exc.headers:
            for key, value in exc.headers.items():
                response.headers[key] = value

        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        messages = []
        for error in exc.errors():
            location = [str(loc) for loc in error.get("loc", []) if loc != "body"]
            message = error.get("msg", "Invalid input")
            if location:
                messages.append(f"{'.'.join(location)}: {message}")
            else:
                messages.append(message)

        detail = "; ".join(messages) if messages else "Invalid request"
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "message": detail},
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:  # type: ignore[override]
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    # Normally answered by UnhandledErrorMiddleware inside CORS; this one only
    # sees errors raised by the outer middleware stack.
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        return internal_error_response(request, exc)


__all__ = ["register_exception_handlers", "internal_error_response"]
