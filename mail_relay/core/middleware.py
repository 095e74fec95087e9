"""HTTP middleware for the mail relay service."""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from mail_relay.core.error_handlers import internal_error_response

logger = logging.getLogger(__name__)

TOO_LARGE = "Request entity too large"


class BodySizeLimitMiddleware:
    """
    Reject requests whose body exceeds ``max_bytes``.

    A declared ``Content-Length`` is checked up front. Bytes are also counted
    as they are received, so chunked uploads hit the same limit; the overflow
    is raised as a 413 ``HTTPException`` from the body read.

    Base64 inflates a PDF by roughly a third, so the limit is sized for the
    encoded payload rather than the document itself.
    """

    def __init__(self, app: ASGIApp, *, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    def _log_rejection(self, scope: Scope, size: int) -> None:
        logger.warning(
            "Rejected %s %s: body of %s bytes exceeds limit of %s",
            scope.get("method"),
            scope.get("path"),
            size,
            self.max_bytes,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            try:
                size = int(declared)
            except ValueError:
                response = JSONResponse(
                    status_code=400, content={"error": "Invalid Content-Length header"}
                )
                await response(scope, receive, send)
                return

            if size > self.max_bytes:
                self._log_rejection(scope, size)
                response = JSONResponse(status_code=413, content={"error": TOO_LARGE})
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    self._log_rejection(scope, received)
                    raise HTTPException(status_code=413, detail=TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)


class UnhandledErrorMiddleware:
    """Turn exceptions that escape the routes into the generic 500 body.

    Installed inside ``CORSMiddleware`` so the error response still carries
    the CORS headers.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            if response_started:
                raise
            response = internal_error_response(Request(scope), exc)
            await response(scope, receive, send)


__all__ = ["BodySizeLimitMiddleware", "UnhandledErrorMiddleware"]
