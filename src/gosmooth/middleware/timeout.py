"""Per-request deadline.

Plain ASGI middleware: the downstream app runs inside ``asyncio.timeout``, so
when the deadline passes the handler is cancelled where it stands and any
open session rolls back. Nothing it would have committed afterwards happens.
"""

import asyncio

import structlog
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.get_logger()


class RequestDeadlineMiddleware:
    """Cancel a request that runs past ``timeout_seconds`` and answer 504."""

    def __init__(self, app: ASGIApp, timeout_seconds: float = 10.0) -> None:
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            async with asyncio.timeout(self.timeout_seconds):
                await self.app(scope, receive, send_wrapper)
        except TimeoutError:
            logger.warning(
                "request_timed_out",
                timeout_seconds=self.timeout_seconds,
                response_started=response_started,
            )
            # Headers already went out; the client sees a truncated body.
            if response_started:
                raise
            response = JSONResponse(status_code=504, content={"error": "request timed out"})
            await response(scope, receive, send)
