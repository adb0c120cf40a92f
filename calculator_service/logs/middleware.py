"""Request logging middleware."""

import json
from typing import Any, Callable

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger("calculator.requests")


def decode_body(body: bytes) -> Any:
    """Turn a raw request body into something loggable.

    Empty bodies become ``{}``, JSON bodies are parsed, anything else is
    logged as text.
    """
    if not body:
        return {}
    text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


def request_url(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every incoming request at info level."""

    async def dispatch(self, request: Request, call_next: Callable):
        body = await request.body()

        logger.info(
            "incoming_request",
            method=request.method,
            url=request_url(request),
            ip=request.client.host if request.client else None,
            headers=dict(request.headers),
            body=decode_body(body),
        )

        return await call_next(request)
