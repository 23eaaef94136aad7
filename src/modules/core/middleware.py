"""Request-scoped logging context.

``RequestContextMiddleware`` binds a correlation id to structlog's
contextvars for the lifetime of a request, so every log line emitted by
services and repositories carries it.
"""

from __future__ import annotations

import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


def _resolve_request_id(header: str | None) -> str:
    """Canonical form of a client-supplied UUID, or a fresh UUID4."""
    if header:
        try:
            return str(uuid.UUID(header))
        except ValueError:
            logger.warning("request.request_id_rejected", length=len(header))
    return str(uuid.uuid4())


class RequestContextMiddleware:
    """Reads ``X-Request-ID`` (a UUID, else a generated UUID4) and echoes it back."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = _resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=request_id,
            method=request.method,
            path=request.path,
        )

        started = time.monotonic()
        response = self.get_response(request)
        logger.info(
            "request.finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = request_id
        return response
