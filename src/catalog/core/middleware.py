"""Per-request correlation and access logging."""

from __future__ import annotations

import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"
# Anything else (too long, spaces, control characters) is replaced rather
# than written into the logs.
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

logger = structlog.get_logger(__name__)


def _request_id(request: HttpRequest) -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "")
    if _VALID_REQUEST_ID.match(supplied):
        return supplied
    return str(uuid.uuid4())


class CorrelationIdMiddleware:
    """Tag every log line of a request with one correlation ID.

    A well-formed ``X-Request-ID`` from the caller is reused; otherwise a
    UUID4 is generated.  The ID is bound into structlog's context variables
    for the duration of the request and echoed in the response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )

        logger.info("request_started")
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = round((time.monotonic() - started) * 1000, 2)

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "request_finished",
            status_code=response.status_code,
            duration_ms=elapsed_ms,
        )

        response[REQUEST_ID_HEADER] = cid
        structlog.contextvars.clear_contextvars()
        return response
