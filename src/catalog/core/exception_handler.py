"""Project-wide DRF exception handler.

Domain "not found" errors are handled inside each view.  What reaches this
handler is either a DRF ``APIException`` (malformed JSON, unsupported media
type, method not allowed) which keeps DRF's default rendering, or a
``StoreFailure`` which becomes a 500 with a fixed, non-leaking message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from catalog.core.exceptions import StoreFailure

logger = structlog.get_logger(__name__)


def exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    if isinstance(exc, StoreFailure):
        view = context.get("view")
        logger.warning(
            "request.store_failure",
            view=type(view).__name__ if view is not None else None,
            operation=exc.operation,
        )
        return Response(
            {"detail": "Storage failure."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return drf_exception_handler(exc, context)
