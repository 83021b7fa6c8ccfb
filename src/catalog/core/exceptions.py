"""Cross-cutting infrastructure exceptions.

``StoreFailure`` is the only error the persistence layer lets escape:
repositories wrap every ORM call in ``translate_store_errors`` so that a
``django.db.DatabaseError`` (lost connection, constraint violation, ...)
reaches the service and API layers as a single, well-known type.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from django.db import DatabaseError

logger = structlog.get_logger(__name__)


class StoreFailure(Exception):
    """A persistence operation failed and the request cannot complete.

    Never retried; the API layer reports it as a server error.
    """

    def __init__(self, message: str, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise any ``DatabaseError`` raised inside the block as ``StoreFailure``."""
    try:
        yield
    except DatabaseError as exc:
        logger.error(
            "store.failure",
            operation=operation,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise StoreFailure(f"Store operation '{operation}' failed.", operation) from exc
