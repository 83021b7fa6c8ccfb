"""Product domain exceptions.

Raised by the Service Layer (and the repository's ``update``).  The API
layer (Views) catches these and translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist (or was hard-deleted)."""
