"""Structural validation error formatting.

Every 400 produced by the API layer has the same body::

    {"detail": "Validation failed.", "errors": {"<field>": ["message", ...]}}

Field keys are the JSON (camelCase) names the client sent.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response

NON_FIELD_ERRORS = "non_field_errors"


def _message(error: Dict[str, Any]) -> str:
    # Custom validators raise ValueError; report their text without
    # Pydantic's "Value error, " prefix.
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error["msg"]


def field_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Collapse a Pydantic ``ValidationError`` into a per-field message map."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or NON_FIELD_ERRORS
        errors.setdefault(field, []).append(_message(error))
    return errors


def validation_response(errors: Dict[str, List[str]]) -> Response:
    return Response(
        {"detail": "Validation failed.", "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )
