"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer (Views) and the Service layer; constructing
one *is* the structural validation step.  DTOs are immutable
(``frozen=True``) and speak camelCase on the wire.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for product replacement (``PUT``).
- ``ProductOutputDTO``: read-only projection of a persisted product.

The three classes deliberately share no base class: ``active`` means
"default to true" on create and "leave unchanged" on update, and each
operation's rules are free to evolve on their own.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from pydantic.alias_generators import to_camel

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
PRICE_INTEGER_DIGITS = 8
PRICE_FRACTION_DIGITS = 2


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def _check_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name is required.")
    if not NAME_MIN_LENGTH <= len(v) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
        )
    return v


def _check_description(v: str | None) -> str | None:
    if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters."
        )
    return v


def _coerce_price(v: object) -> object:
    if isinstance(v, bool):
        raise ValueError("Price must be a number.")
    # JSON numbers arrive as floats; go through ``str`` so 9.99 stays 9.99.
    if isinstance(v, float):
        return Decimal(str(v))
    return v


def _check_price(v: Decimal) -> Decimal:
    if v <= 0:
        raise ValueError("Price must be greater than zero.")
    _, digits, exponent = v.as_tuple()
    fraction = -exponent if exponent < 0 else 0
    integer = max(len(digits) + (exponent if exponent > 0 else 0) - fraction, 0)
    if integer > PRICE_INTEGER_DIGITS or fraction > PRICE_FRACTION_DIGITS:
        raise ValueError(
            f"Price must have at most {PRICE_INTEGER_DIGITS} integer digits "
            f"and {PRICE_FRACTION_DIGITS} decimal places."
        )
    return v


def _check_stock(v: int) -> int:
    if v < 0:
        raise ValueError("Stock quantity must be greater than or equal to zero.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is not blank and 3-255 characters long.
    - ``description`` is at most 1000 characters.
    - ``price`` is greater than zero with at most 8 integer and 2 decimal digits.
    - ``stock_quantity`` is a non-negative JSON integer (``true`` or ``"5"``
      are rejected, not coerced).

    ``active`` is optional; ``None`` means the service applies ``True``.
    Identity and timestamps are not accepted (unknown keys are ignored).
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str
    description: str | None = None
    price: Decimal
    stock_quantity: StrictInt
    active: bool | None = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("description")
    @classmethod
    def description_must_fit(cls, v: str | None) -> str | None:
        return _check_description(v)

    @field_validator("price", mode="before")
    @classmethod
    def price_from_json_number(cls, v: object) -> object:
        return _coerce_price(v)

    @field_validator("price")
    @classmethod
    def price_must_be_valid(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        return _check_stock(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    ``name``, ``description``, ``price`` and ``stock_quantity`` replace the
    stored values unconditionally (``description`` may be cleared with
    ``null``).  ``active`` is the single partial field: when absent or
    ``null`` the stored flag is left as it is.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str
    description: str | None = None
    price: Decimal
    stock_quantity: StrictInt
    active: bool | None = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("description")
    @classmethod
    def description_must_fit(cls, v: str | None) -> str | None:
        return _check_description(v)

    @field_validator("price", mode="before")
    @classmethod
    def price_from_json_number(cls, v: object) -> object:
        return _coerce_price(v)

    @field_validator("price")
    @classmethod
    def price_must_be_valid(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        return _check_stock(v)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: UUID
    name: str
    description: str | None
    price: Decimal
    stock_quantity: int
    active: bool
    created_at: datetime
    updated_at: datetime
