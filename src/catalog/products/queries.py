"""Paged, filtered product reads.

``PageRequest`` captures what the client asked for (zero-based page, page
size, sort orders).  ``ProductQuery`` turns it into one bounded scan of the
record store:

- the page size is clamped to ``max_page_size``; oversized requests are
  served, never rejected;
- exactly one predicate is applied: a non-blank name filter wins over the
  active-only flag, which wins over no filter at all.
"""

from __future__ import annotations

import math
from typing import List, Mapping, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from catalog.products.dtos import ProductOutputDTO
from catalog.products.mappers import to_output
from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_PAGE_SIZE = 100
DEFAULT_SORT = ("id",)

# Public (JSON) property name -> model field.
SORTABLE_FIELDS = {
    "id": "id",
    "name": "name",
    "description": "description",
    "price": "price",
    "stockQuantity": "stock_quantity",
    "active": "active",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
SORT_DIRECTIONS = ("asc", "desc")
# OFFSET is a signed 64-bit integer in every supported backend.
MAX_OFFSET = 2**63 - 1


def _to_int(raw: Optional[str], default: int) -> int:
    try:
        return int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default


def _split_sort(expression: str) -> Tuple[str, str]:
    prop, _, direction = expression.partition(",")
    return prop.strip(), (direction.strip().lower() or "asc")


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class PageRequest(BaseModel):
    """What the client asked for.  ``size`` is clamped later by the query."""

    model_config = ConfigDict(frozen=True)

    # ``size`` comes first so the page validator can see it.
    size: int = DEFAULT_PAGE_SIZE
    page: int = 0
    sort: Tuple[str, ...] = DEFAULT_SORT

    @field_validator("size")
    @classmethod
    def size_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Page size must be at least one.")
        return v

    @field_validator("page")
    @classmethod
    def page_must_be_addressable(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError("Page index must not be negative.")
        size = info.data.get("size", DEFAULT_PAGE_SIZE)
        if v * size > MAX_OFFSET:
            raise ValueError("Page index is too large.")
        return v

    @field_validator("sort")
    @classmethod
    def sort_must_reference_known_fields(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for expression in v:
            prop, direction = _split_sort(expression)
            if prop not in SORTABLE_FIELDS:
                raise ValueError(f"Unknown sort property '{prop}'.")
            if direction not in SORT_DIRECTIONS:
                raise ValueError(f"Unknown sort direction '{direction}'.")
        return v

    @classmethod
    def from_query_params(
        cls, params: Mapping[str, str], default_size: int = DEFAULT_PAGE_SIZE
    ) -> PageRequest:
        """Build a request from ``?page=&size=&sort=`` parameters.

        Lenient on paging: a missing, non-numeric or negative ``page`` means
        the first page, and a missing, non-numeric or non-positive ``size``
        means ``default_size``.  ``sort`` may repeat
        (``sort=price,desc&sort=name``).  An unknown sort property, or a
        page whose offset would overflow the store, raises a Pydantic
        ``ValidationError``.
        """
        page = max(_to_int(params.get("page"), 0), 0)
        size = _to_int(params.get("size"), default_size)
        if size < 1:
            size = default_size
        getlist = getattr(params, "getlist", None)
        raw_sort = getlist("sort") if getlist else [params.get("sort") or ""]
        sort = tuple(s for s in raw_sort if s and s.strip()) or DEFAULT_SORT
        return cls(page=page, size=size, sort=sort)

    def ordering(self) -> List[str]:
        """Django ``order_by`` arguments, with ``id`` as the final tiebreaker."""
        fields: List[str] = []
        for expression in self.sort:
            prop, direction = _split_sort(expression)
            field = SORTABLE_FIELDS[prop]
            fields.append(f"-{field}" if direction == "desc" else field)
        if not any(f.lstrip("-") == "id" for f in fields):
            fields.append("id")
        return fields


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class PageMetadata(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    size: int
    total_elements: int
    total_pages: int
    number: int


class ProductPage(BaseModel):
    """One page of products: ``{"content": [...], "page": {...}}``."""

    model_config = ConfigDict(frozen=True)

    content: List[ProductOutputDTO]
    page: PageMetadata


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------


class ProductQuery:
    """Executes ``findAll`` against an ``IProductRepository``."""

    def __init__(
        self,
        repository: IProductRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        self._repo = repository
        self._max_page_size = max_page_size

    @property
    def max_page_size(self) -> int:
        return self._max_page_size

    def find_all(
        self,
        name: Optional[str],
        only_active: bool,
        page_request: PageRequest,
    ) -> ProductPage:
        size = min(page_request.size, self._max_page_size)
        if size < page_request.size:
            logger.info(
                "product.page_size_clamped",
                requested=page_request.size,
                applied=size,
            )

        if name is not None and name.strip():
            predicate = {"name": name}
        elif only_active:
            predicate = {"only_active": True}
        else:
            predicate = {}

        rows, total = self._repo.scan(
            offset=page_request.page * size,
            limit=size,
            ordering=page_request.ordering(),
            **predicate,
        )
        return ProductPage(
            content=[to_output(row) for row in rows],
            page=PageMetadata(
                size=size,
                total_elements=total,
                total_pages=math.ceil(total / size),
                number=page_request.page,
            ),
        )
