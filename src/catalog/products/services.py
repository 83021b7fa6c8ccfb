"""Product service layer (Use Cases).

Orchestrates the single-record lifecycle of a Product, delegating
persistence to the injected ``IProductRepository`` and paged reads to
``ProductQuery``.

Lifecycle:
- ``create_product``: absent -> active (or inactive if asked explicitly).
- ``update_product``: replaces name/description/price/stock; ``active`` only
  when supplied.
- ``deactivate_product``: active -> inactive, idempotent.
- ``delete_product``: any -> absent (hard delete).

Every mutating use case runs in one transaction and locks the row before
reading it, so two concurrent read-modify-writes on the same product are
serialized by the database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog
from django.conf import settings
from django.db import transaction

from catalog.products.exceptions import ProductNotFound
from catalog.products.mappers import to_output, to_product
from catalog.products.queries import PageRequest, ProductPage, ProductQuery

if TYPE_CHECKING:
    from catalog.products.dtos import (
        CreateProductDTO,
        ProductOutputDTO,
        UpdateProductDTO,
    )
    from catalog.products.models import Product
    from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).  The
    query object defaults to one bound to the same repository and to the
    ``MAX_PAGE_SIZE`` setting.
    """

    def __init__(
        self,
        repository: IProductRepository,
        query: Optional[ProductQuery] = None,
    ) -> None:
        self._repo = repository
        self._query = query or ProductQuery(
            repository, max_page_size=settings.MAX_PAGE_SIZE
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Create a new product; ``active`` defaults to ``True``."""
        product = self._repo.insert(to_product(dto))
        logger.info(
            "product.created",
            product_id=str(product.id),
            name=product.name,
            active=product.active,
        )
        return to_output(product)

    @transaction.atomic
    def update_product(self, id: UUID | str, dto: UpdateProductDTO) -> ProductOutputDTO:
        """Replace a product's fields.

        ``active`` is only overwritten when the caller supplied it.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_for_update(id)
        log = logger.bind(product_id=str(id))

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.stock_quantity = dto.stock_quantity
        if dto.active is not None:
            product.active = dto.active

        product = self._repo.update(product)
        log.info("product.updated", active=product.active)
        return to_output(product)

    @transaction.atomic
    def delete_product(self, id: UUID | str) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_for_update(id)
        self._repo.delete(product.id)
        logger.info("product.deleted", product_id=str(id))

    @transaction.atomic
    def deactivate_product(self, id: UUID | str) -> None:
        """Soft-deactivate a product.  Calling it again is a no-op.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_for_update(id)
        log = logger.bind(product_id=str(id))

        if not product.active:
            log.info("product.already_inactive")
            return

        product.active = False
        self._repo.update(product)
        log.info("product.deactivated")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: UUID | str) -> ProductOutputDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return to_output(product)

    def list_products(
        self,
        name: Optional[str] = None,
        only_active: bool = False,
        page_request: Optional[PageRequest] = None,
    ) -> ProductPage:
        """Return one page of products; an empty result is an empty page."""
        return self._query.find_all(name, only_active, page_request or PageRequest())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_for_update(self, id: UUID | str) -> Product:
        product = self._repo.get_for_update(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
