"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.

- Lookups follow the Null Object pattern: ``get_by_id`` returns ``None``
  for missing or malformed IDs; the Service Layer decides what that means.
- Identity (UUIDv7) is assigned here, at insert time.  Timestamps are never
  written by Python: the insert relies on the columns' ``db_default`` and the
  update sets ``updated_at = Now()``.
- Every ORM call is wrapped in ``translate_store_errors`` so database
  failures surface as ``StoreFailure``.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple
from uuid import UUID

import structlog
import uuid6
from django.core.exceptions import ValidationError
from django.db.models.functions import Now

from catalog.core.exceptions import translate_store_errors
from catalog.products.exceptions import ProductNotFound
from catalog.products.filters import ProductFilter
from catalog.products.models import Product
from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: UUID | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        with translate_store_errors("get_by_id"):
            try:
                return Product.objects.filter(id=id).first()
            except (ValueError, ValidationError):
                return None

    def get_for_update(self, id: UUID | str) -> Optional[Product]:
        with translate_store_errors("get_for_update"):
            try:
                return Product.objects.select_for_update().filter(id=id).first()
            except (ValueError, ValidationError):
                return None

    def insert(self, entity: Product) -> Product:
        """Persist a new product.

        Assigns a UUIDv7 identity and lets the database stamp both
        timestamps, then re-reads the stored row so the entity reflects
        exactly what the store holds.
        """
        if entity.pk is not None:
            raise ValueError("Product already has an identity; use update().")

        with translate_store_errors("insert"):
            entity.id = uuid6.uuid7()
            entity.save(force_insert=True)
            entity.refresh_from_db()

        logger.info("product.inserted", product_id=str(entity.id))
        return entity

    def update(self, entity: Product) -> Product:
        """Write every mutable column of an existing product.

        ``created_at`` is never part of the statement; ``updated_at`` is set
        to the database clock.

        Raises:
            ProductNotFound: if the entity has no identity or its row is gone.
        """
        if entity.pk is None:
            raise ProductNotFound("Product has no identity; insert it first.")

        with translate_store_errors("update"):
            matched = Product.objects.filter(pk=entity.pk).update(
                name=entity.name,
                description=entity.description,
                price=entity.price,
                stock_quantity=entity.stock_quantity,
                active=entity.active,
                updated_at=Now(),
            )
            if not matched:
                raise ProductNotFound(f"Product {entity.pk} not found.")
            entity.refresh_from_db()

        logger.info("product.saved", product_id=str(entity.id))
        return entity

    def delete(self, id: UUID | str) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product exists
        with the given ID.
        """
        with translate_store_errors("delete"):
            try:
                deleted, _ = Product.objects.filter(id=id).delete()
            except (ValueError, ValidationError):
                return False
        if deleted:
            logger.info("product.hard_deleted", product_id=str(id))
        return bool(deleted)

    def scan(
        self,
        *,
        name: Optional[str] = None,
        only_active: bool = False,
        offset: int = 0,
        limit: int,
        ordering: Sequence[str] = ("id",),
    ) -> Tuple[List[Product], int]:
        data = {}
        if name:
            data["name"] = name
        if only_active:
            data["active"] = True

        with translate_store_errors("scan"):
            queryset = ProductFilter(data, queryset=Product.objects.all()).qs
            total = queryset.count()
            rows = list(queryset.order_by(*ordering)[offset : offset + limit])
        return rows, total
