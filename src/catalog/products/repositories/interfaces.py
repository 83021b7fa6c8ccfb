"""Product repository interface.

Extends ``IRepository[Product]`` with the row-locking read used for
read-modify-write and the paged scan used by the query layer.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple
from uuid import UUID

from catalog.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from catalog.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product record store."""

    @abstractmethod
    def get_for_update(self, id: UUID | str) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if the product
        does not exist.
        """

    @abstractmethod
    def scan(
        self,
        *,
        name: Optional[str] = None,
        only_active: bool = False,
        offset: int = 0,
        limit: int,
        ordering: Sequence[str] = ("id",),
    ) -> Tuple[List["Product"], int]:
        """Return one slice of matching products and the total match count.

        ``name`` is a case-insensitive substring predicate; ``only_active``
        restricts to active rows.  Both may be combined at this level.
        """
