"""Conversions between Product DTOs and the persisted record.

Pure functions with no I/O.  Input was already validated when the DTO was
built, so nothing here can fail.

Identity equality and hashing of the record itself live on
``catalog.core.models.BaseModel``.
"""

from __future__ import annotations

from catalog.products.dtos import CreateProductDTO, ProductOutputDTO
from catalog.products.models import Product


def to_product(dto: CreateProductDTO) -> Product:
    """Build a new, unsaved ``Product``.

    Identity and timestamps stay unset; the repository's ``insert`` fills
    them.  An omitted ``active`` flag becomes ``True``.
    """
    return Product(
        name=dto.name,
        description=dto.description,
        price=dto.price,
        stock_quantity=dto.stock_quantity,
        active=dto.active if dto.active is not None else True,
    )


def to_output(product: Product) -> ProductOutputDTO:
    """Project a persisted ``Product`` onto the read-only output shape."""
    return ProductOutputDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock_quantity=product.stock_quantity,
        active=product.active,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
