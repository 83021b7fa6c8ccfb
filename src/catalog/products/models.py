"""Product model.

Rules implemented at the database level:
- Price must be greater than zero (check constraint).
- Stock quantity cannot be negative (check constraint).
- ``name`` and ``active`` are indexed for the list endpoint's filters.

Identity and timestamps come from ``BaseModel`` and are owned by the store.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from catalog.core.models import BaseModel


class Product(BaseModel):
    """Product catalog entry.

    ``active`` is the soft-deactivation flag: a deactivated product keeps its
    row; only ``delete`` removes it.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)  # noqa: DJ001
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock_quantity = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
    )
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="idx_products_name"),
            models.Index(fields=["active"], name="idx_products_active"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock_quantity__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.pk or 'unsaved'})"
