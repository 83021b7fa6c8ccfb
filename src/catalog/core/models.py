"""Base abstract model for catalog entities.

Provides ``BaseModel``: a UUID primary key assigned by the repository at
insert time plus ``created_at`` / ``updated_at`` stamped by the database
clock.

Design decisions:
- ``id`` has no Python-side default.  A freshly built instance has
  ``pk is None`` until the repository inserts it; the identity is never
  reassigned afterwards.
- Timestamps use ``db_default=Now()`` so every application instance shares
  the database clock.  Updates refresh ``updated_at`` with ``Now()`` as well
  (see the product repository).
- Equality is identity based and only defined once both sides have an
  identity.  The hash is derived from the concrete model class, so an
  instance keeps its bucket in a ``set``/``dict`` across the transition
  from "unsaved" to "persisted".
"""

from __future__ import annotations

from django.db import models
from django.db.models.functions import Now


class BaseModel(models.Model):
    """Abstract base with store-assigned UUID PK and store-side timestamps."""

    id = models.UUIDField(primary_key=True, editable=False)
    created_at = models.DateTimeField(db_default=Now(), editable=False)
    updated_at = models.DateTimeField(db_default=Now(), editable=False)

    class Meta:
        abstract = True

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def is_persisted(self) -> bool:
        return self.pk is not None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, models.Model):
            return NotImplemented
        if self._meta.concrete_model != other._meta.concrete_model:
            return False
        return self.pk is not None and other.pk is not None and self.pk == other.pk

    def __hash__(self) -> int:
        return hash(self._meta.concrete_model)
