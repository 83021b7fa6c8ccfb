"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository.
    Inserts and updates are separate operations: the store assigns
    identity only on insert, and an update never creates a row.
    """

    @abstractmethod
    def get_by_id(self, id: UUID | str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Persist a new entity, assigning its identity and timestamps."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Write an existing entity back, refreshing its updated timestamp."""

    @abstractmethod
    def delete(self, id: UUID | str) -> bool:
        """Remove an entity permanently; ``False`` if nothing matched."""
