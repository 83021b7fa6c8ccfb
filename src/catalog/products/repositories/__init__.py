"""Product repositories package."""

from catalog.products.repositories.django_repository import ProductDjangoRepository
from catalog.products.repositories.interfaces import IProductRepository

__all__ = ["IProductRepository", "ProductDjangoRepository"]
