from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from catalog.products.models import Product
from catalog.products.repositories.django_repository import ProductDjangoRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory inserting a Product through the repository (the only way to get an id)."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "description": "A fine widget",
            "price": Decimal("19.99"),
            "stock_quantity": 10,
            "active": True,
        }
        defaults.update(overrides)
        return ProductDjangoRepository().insert(Product(**defaults))

    return _make
