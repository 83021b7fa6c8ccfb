"""Unit tests for the Product model.

Covers:
- Store-assigned identity (UUIDv7) and store-side timestamps.
- Field defaults.
- Identity equality: defined only for persisted records.
- Type-level hash: set/dict membership survives the insert.
- Database check constraints (price > 0, stock >= 0).
- __str__ representation.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from django.db import transaction

from catalog.core.exceptions import StoreFailure
from catalog.products.models import Product
from catalog.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.unit


def _unsaved(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock_quantity": 5,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestProductCreation:
    def test_unsaved_product_has_no_identity(self):
        product = _unsaved()
        assert product.pk is None
        assert product.is_persisted is False

    def test_id_is_uuid7_after_insert(self, make_product):
        product = make_product()
        assert isinstance(product.id, uuid.UUID)
        assert product.id.version == 7
        assert product.is_persisted is True

    def test_timestamps_set_by_store_and_equal(self, make_product):
        product = make_product()
        assert product.created_at is not None
        assert product.created_at == product.updated_at

    def test_defaults(self):
        product = Product(name="Defaults", price=Decimal("1.00"))
        assert product.active is True
        assert product.stock_quantity == 0
        assert product.description is None

    def test_description_is_optional(self, make_product):
        product = make_product(description=None)
        product.refresh_from_db()
        assert product.description is None


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------


class TestProductEquality:
    def test_unsaved_products_with_same_values_are_not_equal(self):
        assert _unsaved() != _unsaved()

    def test_instance_equals_itself(self):
        product = _unsaved()
        assert product == product

    def test_persisted_copies_are_equal(self, make_product):
        product = make_product()
        copy = Product.objects.get(pk=product.pk)
        assert copy is not product
        assert copy == product

    def test_different_identities_are_not_equal(self, make_product):
        assert make_product() != make_product()

    def test_unsaved_never_equals_persisted(self, make_product):
        persisted = make_product()
        assert _unsaved() != persisted
        assert persisted != _unsaved()

    def test_not_equal_to_other_types(self, make_product):
        product = make_product()
        assert product != str(product.id)
        assert product != product.id


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------


class TestProductHash:
    def test_hash_does_not_change_on_insert(self):
        product = _unsaved()
        before = hash(product)
        ProductDjangoRepository().insert(product)
        assert hash(product) == before

    def test_hash_is_shared_by_all_products(self, make_product):
        assert hash(_unsaved()) == hash(make_product())

    def test_set_membership_survives_insert(self):
        product = _unsaved()
        bucket = {product}
        ProductDjangoRepository().insert(product)
        assert product in bucket

    def test_persisted_copy_found_in_set(self, make_product):
        product = make_product()
        bucket = {product}
        assert Product.objects.get(pk=product.pk) in bucket

    def test_unsaved_lookalike_not_found_in_set(self):
        bucket = {_unsaved()}
        assert _unsaved() not in bucket


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


class TestProductConstraints:
    def test_price_must_be_positive_at_db_level(self):
        repo = ProductDjangoRepository()
        with pytest.raises(StoreFailure):
            with transaction.atomic():
                repo.insert(_unsaved(price=Decimal("0.00")))

    def test_stock_cannot_be_negative_at_db_level(self):
        repo = ProductDjangoRepository()
        with pytest.raises(StoreFailure):
            with transaction.atomic():
                repo.insert(_unsaved(stock_quantity=-1))


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


class TestProductStr:
    def test_str_unsaved(self):
        assert str(_unsaved(name="Gadget")) == "Gadget (unsaved)"

    def test_str_persisted(self, make_product):
        product = make_product(name="Gadget")
        assert str(product) == f"Gadget ({product.id})"
