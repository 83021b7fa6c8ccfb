"""Integration tests for paged listing."""

from __future__ import annotations

from decimal import Decimal

import pytest

pytestmark = pytest.mark.integration

URL = "/api/products"


@pytest.fixture()
def product_batch(make_product):
    """Create a batch of products for pagination tests."""
    return [
        make_product(name=f"Product {idx:03d}", price=Decimal("9.99"))
        for idx in range(1, 121)
    ]


class TestPagination:
    def test_page_shape(self, api_client, make_product):
        make_product()
        response = api_client.get(URL)

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"content", "page"}
        assert set(data["page"]) == {"size", "totalElements", "totalPages", "number"}

    def test_default_page_size(self, api_client, product_batch):
        response = api_client.get(URL)
        data = response.json()

        assert len(data["content"]) == 20
        assert data["page"] == {
            "size": 20,
            "totalElements": 120,
            "totalPages": 6,
            "number": 0,
        }

    def test_custom_page_size(self, api_client, product_batch):
        response = api_client.get(URL, {"size": 50})
        data = response.json()

        assert len(data["content"]) == 50
        assert data["page"]["totalPages"] == 3

    def test_oversized_request_is_clamped(self, api_client, product_batch):
        response = api_client.get(URL, {"size": 500})

        assert response.status_code == 200
        data = response.json()
        assert len(data["content"]) == 100
        assert data["page"]["size"] == 100
        assert data["page"]["totalPages"] == 2

    def test_pages_are_zero_based(self, api_client, product_batch):
        first = api_client.get(URL, {"size": 10, "page": 0, "sort": "name"}).json()
        second = api_client.get(URL, {"size": 10, "page": 1, "sort": "name"}).json()

        assert first["content"][0]["name"] == "Product 001"
        assert second["content"][0]["name"] == "Product 011"
        assert second["page"]["number"] == 1

    def test_last_partial_page(self, api_client, product_batch):
        data = api_client.get(URL, {"size": 50, "page": 2}).json()
        assert len(data["content"]) == 20

    def test_page_beyond_last_is_empty(self, api_client, product_batch):
        response = api_client.get(URL, {"page": 99})

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == []
        assert data["page"]["totalElements"] == 120
        assert data["page"]["number"] == 99

    def test_empty_store(self, api_client):
        data = api_client.get(URL).json()
        assert data["content"] == []
        assert data["page"]["totalElements"] == 0
        assert data["page"]["totalPages"] == 0

    @pytest.mark.parametrize("params", [{"page": "abc"}, {"page": -3}])
    def test_bad_page_falls_back_to_first(self, api_client, product_batch, params):
        response = api_client.get(URL, params)

        assert response.status_code == 200
        assert response.json()["page"]["number"] == 0

    @pytest.mark.parametrize("params", [{"size": "abc"}, {"size": 0}, {"size": -5}])
    def test_bad_size_falls_back_to_default(self, api_client, product_batch, params):
        response = api_client.get(URL, params)

        assert response.status_code == 200
        assert response.json()["page"]["size"] == 20

    def test_default_size_follows_setting(self, api_client, product_batch, settings):
        settings.DEFAULT_PAGE_SIZE = 7
        data = api_client.get(URL).json()
        assert data["page"]["size"] == 7
        assert len(data["content"]) == 7

    def test_pages_do_not_overlap(self, api_client, product_batch):
        seen = set()
        for page in range(3):
            data = api_client.get(URL, {"size": 40, "page": page}).json()
            ids = {item["id"] for item in data["content"]}
            assert not ids & seen
            seen |= ids
        assert len(seen) == 120

    @pytest.mark.parametrize("page", ["100000000000000000000", "461168601842738791"])
    def test_unaddressable_page_returns_400(self, api_client, make_product, page):
        make_product()
        response = api_client.get(URL, {"page": page})

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Validation failed."
        assert list(data["errors"]) == ["page"]
