"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products/.
- Category linking and unknown-category rejection.
- Filtering by name, price range and category.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.categories.models import Category
from modules.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/v1/products/"


@pytest.fixture()
def uramaki() -> Category:
    return Category.objects.create(name="Uramaki")


@pytest.fixture()
def product(uramaki) -> Product:
    product = Product.objects.create(
        name="California Roll",
        price=Decimal("32.90"),
        description="Crab, cucumber and avocado",
    )
    product.categories.add(uramaki)
    return product


class TestProductAPIAuth:
    def test_unauthenticated_returns_401(self, api_client):
        assert api_client.get(URL).status_code == 401


class TestProductCreate:
    def test_create_with_categories(self, auth_client, uramaki):
        response = auth_client.post(
            URL,
            {
                "name": "Philadelphia Roll",
                "price": "36.90",
                "image_url": "https://cdn.example.com/phila.png",
                "category_ids": [uramaki.id],
            },
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Philadelphia Roll"
        assert body["price"] == "36.90"
        assert [c["name"] for c in body["categories"]] == ["Uramaki"]

    def test_unknown_category_returns_404(self, auth_client, uramaki):
        response = auth_client.post(
            URL,
            {"name": "Ghost Roll", "price": "10.00", "category_ids": [uramaki.id, 999]},
            format="json",
        )

        assert response.status_code == 404
        assert "999" in response.json()["detail"]
        assert not Product.objects.exists()

    @pytest.mark.parametrize("price", ["0", "-5.00", "abc"])
    def test_invalid_price_returns_400(self, auth_client, price):
        response = auth_client.post(
            URL, {"name": "Bad Roll", "price": price}, format="json"
        )
        assert response.status_code == 400

    def test_missing_name_returns_400(self, auth_client):
        response = auth_client.post(URL, {"price": "10.00"}, format="json")
        assert response.status_code == 400


class TestProductQueries:
    def test_list(self, auth_client, product):
        response = auth_client.get(URL)
        assert response.status_code == 200
        assert response.json()["count"] == 1

    def test_filter_by_price_range(self, auth_client, product):
        Product.objects.create(name="Gyoza", price=Decimal("27.90"))
        response = auth_client.get(URL, {"max_price": "30"})
        assert [p["name"] for p in response.json()["results"]] == ["Gyoza"]

    def test_filter_by_category(self, auth_client, product, uramaki):
        Product.objects.create(name="Gyoza", price=Decimal("27.90"))
        response = auth_client.get(URL, {"category": uramaki.id})
        assert [p["name"] for p in response.json()["results"]] == ["California Roll"]

    def test_retrieve(self, auth_client, product):
        response = auth_client.get(f"{URL}{product.id}/")
        assert response.status_code == 200
        assert response.json()["description"] == "Crab, cucumber and avocado"

    def test_retrieve_not_found(self, auth_client):
        assert auth_client.get(f"{URL}999999/").status_code == 404

    def test_find_by_name(self, auth_client, product):
        response = auth_client.get(f"{URL}find/", {"name": "califor"})
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_find_no_match_returns_404(self, auth_client, product):
        assert auth_client.get(f"{URL}find/", {"name": "pizza"}).status_code == 404


class TestProductReplace:
    def test_put_overwrites_fields_and_categories(self, auth_client, product):
        hot = Category.objects.create(name="Hot")

        response = auth_client.put(
            f"{URL}{product.id}/",
            {"name": "Hot California", "price": "35.00", "category_ids": [hot.id]},
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Hot California"
        assert body["description"] == ""
        assert [c["name"] for c in body["categories"]] == ["Hot"]

    def test_put_unknown_returns_404(self, auth_client):
        response = auth_client.put(
            f"{URL}999999/", {"name": "X", "price": "1.00"}, format="json"
        )
        assert response.status_code == 404

    @pytest.mark.parametrize("body", [["Gyoza", "27.90"], 27.9])
    def test_non_object_body_returns_400(self, auth_client, product, body):
        assert auth_client.post(URL, body, format="json").status_code == 400
        response = auth_client.put(f"{URL}{product.id}/", body, format="json")
        assert response.status_code == 400
        assert Product.objects.get(id=product.id).name == "California Roll"


class TestProductDelete:
    def test_delete_keeps_categories(self, auth_client, product, uramaki):
        response = auth_client.delete(f"{URL}{product.id}/")

        assert response.status_code == 204
        assert not Product.objects.exists()
        assert Category.objects.filter(id=uramaki.id).exists()

    def test_delete_unknown_returns_404(self, auth_client):
        assert auth_client.delete(f"{URL}999999/").status_code == 404
