"""Integration tests for Customer API endpoints.

Covers:
- Aggregate CRUD via /api/v1/customers/.
- Paged, unpaged and search listings.
- Domain exception mapping (400, 404, 409).
- Authentication enforcement (401 without token).
"""

from __future__ import annotations

import uuid

import pytest
from django.contrib.auth.hashers import check_password

from modules.customers.models import Address, Customer, Phone

pytestmark = pytest.mark.integration

URL = "/api/v1/customers/"


def _payload(**overrides) -> dict:
    data = {
        "name": "Isabel Martins",
        "email": "isabel@gmail.com",
        "password": "sushi123",
        "phone": {"number": "11987654321"},
        "addresses": [
            {"number": "10", "street": "Rua Augusta", "neighborhood": "Consolação"}
        ],
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_customer(auth_client) -> dict:
    """A customer created through the API; returns the response body."""
    response = auth_client.post(URL, _payload(), format="json")
    assert response.status_code == 201
    return response.json()


# ===========================================================================
# Authentication
# ===========================================================================


class TestCustomerAPIAuth:
    def test_unauthenticated_returns_401(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 401

    def test_unauthenticated_create_returns_401(self, api_client):
        response = api_client.post(URL, _payload(), format="json")
        assert response.status_code == 401
        assert not Customer.objects.exists()


# ===========================================================================
# Create
# ===========================================================================


class TestCustomerCreate:
    def test_create_returns_201_with_aggregate(self, auth_client):
        response = auth_client.post(URL, _payload(), format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Isabel Martins"
        assert body["email"] == "isabel@gmail.com"
        assert body["phone"]["number"] == "11987654321"
        assert body["addresses"][0]["street"] == "Rua Augusta"
        assert "password" not in body

    def test_password_stored_hashed(self, auth_client):
        auth_client.post(URL, _payload(), format="json")

        stored = Customer.objects.get(email="isabel@gmail.com").password
        assert stored != "sushi123"
        assert check_password("sushi123", stored)

    def test_duplicate_email_returns_409(self, auth_client, sample_customer):
        response = auth_client.post(URL, _payload(name="Other"), format="json")

        assert response.status_code == 409
        assert Customer.objects.count() == 1

    def test_invalid_email_returns_400(self, auth_client):
        response = auth_client.post(URL, _payload(email="nope"), format="json")
        assert response.status_code == 400

    def test_missing_phone_returns_400(self, auth_client):
        data = _payload()
        del data["phone"]
        response = auth_client.post(URL, data, format="json")
        assert response.status_code == 400
        assert not Customer.objects.exists()

    def test_non_object_body_returns_400(self, auth_client):
        response = auth_client.post(URL, [1, 2], format="json")
        assert response.status_code == 400


# ===========================================================================
# Queries
# ===========================================================================


class TestCustomerQueries:
    def test_retrieve(self, auth_client, sample_customer):
        response = auth_client.get(f"{URL}{sample_customer['id']}/")
        assert response.status_code == 200
        assert response.json()["email"] == "isabel@gmail.com"

    def test_retrieve_not_found(self, auth_client):
        response = auth_client.get(f"{URL}{uuid.uuid4()}/")
        assert response.status_code == 404

    def test_retrieve_malformed_id_is_404(self, auth_client):
        response = auth_client.get(f"{URL}not-a-uuid/")
        assert response.status_code == 404

    def test_paged_list(self, auth_client):
        for i in range(3):
            auth_client.post(
                URL, _payload(email=f"c{i}@example.com"), format="json"
            )

        response = auth_client.get(URL, {"page": 2, "page_size": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 3
        assert body["page"] == 2
        assert body["num_pages"] == 2
        assert len(body["results"]) == 1

    def test_page_out_of_range_returns_404(self, auth_client, sample_customer):
        response = auth_client.get(URL, {"page": 5})
        assert response.status_code == 404

    def test_list_all(self, auth_client):
        for i in range(3):
            auth_client.post(
                URL, _payload(email=f"c{i}@example.com"), format="json"
            )
        response = auth_client.get(f"{URL}all/")
        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_find_by_name(self, auth_client, sample_customer):
        auth_client.post(
            URL, _payload(name="Bruno Lima", email="bruno@example.com"), format="json"
        )
        response = auth_client.get(f"{URL}find/", {"name": "isa"})

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Isabel Martins"]

    def test_find_by_name_no_match_returns_404(self, auth_client, sample_customer):
        response = auth_client.get(f"{URL}find/", {"name": "zzz"})
        assert response.status_code == 404

    def test_find_without_name_returns_400(self, auth_client):
        assert auth_client.get(f"{URL}find/").status_code == 400

    def test_by_email(self, auth_client, sample_customer):
        response = auth_client.get(f"{URL}by-email/", {"email": "isabel@gmail.com"})
        assert response.status_code == 200
        assert response.json()["id"] == sample_customer["id"]

    def test_by_email_not_found(self, auth_client):
        response = auth_client.get(f"{URL}by-email/", {"email": "x@example.com"})
        assert response.status_code == 404


# ===========================================================================
# Replace
# ===========================================================================


class TestCustomerReplace:
    def test_put_returns_204_and_replaces_aggregate(self, auth_client, sample_customer):
        customer_id = sample_customer["id"]
        phone_id = sample_customer["phone"]["id"]

        response = auth_client.put(
            f"{URL}{customer_id}/",
            _payload(
                name="Isabel M. Souza",
                phone={"number": "1133334444"},
                addresses=[
                    {"number": "1", "street": "Rua A", "neighborhood": "Centro"},
                    {"number": "2", "street": "Rua B", "neighborhood": "Centro"},
                ],
            ),
            format="json",
        )

        assert response.status_code == 204
        assert not response.content
        body = auth_client.get(f"{URL}{customer_id}/").json()
        assert body["name"] == "Isabel M. Souza"
        assert body["phone"] == {"id": phone_id, "number": "1133334444"}
        assert sorted(a["number"] for a in body["addresses"]) == ["1", "2"]
        assert Address.objects.filter(customer_id=customer_id).count() == 2

    def test_put_without_addresses_clears_them(self, auth_client, sample_customer):
        data = _payload()
        del data["addresses"]

        response = auth_client.put(f"{URL}{sample_customer['id']}/", data, format="json")

        assert response.status_code == 204
        assert not Address.objects.exists()

    def test_put_unknown_returns_404(self, auth_client):
        response = auth_client.put(f"{URL}{uuid.uuid4()}/", _payload(), format="json")
        assert response.status_code == 404

    def test_put_malformed_id_returns_400(self, auth_client):
        response = auth_client.put(f"{URL}not-a-uuid/", _payload(), format="json")
        assert response.status_code == 400

    def test_put_taken_email_returns_409(self, auth_client, sample_customer):
        other = auth_client.post(
            URL, _payload(email="other@example.com"), format="json"
        ).json()

        response = auth_client.put(
            f"{URL}{other['id']}/", _payload(email="isabel@gmail.com"), format="json"
        )

        assert response.status_code == 409
        assert Customer.objects.get(id=other["id"]).email == "other@example.com"

    def test_put_invalid_body_returns_400(self, auth_client, sample_customer):
        response = auth_client.put(
            f"{URL}{sample_customer['id']}/", _payload(name=""), format="json"
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("body", [[1, 2], "isabel", 42])
    def test_put_non_object_body_returns_400(self, auth_client, sample_customer, body):
        response = auth_client.put(
            f"{URL}{sample_customer['id']}/", body, format="json"
        )

        assert response.status_code == 400
        assert Customer.objects.get(id=sample_customer["id"]).name == "Isabel Martins"


# ===========================================================================
# Delete
# ===========================================================================


class TestCustomerDelete:
    def test_delete_removes_aggregate(self, auth_client, sample_customer):
        response = auth_client.delete(f"{URL}{sample_customer['id']}/")

        assert response.status_code == 204
        assert not Customer.objects.exists()
        assert not Phone.objects.exists()
        assert not Address.objects.exists()

    def test_delete_unknown_returns_404(self, auth_client):
        response = auth_client.delete(f"{URL}{uuid.uuid4()}/")
        assert response.status_code == 404


# ===========================================================================
# Walkthrough
# ===========================================================================


class TestCustomerWalkthrough:
    def test_create_then_duplicate_conflicts(self, auth_client):
        payload = {
            "name": "Isabel",
            "email": "isabel@gmail.com",
            "password": "pw",
            "phone": {"number": "123"},
            "addresses": [{"number": "10", "street": "Main", "neighborhood": "Centro"}],
        }

        first = auth_client.post(URL, payload, format="json")
        second = auth_client.post(URL, payload, format="json")

        assert first.status_code == 201
        body = first.json()
        assert [a["number"] for a in body["addresses"]] == ["10"]
        assert body["phone"]["number"] == "123"
        assert second.status_code == 409
        assert Customer.objects.count() == 1
        assert Phone.objects.count() == 1
        assert Address.objects.count() == 1
