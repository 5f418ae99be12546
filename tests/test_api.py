"""
API tests for entity and listing endpoints.
Tests status codes, response bodies, error envelopes and middleware headers.
"""

import pytest
import asyncio
import httpx
from unittest.mock import Mock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.utils.dependencies import get_listing_service
from tests.conftest import EntityFactory, ListingFactory, PhotoFactory

ENTITIES_URL = "/api/v1/entities"
LISTINGS_URL = "/api/v1/listings"


class TestHealthEndpoints:
    """Test root and health endpoints."""

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["api_prefix"] == "/api/v1"

    def test_health_reports_counts(self, client: TestClient):
        client.post(ENTITIES_URL, json=EntityFactory.create_entity_data())

        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["storage"] == {"entities": 1, "listings": 0}

    def test_timing_headers(self, client: TestClient):
        response = client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 8
        assert float(response.headers["X-Processing-Time"]) >= 0

    def test_openapi_document(self, client: TestClient):
        response = client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert f"{LISTINGS_URL}/price-range" in paths
        assert "409" in paths[ENTITIES_URL]["post"]["responses"]

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/v1/unknown")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HTTP_404"


class TestEntityEndpoints:
    """Test /entities endpoints."""

    def test_create_entity(self, client: TestClient):
        response = client.post(ENTITIES_URL, json={"name": "Jane Doe", "email": "jane@example.com"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Jane Doe"
        assert data["email"] == "jane@example.com"
        assert data["created_at"] == data["updated_at"]

    def test_create_entity_duplicate_email(self, client: TestClient):
        client.post(ENTITIES_URL, json={"name": "Jane", "email": "jane@example.com"})
        response = client.post(ENTITIES_URL, json={"name": "Other", "email": "jane@example.com"})

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "CONFLICT"
        assert error["request_id"] == response.headers["X-Request-ID"]

    def test_create_entity_empty_name(self, client: TestClient):
        response = client.post(ENTITIES_URL, json={"name": "", "email": "jane@example.com"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"] == [{"field": "name", "message": "name is required"}]

    def test_create_entity_missing_field(self, client: TestClient):
        response = client.post(ENTITIES_URL, json={"name": "Jane"})

        assert response.status_code == 422
        assert response.json()["error"]["details"][0]["field"] == "body -> email"

    def test_get_entity(self, client: TestClient):
        created = client.post(ENTITIES_URL, json=EntityFactory.create_entity_data()).json()

        response = client.get(f"{ENTITIES_URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_entity_not_found(self, client: TestClient):
        response = client.get(f"{ENTITIES_URL}/99")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Entity not found with ID: 99"

    def test_get_entity_invalid_id(self, client: TestClient):
        assert client.get(f"{ENTITIES_URL}/abc").status_code == 422

    def test_list_entities(self, client: TestClient):
        for i in range(3):
            client.post(ENTITIES_URL, json=EntityFactory.create_entity_data(email=f"user{i}@example.com"))

        response = client.get(ENTITIES_URL)
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [entity["id"] for entity in data["entities"]] == [1, 2, 3]

    def test_update_entity(self, client: TestClient):
        created = client.post(ENTITIES_URL, json={"name": "Jane", "email": "jane@example.com"}).json()

        response = client.put(
            f"{ENTITIES_URL}/{created['id']}",
            json={"name": "Jane Smith", "email": "jane.smith@example.com"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Jane Smith"
        assert data["created_at"] == created["created_at"]

    def test_update_entity_not_found(self, client: TestClient):
        response = client.put(f"{ENTITIES_URL}/5", json={"name": "Ghost", "email": "ghost@example.com"})
        assert response.status_code == 404

    def test_update_entity_to_taken_email(self, client: TestClient):
        client.post(ENTITIES_URL, json={"name": "Jane", "email": "jane@example.com"})
        other = client.post(ENTITIES_URL, json={"name": "John", "email": "john@example.com"}).json()

        response = client.put(f"{ENTITIES_URL}/{other['id']}", json={"name": "John", "email": "jane@example.com"})
        assert response.status_code == 409

    def test_delete_entity(self, client: TestClient):
        created = client.post(ENTITIES_URL, json=EntityFactory.create_entity_data()).json()

        response = client.delete(f"{ENTITIES_URL}/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        assert client.get(f"{ENTITIES_URL}/{created['id']}").status_code == 404
        assert client.delete(f"{ENTITIES_URL}/{created['id']}").status_code == 404


class TestListingEndpoints:
    """Test /listings endpoints."""

    def test_create_listing(self, client: TestClient):
        response = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data(
            price_in_cents=12500000, rental_income_in_cents=110000
        ))

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["address"]["region"] == "london"
        assert data["gross_yield"] == pytest.approx(0.1056)
        assert data["made_visible_at"] is not None
        assert data["photos"][0]["thumbnail_url"].endswith("_thumbnail")

    def test_create_listing_missing_required_fields(self, client: TestClient):
        response = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data(
            region=None, property_type=None, price_in_cents=0
        ))

        assert response.status_code == 422
        fields = {detail["field"] for detail in response.json()["error"]["details"]}
        assert fields == {"address.region", "property_type", "price_in_cents"}
        assert client.get(LISTINGS_URL).json()["total"] == 0

    def test_create_listing_unknown_region(self, client: TestClient):
        data = ListingFactory.create_listing_data()
        data["address"]["region"] = "atlantis"

        response = client.post(LISTINGS_URL, json=data)
        assert response.status_code == 422

    def test_get_listing(self, client: TestClient):
        created = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data()).json()

        response = client.get(f"{LISTINGS_URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_listing_not_found(self, client: TestClient):
        response = client.get(f"{LISTINGS_URL}/12")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_update_listing_keeps_visibility(self, client: TestClient):
        created = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data(
            made_visible_at="2023-02-01T16:42:09Z"
        )).json()

        response = client.put(
            f"{LISTINGS_URL}/{created['id']}",
            json=ListingFactory.create_listing_data(bedrooms=4, photos=[
                PhotoFactory.create_photo_data(), PhotoFactory.create_photo_data(mime_type="image/png")
            ])
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bedrooms"] == 4
        assert len(data["photos"]) == 2
        assert data["made_visible_at"] == created["made_visible_at"]

    def test_update_listing_invalid_price(self, client: TestClient):
        created = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data()).json()

        response = client.put(f"{LISTINGS_URL}/{created['id']}", json=ListingFactory.create_listing_data(price_in_cents=-1))
        assert response.status_code == 422
        assert client.get(f"{LISTINGS_URL}/{created['id']}").json()["price_in_cents"] == created["price_in_cents"]

    def test_delete_listing(self, client: TestClient):
        created = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data()).json()

        assert client.delete(f"{LISTINGS_URL}/{created['id']}").status_code == 204
        assert client.get(f"{LISTINGS_URL}/{created['id']}").status_code == 404

        recreated = client.post(LISTINGS_URL, json=ListingFactory.create_listing_data()).json()
        assert recreated["id"] == created["id"] + 1


class TestListingQueries:
    """Test listing filters against the sample data."""

    def test_list_all_sample_listings(self, seeded_client: TestClient):
        data = seeded_client.get(LISTINGS_URL).json()

        assert data["total"] == 8
        assert [listing["id"] for listing in data["listings"]] == list(range(1, 9))

    def test_filter_by_region(self, seeded_client: TestClient):
        data = seeded_client.get(LISTINGS_URL, params={"region": "london"}).json()

        assert data["total"] == 3
        assert all(listing["address"]["region"] == "london" for listing in data["listings"])

    def test_filter_by_region_and_type(self, seeded_client: TestClient):
        data = seeded_client.get(LISTINGS_URL, params={"region": "london", "property_type": "apartment"}).json()
        assert {listing["address"]["city"] for listing in data["listings"]} == {"London", "Wallington"}

    def test_filter_by_unknown_region(self, seeded_client: TestClient):
        assert seeded_client.get(LISTINGS_URL, params={"region": "atlantis"}).status_code == 422

    def test_featured(self, seeded_client: TestClient):
        data = seeded_client.get(f"{LISTINGS_URL}/featured").json()

        assert data["total"] == 4
        assert all(listing["is_featured"] for listing in data["listings"])

    def test_search_by_city(self, seeded_client: TestClient):
        data = seeded_client.get(f"{LISTINGS_URL}/search", params={"city": "lond"}).json()

        assert data["total"] == 2
        assert {listing["address"]["shortened_postcode"] for listing in data["listings"]} == {"N17", "W14"}

    def test_search_requires_city(self, seeded_client: TestClient):
        assert seeded_client.get(f"{LISTINGS_URL}/search").status_code == 422

    def test_price_range(self, seeded_client: TestClient):
        data = seeded_client.get(
            f"{LISTINGS_URL}/price-range", params={"min_price": 10000000, "max_price": 14400000}
        ).json()

        prices = sorted(listing["price_in_cents"] for listing in data["listings"])
        assert prices == [10000000, 12500000, 13875000, 14400000]

    def test_price_range_inverted(self, seeded_client: TestClient):
        response = seeded_client.get(f"{LISTINGS_URL}/price-range", params={"min_price": 5, "max_price": 1})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_bedroom_range(self, seeded_client: TestClient):
        data = seeded_client.get(f"{LISTINGS_URL}/bedrooms", params={"min_bedrooms": 3, "max_bedrooms": 3}).json()
        assert {listing["address"]["city"] for listing in data["listings"]} == {"Manchester", "London"}

    def test_bathroom_range(self, seeded_client: TestClient):
        data = seeded_client.get(f"{LISTINGS_URL}/bathrooms", params={"min_bathrooms": 2, "max_bathrooms": 5}).json()
        assert data["total"] == 3

    def test_bathroom_range_inverted(self, seeded_client: TestClient):
        response = seeded_client.get(f"{LISTINGS_URL}/bathrooms", params={"min_bathrooms": 3, "max_bathrooms": 1})
        assert response.status_code == 400

    def test_range_requires_both_bounds(self, seeded_client: TestClient):
        assert seeded_client.get(f"{LISTINGS_URL}/bedrooms", params={"min_bedrooms": 1}).status_code == 422


class TestUnexpectedErrors:
    """Test that unexpected failures produce a generic 500 response."""

    def test_unexpected_error(self, app: FastAPI):
        broken_service = Mock()
        broken_service.get_featured_listings.side_effect = RuntimeError("internal details")
        app.dependency_overrides[get_listing_service] = lambda: broken_service

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(f"{LISTINGS_URL}/featured")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_SERVER_ERROR"
        assert "internal details" not in error["message"]


@pytest.mark.concurrency
class TestConcurrentRequests:
    """Test the API under concurrent requests."""

    @pytest.mark.asyncio
    async def test_concurrent_entity_creates(self, app: FastAPI):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            responses = await asyncio.gather(*[
                client.post(ENTITIES_URL, json=EntityFactory.create_entity_data(email=f"user{i}@example.com"))
                for i in range(50)
            ])

            assert all(response.status_code == 201 for response in responses)
            assert sorted(response.json()["id"] for response in responses) == list(range(1, 51))

            listing = await client.get(ENTITIES_URL)
            assert listing.json()["total"] == 50

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_emails(self, app: FastAPI):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            responses = await asyncio.gather(*[
                client.post(ENTITIES_URL, json={"name": f"Racer {i}", "email": "race@example.com"})
                for i in range(20)
            ])

        status_codes = sorted(response.status_code for response in responses)
        assert status_codes == [201] + [409] * 19
