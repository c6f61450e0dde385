"""
Storefront API - Product Endpoint Tests
========================================

What:  End-to-end tests for POST /api/products and GET /health.
How:   HTTPX AsyncClient over ASGI against an app whose Database is a
       per-test SQLite file (see conftest.py).

What we test:
    ✅ Valid product → 200, envelope, echoed fields, database id
    ✅ Omitted image → image null
    ✅ Same payload twice → two rows, two ids
    ✅ Missing field → 400 with the fixed message, nothing written
    ✅ Unparseable / mistyped / non-finite price → 400, nothing written
    ✅ Long title and image URL → 200
    ✅ Persistence failure → 500, no product in the body
    ✅ Unexpected error → 500 carrying the request ID
    ✅ Health reports 503 when the database is unreachable
    ✅ X-Request-ID echoed on success and in error bodies
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from storefront.services.product_repository import ProductRepository, get_product_repository
from storefront.services.product_service import (
    REQUIRED_FIELDS_MESSAGE,
    ProductService,
    get_product_service,
)


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_create_product_success(self, test_client, product_payload, product_count):
        response = await test_client.post("/api/products", json=product_payload)

        assert response.status_code == 200
        body = response.json()
        assert list(body) == ["productCreationResponse"]
        product = body["productCreationResponse"]
        assert isinstance(product["id"], int)
        assert {k: product[k] for k in ("title", "description", "price", "image")} == product_payload
        assert await product_count() == 1

    @pytest.mark.asyncio
    async def test_image_is_optional(self, test_client):
        response = await test_client.post(
            "/api/products",
            json={"title": "Lamp", "description": "Desk lamp", "price": 25},
        )

        assert response.status_code == 200
        assert response.json()["productCreationResponse"]["image"] is None

    @pytest.mark.asyncio
    async def test_duplicate_requests_create_distinct_products(
        self, test_client, product_payload, product_count
    ):
        first = await test_client.post("/api/products", json=product_payload)
        second = await test_client.post("/api/products", json=product_payload)

        first_id = first.json()["productCreationResponse"]["id"]
        second_id = second.json()["productCreationResponse"]["id"]
        assert first_id != second_id
        assert await product_count() == 2

    @pytest.mark.asyncio
    async def test_long_title_and_image_accepted(self, test_client):
        payload = {
            "title": "Mug " * 100,
            "description": "Ceramic mug",
            "price": 9.99,
            "image": "data:image/png;base64," + "A" * 4000,
        }

        response = await test_client.post("/api/products", json=payload)

        assert response.status_code == 200
        product = response.json()["productCreationResponse"]
        assert product["title"] == payload["title"]
        assert product["image"] == payload["image"]


class TestCreateProductValidation:

    @pytest.mark.asyncio
    async def test_empty_title_rejected(self, test_client, product_count):
        response = await test_client.post(
            "/api/products",
            json={"title": "", "description": "x", "price": 5, "image": ""},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == REQUIRED_FIELDS_MESSAGE
        assert body["details"]["missing_fields"] == ["title"]
        assert await product_count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"description": "Ceramic mug", "price": 9.99},
            {"title": "Mug", "price": 9.99},
            {"title": "Mug", "description": "Ceramic mug"},
            {"title": "Mug", "description": "Ceramic mug", "price": 0},
            {},
        ],
    )
    async def test_missing_required_field_rejected(self, test_client, product_count, payload):
        response = await test_client.post("/api/products", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == REQUIRED_FIELDS_MESSAGE
        assert await product_count() == 0

    @pytest.mark.asyncio
    async def test_unparseable_body_rejected(self, test_client, product_count):
        response = await test_client.post(
            "/api/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert await product_count() == 0

    @pytest.mark.asyncio
    async def test_mistyped_price_rejected(self, test_client, product_count):
        response = await test_client.post(
            "/api/products",
            json={"title": "Mug", "description": "Ceramic mug", "price": "cheap"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert await product_count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [b"1e309", b"-1e309", b"NaN"])
    async def test_non_finite_price_rejected(self, test_client, product_count, price):
        # 1e309 overflows to float("inf") when the body is decoded
        body = b'{"title":"Mug","description":"Ceramic mug","price":' + price + b"}"

        response = await test_client.post(
            "/api/products",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert await product_count() == 0


class TestCreateProductPersistenceFailure:

    @pytest.mark.asyncio
    async def test_database_failure_returns_server_error(
        self, app, test_client, product_payload, product_count
    ):
        failing_session = AsyncMock()
        failing_session.add = MagicMock()
        failing_session.flush = AsyncMock()
        failing_session.rollback = AsyncMock()
        failing_session.commit = AsyncMock(
            side_effect=OperationalError("INSERT INTO products ...", {}, Exception("connection lost"))
        )
        app.dependency_overrides[get_product_repository] = lambda: ProductRepository(failing_session)

        response = await test_client.post("/api/products", json=product_payload)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "productCreationResponse" not in body
        assert "connection lost" not in response.text
        failing_session.rollback.assert_awaited_once()
        assert await product_count() == 0


class TestUnexpectedError:

    @pytest.mark.asyncio
    async def test_unexpected_error_carries_request_id(self, app, product_payload):
        class BrokenService(ProductService):
            async def create_product(self, repository, request):
                raise RuntimeError("boom")

        app.dependency_overrides[get_product_service] = lambda: BrokenService()
        # The catch-all handler re-raises after responding; keep the response
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/products", json=product_payload)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert "boom" not in response.text
        assert body["request_id"]
        assert response.headers["X-Request-ID"] == body["request_id"]


class TestRequestId:

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client, product_payload):
        response = await test_client.post(
            "/api/products", json=product_payload, headers={"X-Request-ID": "abc12345"}
        )

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.post("/api/products", json={})

        assert response.json()["request_id"] == response.headers["X-Request-ID"]


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_connected_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_reports_unreachable_database(self, test_client, database, monkeypatch):
        monkeypatch.setattr(database, "ping", AsyncMock(return_value=False))

        response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"
