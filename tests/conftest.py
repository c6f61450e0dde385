"""
Storefront API - Test Configuration (conftest.py)
==================================================

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:   AsyncMock standing in for AsyncSession
    ├── product_payload:   A valid POST /api/products body
    ├── database:          Database on a per-test SQLite file, tables created
    ├── app:               create_app() bound to that database
    └── test_client:       HTTPX AsyncClient talking to the app over ASGI
"""

import os
import tempfile

# Override settings BEFORE any storefront import: storefront.main builds a
# module-level app from the environment at import time.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="storefront_test_"), "import.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "development"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from storefront.config import Settings
from storefront.database import Database
from storefront.main import create_app
from storefront.models.product import Product


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.commit.side_effect = OperationalError(...)
        await ProductRepository(mock_db_session).create(record)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def product_payload():
    return {
        "title": "Mug",
        "description": "Ceramic mug",
        "price": 9.99,
        "image": "mug.png",
    }


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """A real Database on a throwaway SQLite file with the schema created."""
    db = Database.from_settings(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(test_settings, database):
    return create_app(settings=test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly into the app (no server process).

    Usage:
        response = await test_client.post("/api/products", json=payload)
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def product_count(database):
    """Async callable returning the number of rows in `products`."""

    async def count() -> int:
        async with database.session() as session:
            return await session.scalar(select(func.count()).select_from(Product))

    return count
