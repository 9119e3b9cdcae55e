"""
Bookshelf Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Autouse (every test):
    └── reset_shared_store: Puts the seed catalogue back on the shared shelf

    Function-scoped:
    ├── book_store: Private seeded BookStore for service-level tests
    ├── empty_store: Private BookStore with no books
    ├── new_book_payload: JSON body for POST /books
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_CATALOG"] = "true"
os.environ["JSON_INDENT"] = "4"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from bookshelf.store import BookStore, store as shared_store


@pytest.fixture(autouse=True)
def reset_shared_store():
    """Checkout and create mutate the process-wide shelf; undo that per test."""
    shared_store.reset()
    yield
    shared_store.reset()


@pytest.fixture
def book_store():
    """A private shelf holding the three seed books."""
    return BookStore(seed=True)


@pytest.fixture
def empty_store():
    return BookStore(seed=False)


@pytest.fixture
def new_book_payload():
    return {
        "id": 4,
        "title": "Learning Go",
        "author": "Jon Bodner",
        "quantity": 3,
    }


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app (no server).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/books")
            assert response.status_code == 200
    """
    from bookshelf.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
