"""
People API · Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests run without MongoDB: the collection is a mock and the HTTP
       client talks to the app in-process.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_collection: AsyncMock/MagicMock stand-in for the people collection
    ├── make_cursor: builds a chainable find() cursor returning given documents
    ├── john_document: the sample John document with a fresh ObjectId
    ├── app: fresh FastAPI app with the collection dependency overridden
    └── test_client: HTTPX AsyncClient bound to `app`
"""

import os

# Settings are read at import time; set the environment first
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/people_test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from people_api.database import get_people_collection


@pytest.fixture
def make_cursor():
    """
    Factory for a Motor-like cursor.

    find() is synchronous and returns a cursor; sort() and limit() return
    the same cursor; to_list() is awaited.

    Usage:
        mock_collection.find.return_value = make_cursor([doc])
    """

    def _make(documents: List[Dict[str, Any]]) -> MagicMock:
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.to_list = AsyncMock(return_value=documents)
        return cursor

    return _make


@pytest.fixture
def mock_collection(make_cursor):
    """
    Provides a mock `people` collection.

    Awaitable methods are AsyncMocks; find() is a plain MagicMock that
    returns an empty cursor unless a test sets another one.
    """
    collection = MagicMock()
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.find_one_and_delete = AsyncMock(return_value=None)
    collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=0))
    collection.insert_one = AsyncMock()
    collection.insert_many = AsyncMock()
    return collection


@pytest.fixture
def john_document():
    return {
        "_id": ObjectId(),
        "name": "John",
        "age": 30,
        "favoriteFoods": ["Pizza", "Burger"],
        "email": "john@example.com",
    }


@pytest.fixture
def app(mock_collection):
    """
    A fresh app whose routes get `mock_collection` as the people collection.

    Tests may pop the override to exercise the real dependency.
    """
    from people_api.main import create_app

    application = create_app()
    application.dependency_overrides[get_people_collection] = lambda: mock_collection
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so no store is ever
    connected.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
