"""Pytest configuration and shared fixtures for the MongoDB MCP server tests.

Test Organization:
------------------
tests/
├── unit/           Fast, isolated tests. Motor is replaced by MagicMock/AsyncMock,
│                   no network I/O.
├── integration/    Tests against a real MongoDB at TEST_MONGODB_URI
│                   (default mongodb://localhost:27017). Skipped when unreachable.
└── conftest.py     This file - shared fixtures

Running subsets:
```bash
pytest -m unit              # Only unit tests (fast)
pytest -m integration       # Only integration tests
```
"""

import os
import time
from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult

from mongodb_mcp.mcp_server.database.connection import ConnectionManager
from mongodb_mcp.mcp_server.exceptions import DatabaseConnectionError

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: Integration tests with a real MongoDB")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory."""
    for item in items:
        test_path = Path(item.fspath)

        if "unit" in test_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in test_path.parts:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# MOCK DATABASE FIXTURES
# =============================================================================


def make_cursor(documents: list | None = None) -> MagicMock:
    """Mock of a Motor cursor whose to_list() resolves to the given documents."""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=list(documents or []))
    return cursor


@pytest.fixture
def inserted_id() -> ObjectId:
    return ObjectId("65a1f0c2e4b0a1b2c3d4e5f6")


@pytest.fixture
def mock_collection(inserted_id) -> MagicMock:
    """Mocked Motor collection with every async primitive the facades use.

    Example:
    --------
    >>> async def test_count(mock_collection, document_ops):
    ...     mock_collection.count_documents.return_value = 3
    ...     assert await document_ops.count_documents("shop", "orders") == 3
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock(return_value=InsertOneResult(inserted_id, True))
    collection.insert_many = AsyncMock(return_value=InsertManyResult([inserted_id], True))
    collection.find_one = AsyncMock(return_value=None)
    collection.find.return_value = make_cursor([])
    collection.update_one = AsyncMock(return_value=UpdateResult({"n": 1, "nModified": 1}, True))
    collection.update_many = AsyncMock(return_value=UpdateResult({"n": 2, "nModified": 2}, True))
    collection.delete_one = AsyncMock(return_value=DeleteResult({"n": 1}, True))
    collection.delete_many = AsyncMock(return_value=DeleteResult({"n": 2}, True))
    collection.count_documents = AsyncMock(return_value=0)
    collection.create_index = AsyncMock(return_value="field_1")
    collection.drop_index = AsyncMock(return_value=None)
    collection.list_indexes.return_value = make_cursor(
        [{"v": 2, "key": {"_id": 1}, "name": "_id_"}]
    )
    collection.bulk_write = AsyncMock()
    return collection


@pytest.fixture
def mock_database(mock_collection) -> MagicMock:
    """Mocked Motor database returning mock_collection for every collection name."""
    db = MagicMock()
    db.__getitem__.return_value = mock_collection
    db.list_collections = AsyncMock(
        return_value=make_cursor([{"name": "orders", "type": "collection"}])
    )
    db.command = AsyncMock(return_value={"db": "shop", "collections": 1, "ok": 1.0})
    db.create_collection = AsyncMock()
    db.drop_collection = AsyncMock(return_value={"ok": 1.0})
    return db


@pytest.fixture
def mock_motor_client(mock_database) -> MagicMock:
    """Mocked AsyncIOMotorClient returning mock_database for every database name."""
    client = MagicMock()
    client.__getitem__.return_value = mock_database
    client.admin.command = AsyncMock(return_value={"ok": 1.0})
    client.drop_database = AsyncMock(return_value=None)
    client.close = MagicMock()
    return client


@pytest.fixture
def client_factory(mock_motor_client) -> MagicMock:
    """Stand-in for the AsyncIOMotorClient constructor."""
    return MagicMock(return_value=mock_motor_client)


@pytest.fixture
def connection_manager(client_factory) -> ConnectionManager:
    """A DISCONNECTED manager that builds mocked clients."""
    return ConnectionManager(
        "mongodb://localhost:27017",
        timeout_seconds=5,
        client_factory=client_factory,
    )


@pytest.fixture
async def connected_manager(connection_manager) -> ConnectionManager:
    """A CONNECTED manager holding mock_motor_client."""
    await connection_manager.connect()
    return connection_manager


# =============================================================================
# INTEGRATION TEST FIXTURES
# =============================================================================


@pytest.fixture
async def live_connection() -> AsyncGenerator[ConnectionManager, None]:
    """ConnectionManager connected to a real MongoDB.

    Environment Variables:
    ----------------------
    TEST_MONGODB_URI: MongoDB connection string (default: mongodb://localhost:27017)
    """
    mongodb_uri = os.getenv("TEST_MONGODB_URI", "mongodb://localhost:27017")
    manager = ConnectionManager(mongodb_uri, timeout_seconds=2)

    try:
        await manager.connect()
    except DatabaseConnectionError as e:
        pytest.skip(f"MongoDB not available for integration tests: {e.message}")

    yield manager

    await manager.disconnect()


@pytest.fixture
async def test_db_name(live_connection) -> AsyncGenerator[str, None]:
    """Unique database name per test, dropped on teardown."""
    db_name = f"test_mongodb_mcp_{int(time.time() * 1000)}"

    yield db_name

    await live_connection.get_client().drop_database(db_name)
