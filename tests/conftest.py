"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry
from httpx import ASGITransport, AsyncClient

from groceries.config import Settings
from groceries.repositories import Repositories
from groceries.storage import InMemoryStorage


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def repositories(storage: InMemoryStorage) -> Repositories:
    return Repositories.from_storage(storage)


@pytest.fixture
def mock_info(repositories: Repositories) -> Any:
    """Create a mock GraphQL info object carrying the repositories."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "repositories": repositories}
    return info


@pytest_asyncio.fixture
async def grocery_data(repositories: Repositories) -> dict[str, Any]:
    """Seed a store with one department, two products, and an empty grocery list."""
    dairy = await repositories.departments.create("Dairy")
    produce = await repositories.departments.create("Produce")
    store = await repositories.stores.create("Corner Shop", [dairy])
    milk = await repositories.products.create("Milk", dairy.id)
    apple = await repositories.products.create("Apple", produce.id)
    grocery_list = await repositories.grocery_lists.create(store.id)

    return {
        "dairy": dairy,
        "produce": produce,
        "store": store,
        "milk": milk,
        "apple": apple,
        "grocery_list": grocery_list,
    }


@pytest.fixture
def test_settings() -> Settings:
    return Settings(storage_backend="memory", seed_data_path=None, debug=True)


@pytest_asyncio.fixture
async def client(
    test_settings: Settings, storage: InMemoryStorage
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app that shares the ``storage`` fixture."""
    from groceries.api.app import create_app

    app = create_app(test_settings, storage=storage)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
