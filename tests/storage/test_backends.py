"""Contract tests shared by every storage backend."""

import asyncio
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from groceries.storage import InMemoryStorage, JsonFileStorage, SqlStorage, StorageBackend


@pytest_asyncio.fixture(params=["memory", "file", "sql"])
async def backend(request, tmp_path: Path) -> AsyncGenerator[StorageBackend, None]:
    if request.param == "memory":
        storage: StorageBackend = InMemoryStorage()
    elif request.param == "file":
        storage = JsonFileStorage(tmp_path / "data")
    else:
        storage = SqlStorage("sqlite+aiosqlite:///:memory:")
    yield storage
    await storage.close()


class TestStorageContract:
    """Behaviour every backend must share."""

    @pytest.mark.asyncio
    async def test_empty_collection(self, backend: StorageBackend) -> None:
        assert await backend.read_all("departments") == []
        assert await backend.read("departments", 1) is None
        assert await backend.exists("departments", 1) is False
        assert await backend.next_key("departments") == 1

    @pytest.mark.asyncio
    async def test_write_and_read(self, backend: StorageBackend) -> None:
        record = {"id": 3, "name": "Dairy"}
        await backend.write("departments", 3, record)

        assert await backend.read("departments", 3) == record
        assert await backend.exists("departments", 3) is True
        assert await backend.read_all("departments") == [record]

    @pytest.mark.asyncio
    async def test_write_overwrites_whole_record(self, backend: StorageBackend) -> None:
        await backend.write("stores", 1, {"id": 1, "name": "Old", "departments": [{"id": 1}]})
        await backend.write("stores", 1, {"id": 1, "name": "New", "departments": []})

        assert await backend.read("stores", 1) == {"id": 1, "name": "New", "departments": []}
        assert len(await backend.read_all("stores")) == 1

    @pytest.mark.asyncio
    async def test_read_all_orders_by_key(self, backend: StorageBackend) -> None:
        for key in (10, 2, 7):
            await backend.write("products", key, {"id": key})

        records = await backend.read_all("products")

        assert [r["id"] for r in records] == [2, 7, 10]

    @pytest.mark.asyncio
    async def test_collections_are_isolated(self, backend: StorageBackend) -> None:
        await backend.write("departments", 1, {"id": 1, "name": "Dairy"})

        assert await backend.read("products", 1) is None
        assert await backend.read_all("products") == []

    @pytest.mark.asyncio
    async def test_insert_allocates_next_key(self, backend: StorageBackend) -> None:
        await backend.write("departments", 5, {"id": 5, "name": "Bakery"})

        stored = await backend.insert("departments", {"name": "Dairy"})

        assert stored == {"id": 6, "name": "Dairy"}
        assert await backend.read("departments", 6) == stored

    @pytest.mark.asyncio
    async def test_concurrent_inserts_get_unique_keys(self, backend: StorageBackend) -> None:
        stored = await asyncio.gather(
            *[backend.insert("products", {"name": f"p{i}"}) for i in range(5)]
        )

        assert sorted(r["id"] for r in stored) == [1, 2, 3, 4, 5]
        assert len(await backend.read_all("products")) == 5

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, backend: StorageBackend) -> None:
        await backend.write("stores", 1, {"id": 1, "name": "Shop", "departments": []})

        record = await backend.read("stores", 1)
        record["departments"].append({"id": 9, "name": "Ghost"})

        assert (await backend.read("stores", 1))["departments"] == []
