"""Tests for storage factory."""

from pathlib import Path

import pytest

from groceries.config import Settings
from groceries.storage import InMemoryStorage, JsonFileStorage, SqlStorage, create_storage


class TestCreateStorage:
    def test_memory(self) -> None:
        storage = create_storage(Settings(storage_backend="memory"))
        assert isinstance(storage, InMemoryStorage)

    def test_file(self, tmp_path: Path) -> None:
        storage = create_storage(Settings(storage_backend="file", storage_path=str(tmp_path)))

        assert isinstance(storage, JsonFileStorage)
        assert storage.base_path == tmp_path.resolve()

    @pytest.mark.asyncio
    async def test_sql(self) -> None:
        storage = create_storage(
            Settings(storage_backend="SQL", database_url="sqlite+aiosqlite:///:memory:")
        )

        assert isinstance(storage, SqlStorage)
        await storage.close()

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage backend: redis"):
            create_storage(Settings(storage_backend="redis"))
