"""JSON file storage backend for development and self-hosted deployments."""

import asyncio
import json
from pathlib import Path

import aiofiles

from ..logging import get_logger
from .base import Record, StorageBackend, StorageException

logger = get_logger(__name__)


class JsonFileStorage(StorageBackend):
    """Stores each collection as one JSON object (``{"<id>": record}``) on disk.

    Writes rewrite the whole collection file through a temporary file, under a
    per-collection lock.
    """

    def __init__(self, base_path: Path | str):
        super().__init__()
        self.base_path = Path(base_path).resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, asyncio.Lock] = {}

    def _get_collection_path(self, collection: str) -> Path:
        """Get the collection file path, rejecting names that escape base_path."""
        file_path = (self.base_path / f"{collection}.json").resolve()
        if file_path.parent != self.base_path:
            raise StorageException(f"Invalid collection name: {collection}")
        return file_path

    def _lock(self, collection: str) -> asyncio.Lock:
        return self._locks.setdefault(collection, asyncio.Lock())

    async def _load(self, collection: str) -> dict[str, Record]:
        file_path = self._get_collection_path(collection)
        if not file_path.exists():
            return {}

        try:
            async with aiofiles.open(file_path) as f:
                content = await f.read()
        except OSError as e:
            logger.error(f"File system error reading {collection}: {e}")
            raise StorageException(f"Failed to read collection: {e}") from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageException(f"Corrupt collection file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageException(f"Collection file {file_path} must hold a JSON object")
        return data

    async def _save(self, collection: str, data: dict[str, Record]) -> None:
        file_path = self._get_collection_path(collection)
        tmp_path = file_path.with_suffix(".json.tmp")
        try:
            async with aiofiles.open(tmp_path, "w") as f:
                await f.write(json.dumps(data, indent=2, sort_keys=True))
            tmp_path.replace(file_path)
        except OSError as e:
            logger.error(f"File system error writing {collection}: {e}")
            raise StorageException(f"Failed to write collection: {e}") from e

    async def read_all(self, collection: str) -> list[Record]:
        data = await self._load(collection)
        return [data[key] for key in sorted(data, key=int)]

    async def read(self, collection: str, key: int) -> Record | None:
        data = await self._load(collection)
        return data.get(str(key))

    async def write(self, collection: str, key: int, record: Record) -> None:
        async with self._lock(collection):
            data = await self._load(collection)
            data[str(key)] = record
            await self._save(collection, data)
        logger.debug("Wrote record", collection=collection, key=key)

    async def exists(self, collection: str, key: int) -> bool:
        data = await self._load(collection)
        return str(key) in data
