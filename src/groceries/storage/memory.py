"""In-memory storage backend for development and tests."""

import copy

from ..logging import get_logger
from .base import Record, StorageBackend

logger = get_logger(__name__)


class InMemoryStorage(StorageBackend):
    """Keeps every collection in a dict keyed by id; contents are lost on exit."""

    def __init__(self) -> None:
        super().__init__()
        self._collections: dict[str, dict[int, Record]] = {}

    def _collection(self, name: str) -> dict[int, Record]:
        return self._collections.setdefault(name, {})

    async def read_all(self, collection: str) -> list[Record]:
        records = self._collection(collection)
        return [copy.deepcopy(records[key]) for key in sorted(records)]

    async def read(self, collection: str, key: int) -> Record | None:
        record = self._collection(collection).get(int(key))
        return copy.deepcopy(record) if record is not None else None

    async def write(self, collection: str, key: int, record: Record) -> None:
        self._collection(collection)[int(key)] = copy.deepcopy(record)

    async def exists(self, collection: str, key: int) -> bool:
        return int(key) in self._collection(collection)
