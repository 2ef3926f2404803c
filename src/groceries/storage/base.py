"""Core storage interface shared by all backends."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)

Record = dict[str, Any]


class StorageException(Exception):
    """Base exception for storage operations."""

    pass


class StorageBackend(ABC):
    """Abstract key-based store of JSON records grouped in named collections.

    Keys are integer ids. Implementations return copies of stored records so
    callers can mutate results freely; changes only become visible through
    :meth:`write`.
    """

    def __init__(self) -> None:
        self._insert_locks: dict[str, asyncio.Lock] = {}

    @abstractmethod
    async def read_all(self, collection: str) -> list[Record]:
        """Return every record in the collection ordered by key."""
        pass

    @abstractmethod
    async def read(self, collection: str, key: int) -> Record | None:
        """Return the record stored under key, or None when absent."""
        pass

    @abstractmethod
    async def write(self, collection: str, key: int, record: Record) -> None:
        """Store record under key, replacing any previous record."""
        pass

    @abstractmethod
    async def exists(self, collection: str, key: int) -> bool:
        """Check whether a record is stored under key."""
        pass

    async def next_key(self, collection: str) -> int:
        """Allocate the next free key: one past the highest key in use."""
        records = await self.read_all(collection)
        return max((int(r["id"]) for r in records), default=0) + 1

    async def insert(self, collection: str, record: Record) -> Record:
        """Store record under a freshly allocated key and return it with its id."""
        lock = self._insert_locks.setdefault(collection, asyncio.Lock())
        async with lock:
            key = await self.next_key(collection)
            stored = {"id": key, **{k: v for k, v in record.items() if k != "id"}}
            await self.write(collection, key, stored)

        logger.debug("Inserted record", collection=collection, key=key)
        return stored

    async def close(self) -> None:
        """Release backend resources."""
        return None
