"""Factory for creating storage backends from settings."""

from ..config import Settings
from ..logging import get_logger
from .base import StorageBackend
from .file import JsonFileStorage
from .memory import InMemoryStorage
from .sql import SqlStorage

logger = get_logger(__name__)


def create_storage(settings: Settings) -> StorageBackend:
    """Create the storage backend selected by ``settings.storage_backend``.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = settings.storage_backend.lower()

    if backend == "memory":
        storage: StorageBackend = InMemoryStorage()
    elif backend == "file":
        storage = JsonFileStorage(settings.storage_path)
    elif backend == "sql":
        storage = SqlStorage(settings.database_url, echo=settings.sql_echo)
    else:
        raise ValueError(
            f"Unknown storage backend: {settings.storage_backend}. "
            "Available backends: memory, file, sql"
        )

    logger.info("Created storage backend", backend=backend)
    return storage
