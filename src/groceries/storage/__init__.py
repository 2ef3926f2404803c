"""Storage backends for the Groceries API.

Main components:
- StorageBackend: Abstract key-based store of JSON records
- InMemoryStorage: Process-local store for development and tests
- JsonFileStorage: One JSON file per collection
- SqlStorage: Key/value table through SQLAlchemy
"""

from .base import Record, StorageBackend, StorageException
from .factory import create_storage
from .file import JsonFileStorage
from .memory import InMemoryStorage
from .sql import SqlStorage

__all__ = [
    "Record",
    "StorageBackend",
    "StorageException",
    "InMemoryStorage",
    "JsonFileStorage",
    "SqlStorage",
    "create_storage",
]
