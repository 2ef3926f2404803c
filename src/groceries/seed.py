"""
Seed data loading for storage initialization.

A seed file is a YAML document with optional top-level lists ``departments``,
``products``, ``stores`` and ``groceryLists``; each entry is a record in the
stored (camelCase) shape including its ``id``::

    departments:
      - {id: 1, name: Dairy}
    stores:
      - id: 1
        name: Corner Shop
        departments: [{id: 1, name: Dairy}]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .logging import get_logger
from .models import Department, Entity, GroceryList, Product, Store
from .storage.base import StorageBackend

logger = get_logger(__name__)

SEED_COLLECTIONS: dict[str, type[Entity]] = {
    "departments": Department,
    "products": Product,
    "stores": Store,
    "groceryLists": GroceryList,
}


class SeedDataError(ValueError):
    """Raised when a seed file cannot be parsed or validated."""


def load_seed_file(path: Path | str) -> dict[str, list[Entity]]:
    """Parse and validate a seed file.

    Raises:
        SeedDataError: If the file is missing, not YAML, or holds invalid records
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SeedDataError(f"Failed to load seed data from {path}: {e}") from e

    if not isinstance(data, dict):
        raise SeedDataError(f"Seed data in {path} must be a mapping of collections")

    unknown = set(data) - set(SEED_COLLECTIONS)
    if unknown:
        raise SeedDataError(f"Unknown seed collections: {', '.join(sorted(unknown))}")

    return {name: _validate(name, data.get(name) or []) for name in SEED_COLLECTIONS}


def _validate(collection: str, records: Any) -> list[Entity]:
    if not isinstance(records, list):
        raise SeedDataError(f"Seed collection '{collection}' must be a list")

    model = SEED_COLLECTIONS[collection]
    try:
        entities = [model.model_validate(r) for r in records]
    except ValidationError as e:
        raise SeedDataError(f"Invalid record in seed collection '{collection}': {e}") from e

    ids = [e.id for e in entities]
    if len(ids) != len(set(ids)):
        raise SeedDataError(f"Duplicate ids in seed collection '{collection}'")
    return entities


async def seed_storage(storage: StorageBackend, seed: dict[str, list[Entity]]) -> int:
    """Write seed entities to storage, replacing records with the same ids.

    Returns:
        Number of records written
    """
    written = 0
    for collection, entities in seed.items():
        for entity in entities:
            await storage.write(collection, entity.id, entity.to_record())
            written += 1
        if entities:
            logger.info("Seeded collection", collection=collection, count=len(entities))
    return written


async def seed_from_file(storage: StorageBackend, path: Path | str) -> int:
    """Load a seed file into storage."""
    return await seed_storage(storage, load_seed_file(path))
