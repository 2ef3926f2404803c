"""Shared repository behaviour over a storage collection."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from ..logging import get_logger
from ..models import Entity
from ..storage.base import StorageBackend

logger = get_logger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)


class EntityNotFoundError(LookupError):
    """Raised when an operation requires an entity that is not stored."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class Repository(Generic[EntityT]):
    """find_all / find_by_id / update over one collection.

    Subclasses set ``collection`` and ``model`` and provide their own
    ``create`` signature.
    """

    collection: ClassVar[str]
    model: ClassVar[type[Entity]]

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    def _to_entity(self, record: dict[str, Any]) -> EntityT:
        return self.model.model_validate(record)  # type: ignore[return-value]

    async def find_all(self) -> list[EntityT]:
        records = await self.storage.read_all(self.collection)
        return [self._to_entity(r) for r in records]

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        record = await self.storage.read(self.collection, entity_id)
        if record is None:
            return None
        return self._to_entity(record)

    async def _find_first(self, **criteria: Any) -> EntityT | None:
        """Return the first entity, in id order, whose attributes match criteria."""
        for entity in await self.find_all():
            if all(getattr(entity, field) == value for field, value in criteria.items()):
                return entity
        return None

    async def _insert(self, record: dict[str, Any]) -> EntityT:
        stored = await self.storage.insert(self.collection, record)
        entity = self._to_entity(stored)
        logger.info("Created entity", collection=self.collection, id=entity.id)
        return entity

    async def update(self, entity: EntityT) -> None:
        """Overwrite the stored record with the same id.

        Raises:
            EntityNotFoundError: If no record with this id exists
        """
        if not await self.storage.exists(self.collection, entity.id):
            raise EntityNotFoundError(self.model.__name__, entity.id)
        await self.storage.write(self.collection, entity.id, entity.to_record())
