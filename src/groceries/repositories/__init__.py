"""Repositories over the storage backend, one per entity type."""

from dataclasses import dataclass

from ..storage.base import StorageBackend
from .base import EntityNotFoundError, Repository
from .department import DepartmentRepository
from .grocery_list import GroceryListRepository
from .product import ProductRepository
from .store import StoreRepository


@dataclass(frozen=True)
class Repositories:
    """The repositories sharing one storage backend, handed to the resolvers."""

    storage: StorageBackend
    departments: DepartmentRepository
    products: ProductRepository
    stores: StoreRepository
    grocery_lists: GroceryListRepository

    @classmethod
    def from_storage(cls, storage: StorageBackend) -> "Repositories":
        return cls(
            storage=storage,
            departments=DepartmentRepository(storage),
            products=ProductRepository(storage),
            stores=StoreRepository(storage),
            grocery_lists=GroceryListRepository(storage),
        )


__all__ = [
    "DepartmentRepository",
    "EntityNotFoundError",
    "GroceryListRepository",
    "ProductRepository",
    "Repositories",
    "Repository",
    "StoreRepository",
]
