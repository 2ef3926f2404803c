"""
Store and department GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...models import Department as DepartmentModel
from ...models import Store as StoreModel


@strawberry.type
class Department:
    """Department type for GraphQL API."""

    id: int
    name: str

    @classmethod
    def from_model(cls, department: DepartmentModel) -> Department:
        return cls(id=department.id, name=department.name)


@strawberry.input
class DepartmentInput:
    """A department as supplied when replacing a store's department list."""

    id: int
    name: str

    def to_model(self) -> DepartmentModel:
        return DepartmentModel(id=self.id, name=self.name)


@strawberry.type
class Store:
    """Store type for GraphQL API."""

    id: int
    name: str
    departments: list[Department]

    @classmethod
    def from_model(cls, store: StoreModel) -> Store:
        return cls(
            id=store.id,
            name=store.name,
            departments=[Department.from_model(d) for d in store.departments],
        )
