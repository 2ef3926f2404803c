"""
Domain entities persisted by the repositories.

Records are stored using the camelCase field names exposed over GraphQL
(``departmentId``, ``storeId``), so every model accepts both spellings and
serializes by alias.
"""

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base class for persisted records with an integer id."""

    model_config = ConfigDict(populate_by_name=True)

    id: int

    def to_record(self) -> dict:
        """Serialize to the stored JSON shape."""
        return self.model_dump(mode="json", by_alias=True)


class Department(Entity):
    name: str


class Product(Entity):
    name: str
    department_id: int = Field(alias="departmentId")


class Store(Entity):
    name: str
    departments: list[Department] = Field(default_factory=list)


class GroceryList(Entity):
    store_id: int = Field(alias="storeId")
    products: list[Product] = Field(default_factory=list)
