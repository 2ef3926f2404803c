"""
Product and grocery list GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...models import GroceryList as GroceryListModel
from ...models import Product as ProductModel


@strawberry.type
class Product:
    """Product type for GraphQL API."""

    id: int
    name: str
    department_id: int

    @classmethod
    def from_model(cls, product: ProductModel) -> Product:
        return cls(id=product.id, name=product.name, department_id=product.department_id)


@strawberry.type
class GroceryList:
    """Grocery list type for GraphQL API."""

    id: int
    store_id: int
    products: list[Product]

    @classmethod
    def from_model(cls, grocery_list: GroceryListModel) -> GroceryList:
        return cls(
            id=grocery_list.id,
            store_id=grocery_list.store_id,
            products=[Product.from_model(p) for p in grocery_list.products],
        )
