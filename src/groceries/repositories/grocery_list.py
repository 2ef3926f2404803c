from __future__ import annotations

from collections.abc import Iterable

from ..models import GroceryList, Product
from .base import Repository


class GroceryListRepository(Repository[GroceryList]):
    collection = "groceryLists"
    model = GroceryList

    async def find_by_store_id(self, store_id: int) -> GroceryList | None:
        """Find the first grocery list belonging to the store."""
        return await self._find_first(store_id=store_id)

    async def create(
        self, store_id: int, products: Iterable[Product] | None = None
    ) -> GroceryList:
        return await self._insert(
            {"storeId": store_id, "products": [p.to_record() for p in products or ()]}
        )
