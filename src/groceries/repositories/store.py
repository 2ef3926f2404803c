from __future__ import annotations

from collections.abc import Iterable

from ..models import Department, Store
from .base import Repository


class StoreRepository(Repository[Store]):
    collection = "stores"
    model = Store

    async def create(self, name: str, departments: Iterable[Department] | None = None) -> Store:
        return await self._insert(
            {"name": name, "departments": [d.to_record() for d in departments or ()]}
        )
