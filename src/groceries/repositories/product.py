from __future__ import annotations

from ..models import Product
from .base import Repository


class ProductRepository(Repository[Product]):
    collection = "products"
    model = Product

    async def create(self, name: str, department_id: int) -> Product:
        # No check that the department exists
        return await self._insert({"name": name, "departmentId": department_id})
