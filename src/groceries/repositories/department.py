from __future__ import annotations

from ..models import Department
from .base import Repository


class DepartmentRepository(Repository[Department]):
    collection = "departments"
    model = Department

    async def find_by_name(self, name: str) -> Department | None:
        """Find the first department whose name matches exactly."""
        return await self._find_first(name=name)

    async def create(self, name: str) -> Department:
        return await self._insert({"name": name})
