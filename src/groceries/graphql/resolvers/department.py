from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_repositories_from_info

if TYPE_CHECKING:
    from ..types.store import Department

logger = get_logger(__name__)


async def resolve_departments(info: strawberry.Info) -> list[Department]:
    """Resolve every department in repository order."""
    from ..types.store import Department as DepartmentType

    logger.info("Processing request", operation="departments")
    repositories = get_repositories_from_info(info)

    departments = await repositories.departments.find_all()
    return [DepartmentType.from_model(d) for d in departments]
