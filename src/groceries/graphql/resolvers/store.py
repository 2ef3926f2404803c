from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...models import Department as DepartmentModel
from ...repositories import Repositories
from ..context import get_repositories_from_info, require

if TYPE_CHECKING:
    from ..types.store import DepartmentInput, Store

logger = get_logger(__name__)


async def resolve_stores(info: strawberry.Info) -> list[Store]:
    """Resolve every store with its departments."""
    from ..types.store import Store as StoreType

    logger.info("Processing request", operation="stores")
    repositories = get_repositories_from_info(info)

    stores = await repositories.stores.find_all()
    return [StoreType.from_model(s) for s in stores]


async def find_or_create_department(repositories: Repositories, name: str) -> DepartmentModel:
    """Return the department with this exact name, creating it when none exists."""
    department = await repositories.departments.find_by_name(name)
    if department is not None:
        logger.info("Found existing department", department_id=department.id, name=name)
        return department

    logger.info("Creating new department", name=name)
    return await repositories.departments.create(name)


async def add_department_to_store(
    info: strawberry.Info, department_name: str, store_id: int
) -> Store | None:
    """
    Append a department, found or created by name, to a store.

    The store lookup and the department lookup run concurrently. The
    department is appended even when the store already lists it.
    """
    from ..types.store import Store as StoreType

    logger.info(
        "Processing request",
        operation="addDepartmentToStore",
        department_name=department_name,
        store_id=store_id,
    )
    repositories = get_repositories_from_info(info)

    try:
        store, department = await asyncio.gather(
            require(repositories.stores.find_by_id(store_id), "Store", store_id),
            find_or_create_department(repositories, department_name),
        )

        store.departments.append(department)
        await repositories.stores.update(store)
    except Exception as e:
        logger.error(
            "addDepartmentToStore failed",
            department_name=department_name,
            store_id=store_id,
            error=str(e),
            exc_info=True,
        )
        return None

    logger.info("Department added to store", store_id=store.id, department_id=department.id)
    return StoreType.from_model(store)


async def update_departments_for_store(
    info: strawberry.Info, departments: list[DepartmentInput], store_id: int
) -> Store | None:
    """Replace a store's department list wholesale."""
    from ..types.store import Store as StoreType

    logger.info(
        "Processing request",
        operation="updateDepartmentsForStore",
        store_id=store_id,
        department_count=len(departments),
    )
    repositories = get_repositories_from_info(info)

    try:
        store = await require(repositories.stores.find_by_id(store_id), "Store", store_id)

        store.departments = [d.to_model() for d in departments]
        await repositories.stores.update(store)
    except Exception as e:
        logger.error(
            "updateDepartmentsForStore failed",
            store_id=store_id,
            error=str(e),
            exc_info=True,
        )
        return None

    return StoreType.from_model(store)
