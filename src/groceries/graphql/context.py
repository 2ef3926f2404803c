"""
Shared helpers for reaching request dependencies from GraphQL resolvers
"""

from collections.abc import Awaitable
from typing import TypeVar

import strawberry

from ..logging import get_logger
from ..repositories import EntityNotFoundError, Repositories

logger = get_logger(__name__)

T = TypeVar("T")


def get_repositories_from_info(info: strawberry.Info) -> Repositories:
    """
    Extract the repositories injected into the GraphQL context.

    Raises:
        RuntimeError: If the router was built without repositories
    """
    repositories = info.context.get("repositories")
    if repositories is None:
        logger.error("Repositories not found in GraphQL context")
        raise RuntimeError("Repositories not found in GraphQL context")
    return repositories


async def require(lookup: Awaitable[T | None], entity: str, entity_id: int) -> T:
    """Await a repository lookup, turning a miss into EntityNotFoundError."""
    result = await lookup
    if result is None:
        raise EntityNotFoundError(entity, entity_id)
    return result
