from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_repositories_from_info, require

if TYPE_CHECKING:
    from ..types.grocery_list import GroceryList

logger = get_logger(__name__)


# Query resolvers
async def resolve_grocery_lists(info: strawberry.Info) -> list[GroceryList]:
    """Resolve every grocery list with its products."""
    from ..types.grocery_list import GroceryList as GroceryListType

    logger.info("Processing request", operation="groceryLists")
    repositories = get_repositories_from_info(info)

    grocery_lists = await repositories.grocery_lists.find_all()
    return [GroceryListType.from_model(g) for g in grocery_lists]


async def resolve_grocery_list(info: strawberry.Info, store_id: int) -> GroceryList | None:
    """Resolve the grocery list of a store, or None when the store has none."""
    from ..types.grocery_list import GroceryList as GroceryListType

    logger.info("Processing request", operation="groceryList", store_id=store_id)
    repositories = get_repositories_from_info(info)

    grocery_list = await repositories.grocery_lists.find_by_store_id(store_id)
    if grocery_list is None:
        logger.info("Grocery list not found", store_id=store_id)
        return None

    return GroceryListType.from_model(grocery_list)


# Mutation resolvers
async def add_product_to_grocery_list(
    info: strawberry.Info, product_id: int, grocery_list_id: int
) -> GroceryList | None:
    """
    Append a product to a grocery list.

    Both lookups run concurrently; the product is appended even if the list
    already contains it.
    """
    from ..types.grocery_list import GroceryList as GroceryListType

    logger.info(
        "Processing request",
        operation="addProductToGroceryList",
        product_id=product_id,
        grocery_list_id=grocery_list_id,
    )
    repositories = get_repositories_from_info(info)

    try:
        grocery_list, product = await asyncio.gather(
            require(
                repositories.grocery_lists.find_by_id(grocery_list_id),
                "GroceryList",
                grocery_list_id,
            ),
            require(repositories.products.find_by_id(product_id), "Product", product_id),
        )

        grocery_list.products.append(product)
        await repositories.grocery_lists.update(grocery_list)
    except Exception as e:
        logger.error(
            "addProductToGroceryList failed",
            product_id=product_id,
            grocery_list_id=grocery_list_id,
            error=str(e),
            exc_info=True,
        )
        return None

    return GroceryListType.from_model(grocery_list)


async def remove_product_from_grocery_list(
    info: strawberry.Info, product_id: int, grocery_list_id: int
) -> GroceryList | None:
    """
    Remove every occurrence of a product from a grocery list.

    The product itself must exist; removing a product that is not on the
    list leaves the list unchanged.
    """
    from ..types.grocery_list import GroceryList as GroceryListType

    logger.info(
        "Processing request",
        operation="removeProductFromGroceryList",
        product_id=product_id,
        grocery_list_id=grocery_list_id,
    )
    repositories = get_repositories_from_info(info)

    try:
        grocery_list, product = await asyncio.gather(
            require(
                repositories.grocery_lists.find_by_id(grocery_list_id),
                "GroceryList",
                grocery_list_id,
            ),
            require(repositories.products.find_by_id(product_id), "Product", product_id),
        )

        grocery_list.products = [p for p in grocery_list.products if p.id != product.id]
        await repositories.grocery_lists.update(grocery_list)
    except Exception as e:
        logger.error(
            "removeProductFromGroceryList failed",
            product_id=product_id,
            grocery_list_id=grocery_list_id,
            error=str(e),
            exc_info=True,
        )
        return None

    return GroceryListType.from_model(grocery_list)
