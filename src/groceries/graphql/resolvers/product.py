from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_repositories_from_info

if TYPE_CHECKING:
    from ..types.grocery_list import Product

logger = get_logger(__name__)


async def resolve_products(info: strawberry.Info) -> list[Product]:
    """Resolve every product in repository order."""
    from ..types.grocery_list import Product as ProductType

    logger.info("Processing request", operation="products")
    repositories = get_repositories_from_info(info)

    products = await repositories.products.find_all()
    return [ProductType.from_model(p) for p in products]


async def add_product(info: strawberry.Info, name: str, department_id: int) -> Product | None:
    """
    Create a product in the given department.

    The department is not checked for existence. Storage failures are logged
    and resolve to None.
    """
    from ..types.grocery_list import Product as ProductType

    logger.info(
        "Processing request", operation="addProduct", name=name, department_id=department_id
    )
    repositories = get_repositories_from_info(info)

    try:
        product = await repositories.products.create(name, department_id)
    except Exception as e:
        logger.error(
            "addProduct failed",
            name=name,
            department_id=department_id,
            error=str(e),
            exc_info=True,
        )
        return None

    logger.info("addProduct returning", product_id=product.id)
    return ProductType.from_model(product)
