"""
Root GraphQL query definitions
"""

import strawberry

from ..types.grocery_list import GroceryList, Product
from ..types.store import Department, Store


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def departments(self, info: strawberry.Info) -> list[Department]:
        """Get all departments."""
        from ..resolvers.department import resolve_departments

        return await resolve_departments(info)

    @strawberry.field
    async def products(self, info: strawberry.Info) -> list[Product]:
        """Get all products."""
        from ..resolvers.product import resolve_products

        return await resolve_products(info)

    @strawberry.field
    async def stores(self, info: strawberry.Info) -> list[Store]:
        """Get all stores with their departments."""
        from ..resolvers.store import resolve_stores

        return await resolve_stores(info)

    @strawberry.field
    async def grocery_lists(self, info: strawberry.Info) -> list[GroceryList]:
        """Get all grocery lists with their products."""
        from ..resolvers.grocery_list import resolve_grocery_lists

        return await resolve_grocery_lists(info)

    @strawberry.field
    async def grocery_list(self, info: strawberry.Info, store_id: int) -> GroceryList | None:
        """Get the grocery list for a store."""
        from ..resolvers.grocery_list import resolve_grocery_list

        return await resolve_grocery_list(info, store_id)
