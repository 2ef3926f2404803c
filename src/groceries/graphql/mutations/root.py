"""
Root GraphQL mutation definitions

Every mutation returns null, without a GraphQL error, when any lookup or
write it depends on fails.
"""

import strawberry

from ..types.grocery_list import GroceryList, Product
from ..types.store import DepartmentInput, Store


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Store mutations
    @strawberry.mutation(name="addDepartmentToStore")
    async def add_department_to_store(
        self, info: strawberry.Info, department_name: str, store_id: int
    ) -> Store | None:
        """Add a department, found or created by name, to a store."""
        from ..resolvers.store import add_department_to_store

        return await add_department_to_store(info, department_name, store_id)

    @strawberry.mutation(name="updateDepartmentsForStore")
    async def update_departments_for_store(
        self, info: strawberry.Info, departments: list[DepartmentInput], store_id: int
    ) -> Store | None:
        """Replace the departments of a store."""
        from ..resolvers.store import update_departments_for_store

        return await update_departments_for_store(info, departments, store_id)

    # Product mutations
    @strawberry.mutation(name="addProduct")
    async def add_product(
        self, info: strawberry.Info, name: str, department_id: int
    ) -> Product | None:
        """Create a new product."""
        from ..resolvers.product import add_product

        return await add_product(info, name, department_id)

    # Grocery list mutations
    @strawberry.mutation(name="addProductToGroceryList")
    async def add_product_to_grocery_list(
        self, info: strawberry.Info, product_id: int, grocery_list_id: int
    ) -> GroceryList | None:
        """Add a product to a grocery list."""
        from ..resolvers.grocery_list import add_product_to_grocery_list

        return await add_product_to_grocery_list(info, product_id, grocery_list_id)

    @strawberry.mutation(name="removeProductFromGroceryList")
    async def remove_product_from_grocery_list(
        self, info: strawberry.Info, product_id: int, grocery_list_id: int
    ) -> GroceryList | None:
        """Remove a product from a grocery list."""
        from ..resolvers.grocery_list import remove_product_from_grocery_list

        return await remove_product_from_grocery_list(info, product_id, grocery_list_id)
