"""
Tests for the entity repositories
"""

import pytest

from groceries.models import Department, Product
from groceries.repositories import EntityNotFoundError, Repositories


class TestDepartmentRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_unique_ids(self, repositories: Repositories) -> None:
        dairy = await repositories.departments.create("Dairy")
        bakery = await repositories.departments.create("Bakery")

        assert dairy.id == 1
        assert bakery.id == 2
        assert await repositories.departments.find_all() == [dairy, bakery]

    @pytest.mark.asyncio
    async def test_find_by_name(self, repositories: Repositories) -> None:
        dairy = await repositories.departments.create("Dairy")

        assert await repositories.departments.find_by_name("Dairy") == dairy
        assert await repositories.departments.find_by_name("dairy") is None
        assert await repositories.departments.find_by_name("Frozen") is None

    @pytest.mark.asyncio
    async def test_find_by_name_returns_first_match(self, repositories: Repositories) -> None:
        first = await repositories.departments.create("Dairy")
        await repositories.departments.create("Dairy")

        assert await repositories.departments.find_by_name("Dairy") == first

    @pytest.mark.asyncio
    async def test_find_by_id_miss(self, repositories: Repositories) -> None:
        assert await repositories.departments.find_by_id(99) is None


class TestProductRepository:
    @pytest.mark.asyncio
    async def test_create(self, repositories: Repositories, storage) -> None:
        product = await repositories.products.create("Milk", 4)

        assert product == Product(id=1, name="Milk", department_id=4)
        assert await storage.read("products", 1) == {"id": 1, "name": "Milk", "departmentId": 4}


class TestStoreRepository:
    @pytest.mark.asyncio
    async def test_create_with_departments(self, repositories: Repositories) -> None:
        dairy = await repositories.departments.create("Dairy")

        store = await repositories.stores.create("Corner Shop", [dairy])

        found = await repositories.stores.find_by_id(store.id)
        assert found is not None
        assert found.name == "Corner Shop"
        assert found.departments == [dairy]

    @pytest.mark.asyncio
    async def test_update_overwrites(self, repositories: Repositories) -> None:
        store = await repositories.stores.create("Corner Shop")
        store.name = "Big Shop"
        store.departments = [Department(id=7, name="Frozen")]

        await repositories.stores.update(store)

        found = await repositories.stores.find_by_id(store.id)
        assert found.name == "Big Shop"
        assert found.departments == [Department(id=7, name="Frozen")]

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, repositories: Repositories) -> None:
        store = await repositories.stores.create("Corner Shop")
        store.id = 42

        with pytest.raises(EntityNotFoundError, match="Store 42 not found"):
            await repositories.stores.update(store)

        assert await repositories.stores.find_by_id(42) is None

    @pytest.mark.asyncio
    async def test_found_entities_are_detached(self, repositories: Repositories) -> None:
        store = await repositories.stores.create("Corner Shop")

        found = await repositories.stores.find_by_id(store.id)
        found.departments.append(Department(id=1, name="Dairy"))

        assert (await repositories.stores.find_by_id(store.id)).departments == []


class TestGroceryListRepository:
    @pytest.mark.asyncio
    async def test_find_by_store_id(self, repositories: Repositories) -> None:
        first = await repositories.grocery_lists.create(1)
        second = await repositories.grocery_lists.create(2)

        assert await repositories.grocery_lists.find_by_store_id(2) == second
        assert await repositories.grocery_lists.find_by_store_id(1) == first
        assert await repositories.grocery_lists.find_by_store_id(42) is None

    @pytest.mark.asyncio
    async def test_create_with_products(self, repositories: Repositories, storage) -> None:
        milk = await repositories.products.create("Milk", 1)

        grocery_list = await repositories.grocery_lists.create(3, [milk])

        assert grocery_list.products == [milk]
        assert await storage.read("groceryLists", grocery_list.id) == {
            "id": 1,
            "storeId": 3,
            "products": [{"id": 1, "name": "Milk", "departmentId": 1}],
        }
