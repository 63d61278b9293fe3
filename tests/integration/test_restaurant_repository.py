"""Integration tests for RestaurantRepository.

Tests cover:
- Save and fetch (flattened address, loaded dishes)
- Search phrase over name or category, case-insensitive
- Sorting by every allow-listed column in both directions
- Paging, with the total counted before the page window
- Count by creator
- Delete cascading to the address and dishes

Architecture:
- Integration tests with REAL PostgreSQL database
- Uses test_database fixture (empty tables per test)
- Each step runs in its own session, so reads come from the database
"""

import pytest
from sqlalchemy import func, select
from uuid_extensions import uuid7

from src.domain.entities import Restaurant, User
from src.domain.enums import RestaurantSortColumn, SortDirection
from src.domain.value_objects.address import Address
from src.infrastructure.persistence.models import Address as AddressModel
from src.infrastructure.persistence.models import Dish as DishModel
from src.infrastructure.persistence.repositories.dish_repository import (
    DishRepository,
)
from src.infrastructure.persistence.repositories.restaurant_repository import (
    RestaurantRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from tests.conftest import make_dish, make_restaurant


# =============================================================================
# Test Helpers
# =============================================================================


def create_test_restaurant(
    name: str,
    category: str = "Fast Food",
    description: str | None = None,
    created_by_id=None,
) -> Restaurant:
    return Restaurant(
        id=uuid7(),
        name=name,
        category=category,
        description=description,
        has_delivery=False,
        address=Address(city="Warszawa", street="Nowy Świat 1", postal_code="00-001"),
        created_by_id=created_by_id,
        dishes=[],
    )


async def save_restaurants(db, *restaurants: Restaurant) -> None:
    async with db.get_session() as session:
        repo = RestaurantRepository(session)
        for restaurant in restaurants:
            await repo.save(restaurant)


async def save_user(db) -> User:
    user = User(
        id=uuid7(),
        email=f"{uuid7().hex}@example.com",
        password_hash="$2b$04$notarealhashnotarealhashnotarealhashnotarealhash12",
    )
    async with db.get_session() as session:
        await UserRepository(session).save(user)
    return user


async def search(db, **overrides) -> tuple[list[Restaurant], int]:
    params = {
        "search_phrase": None,
        "sort_by": None,
        "sort_direction": SortDirection.ASC,
        "offset": 0,
        "limit": 15,
    }
    params.update(overrides)
    async with db.get_session() as session:
        return await RestaurantRepository(session).search(**params)


async def seed_sortable(db) -> None:
    await save_restaurants(
        db,
        create_test_restaurant("Burger King", "Fast Food", "c grill"),
        create_test_restaurant("KFC", "Fast Food", "a chicken"),
        create_test_restaurant("Pizza Hut", "Italian", "d pizza"),
        create_test_restaurant("Zeta", "Fine Dining", "b tasting menu"),
    )


# =============================================================================
# Save and Fetch
# =============================================================================


@pytest.mark.integration
class TestRestaurantRepositorySaveAndFetch:
    async def test_save_then_find_by_id_returns_flattened_address(
        self, test_database
    ):
        restaurant = make_restaurant()
        restaurant.contact_number = "+48 123 456 789"
        await save_restaurants(test_database, restaurant)

        async with test_database.get_session() as session:
            found = await RestaurantRepository(session).find_by_id(restaurant.id)

        assert found is not None
        assert found.name == "KFC"
        assert found.category == "Fast Food"
        assert found.contact_email == "contact@kfc.com"
        assert found.contact_number == "+48 123 456 789"
        assert found.address == Address(
            city="Kraków", street="Długa 5", postal_code="30-001"
        )
        assert found.dishes == []

    async def test_find_by_id_loads_dishes(self, test_database):
        restaurant = make_restaurant()
        await save_restaurants(test_database, restaurant)
        async with test_database.get_session() as session:
            await DishRepository(session).save(make_dish(restaurant.id, "Nuggets"))

        async with test_database.get_session() as session:
            found = await RestaurantRepository(session).find_by_id(restaurant.id)

        assert found is not None
        assert [dish.name for dish in found.dishes] == ["Nuggets"]

    async def test_find_by_id_unknown_returns_none(self, test_database):
        async with test_database.get_session() as session:
            found = await RestaurantRepository(session).find_by_id(uuid7())

        assert found is None

    async def test_update_persists_mutable_fields(self, test_database):
        restaurant = make_restaurant()
        await save_restaurants(test_database, restaurant)

        restaurant.name = "KFC Rynek"
        restaurant.description = "Open late"
        restaurant.has_delivery = False
        async with test_database.get_session() as session:
            await RestaurantRepository(session).update(restaurant)

        async with test_database.get_session() as session:
            found = await RestaurantRepository(session).find_by_id(restaurant.id)

        assert found is not None
        assert (found.name, found.description, found.has_delivery) == (
            "KFC Rynek",
            "Open late",
            False,
        )


# =============================================================================
# Search
# =============================================================================


@pytest.mark.integration
class TestRestaurantRepositorySearch:
    async def test_mixed_case_phrase_matches_category(self, test_database):
        await seed_sortable(test_database)

        page, total = await search(
            test_database,
            search_phrase="fAsT",
            sort_by=RestaurantSortColumn.NAME,
        )

        assert total == 2
        assert [r.name for r in page] == ["Burger King", "KFC"]

    async def test_mixed_case_phrase_matches_name(self, test_database):
        await seed_sortable(test_database)

        page, total = await search(test_database, search_phrase="PIZZA h")

        assert total == 1
        assert [r.name for r in page] == ["Pizza Hut"]

    async def test_phrase_does_not_match_description(self, test_database):
        await seed_sortable(test_database)

        page, total = await search(test_database, search_phrase="tasting")

        assert (page, total) == ([], 0)

    async def test_blank_phrase_returns_everything(self, test_database):
        await seed_sortable(test_database)

        page, total = await search(test_database, search_phrase="   ")

        assert total == 4
        assert len(page) == 4

    async def test_like_wildcards_are_matched_literally(self, test_database):
        await seed_sortable(test_database)

        page, total = await search(test_database, search_phrase="%")

        assert (page, total) == ([], 0)


# =============================================================================
# Sorting
# =============================================================================


@pytest.mark.integration
class TestRestaurantRepositorySorting:
    @pytest.mark.parametrize(
        ("sort_by", "expected"),
        [
            (
                RestaurantSortColumn.NAME,
                ["Burger King", "KFC", "Pizza Hut", "Zeta"],
            ),
            (
                RestaurantSortColumn.DESCRIPTION,
                ["KFC", "Zeta", "Burger King", "Pizza Hut"],
            ),
        ],
    )
    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    async def test_sorts_by_column(self, test_database, sort_by, expected, direction):
        await seed_sortable(test_database)

        page, _ = await search(
            test_database, sort_by=sort_by, sort_direction=direction
        )

        if direction == SortDirection.DESC:
            expected = list(reversed(expected))
        assert [r.name for r in page] == expected

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    async def test_sorts_by_category(self, test_database, direction):
        await seed_sortable(test_database)

        page, _ = await search(
            test_database,
            sort_by=RestaurantSortColumn.CATEGORY,
            sort_direction=direction,
        )

        categories = [r.category for r in page]
        assert categories == sorted(
            categories, reverse=direction == SortDirection.DESC
        )
        assert categories[0] == (
            "Fast Food" if direction == SortDirection.ASC else "Italian"
        )

    async def test_equal_sort_keys_are_ordered_by_id(self, test_database):
        await seed_sortable(test_database)

        page, _ = await search(
            test_database, sort_by=RestaurantSortColumn.CATEGORY
        )

        fast_food = [r.id for r in page if r.category == "Fast Food"]
        assert fast_food == sorted(fast_food)


# =============================================================================
# Paging
# =============================================================================


@pytest.mark.integration
class TestRestaurantRepositoryPaging:
    async def test_second_page_holds_the_remainder(self, test_database):
        await save_restaurants(
            test_database,
            *(create_test_restaurant(f"Place {n}") for n in range(1, 8)),
        )

        page, total = await search(
            test_database,
            sort_by=RestaurantSortColumn.NAME,
            offset=5,
            limit=5,
        )

        assert total == 7
        assert [r.name for r in page] == ["Place 6", "Place 7"]

    async def test_total_counts_filtered_rows_before_paging(self, test_database):
        await save_restaurants(
            test_database,
            *(create_test_restaurant(f"Sushi {n}", "Japanese") for n in range(1, 7)),
            create_test_restaurant("Burger King"),
        )

        page, total = await search(
            test_database,
            search_phrase="japanese",
            sort_by=RestaurantSortColumn.NAME,
            offset=5,
            limit=5,
        )

        assert total == 6
        assert [r.name for r in page] == ["Sushi 6"]

    async def test_page_past_the_end_is_empty_but_keeps_total(self, test_database):
        await seed_sortable(test_database)

        page, total = await search(test_database, offset=10, limit=5)

        assert (page, total) == ([], 4)


# =============================================================================
# Count by Creator
# =============================================================================


@pytest.mark.integration
class TestRestaurantRepositoryCountByCreator:
    async def test_counts_only_the_creators_rows(self, test_database):
        alice = await save_user(test_database)
        bob = await save_user(test_database)
        await save_restaurants(
            test_database,
            create_test_restaurant("Alice One", created_by_id=alice.id),
            create_test_restaurant("Alice Two", created_by_id=alice.id),
            create_test_restaurant("Bob One", created_by_id=bob.id),
            create_test_restaurant("Seeded"),
        )

        async with test_database.get_session() as session:
            repo = RestaurantRepository(session)
            counts = (
                await repo.count_by_creator(alice.id),
                await repo.count_by_creator(bob.id),
                await repo.count_by_creator(uuid7()),
            )

        assert counts == (2, 1, 0)


# =============================================================================
# Delete
# =============================================================================


@pytest.mark.integration
class TestRestaurantRepositoryDelete:
    async def test_delete_removes_address_and_dishes(self, test_database):
        restaurant = make_restaurant()
        keeper = make_restaurant(name="Keeper")
        await save_restaurants(test_database, restaurant, keeper)
        async with test_database.get_session() as session:
            dishes = DishRepository(session)
            await dishes.save(make_dish(restaurant.id, "Nuggets"))
            await dishes.save(make_dish(restaurant.id, "Wings"))
            await dishes.save(make_dish(keeper.id, "Fries"))

        async with test_database.get_session() as session:
            await RestaurantRepository(session).delete(restaurant.id)

        async with test_database.get_session() as session:
            found = await RestaurantRepository(session).find_by_id(restaurant.id)
            addresses = (
                await session.execute(
                    select(func.count())
                    .select_from(AddressModel)
                    .where(AddressModel.restaurant_id == restaurant.id)
                )
            ).scalar_one()
            orphan_dishes = (
                await session.execute(
                    select(func.count())
                    .select_from(DishModel)
                    .where(DishModel.restaurant_id == restaurant.id)
                )
            ).scalar_one()
            kept_dishes = await DishRepository(session).find_by_restaurant_id(
                keeper.id
            )

        assert found is None
        assert addresses == 0
        assert orphan_dishes == 0
        assert [dish.name for dish in kept_dishes] == ["Fries"]

    async def test_delete_unknown_is_a_no_op(self, test_database):
        await seed_sortable(test_database)

        async with test_database.get_session() as session:
            await RestaurantRepository(session).delete(uuid7())

        _, total = await search(test_database)
        assert total == 4
