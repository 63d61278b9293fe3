"""Unit tests for ListRestaurantsHandler (the listing engine).

Tests cover:
- Validation rejects the query before the store is touched
- Offset/limit derived from page number and size
- Search phrase trimming and sort column conversion
- Paging totals computed from the pre-pagination count
- Flattened address fields on each item
"""

from unittest.mock import AsyncMock

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.queries import ListRestaurants
from src.application.queries.handlers.list_restaurants_handler import (
    ListRestaurantsHandler,
)
from src.core.result import Failure, Success
from src.domain.enums import RestaurantSortColumn, SortDirection
from tests.conftest import make_dish, make_restaurant


def _handler(restaurants=None, total=0) -> tuple[ListRestaurantsHandler, AsyncMock]:
    repo = AsyncMock()
    repo.search.return_value = (restaurants or [], total)
    return ListRestaurantsHandler(restaurant_repo=repo), repo


@pytest.mark.unit
class TestListRestaurantsValidation:
    """Invalid queries never reach the store."""

    @pytest.mark.parametrize(
        ("page_number", "page_size"),
        [(1, 100), (1, 11), (0, 10), (-3, 5), (0, 0)],
    )
    async def test_invalid_paging_returns_query_validation_failure(
        self, page_number, page_size
    ):
        handler, repo = _handler()

        result = await handler.handle(
            ListRestaurants(page_number=page_number, page_size=page_size)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.QUERY_VALIDATION_FAILED
        repo.search.assert_not_called()

    async def test_unknown_sort_column_is_rejected(self):
        handler, repo = _handler()

        result = await handler.handle(
            ListRestaurants(page_number=1, page_size=5, sort_by="ContactEmail")
        )

        assert isinstance(result, Failure)
        assert [e.field for e in result.error.field_errors] == ["sortBy"]
        repo.search.assert_not_called()

    async def test_empty_query_reports_both_paging_fields(self):
        handler, _ = _handler()

        result = await handler.handle(ListRestaurants())

        assert isinstance(result, Failure)
        assert [e.field for e in result.error.field_errors] == [
            "pageNumber",
            "pageSize",
        ]


@pytest.mark.unit
class TestListRestaurantsSearch:
    """Parameters passed to the repository."""

    @pytest.mark.parametrize(
        ("page_number", "page_size", "offset"),
        [(1, 5, 0), (2, 5, 5), (3, 10, 20), (4, 15, 45)],
    )
    async def test_offset_and_limit(self, page_number, page_size, offset):
        handler, repo = _handler()

        await handler.handle(
            ListRestaurants(page_number=page_number, page_size=page_size)
        )

        kwargs = repo.search.call_args.kwargs
        assert kwargs["offset"] == offset
        assert kwargs["limit"] == page_size

    async def test_search_phrase_is_trimmed(self):
        handler, repo = _handler()

        await handler.handle(
            ListRestaurants(page_number=1, page_size=5, search_phrase="  kfc ")
        )

        assert repo.search.call_args.kwargs["search_phrase"] == "kfc"

    async def test_blank_search_phrase_means_no_filter(self):
        handler, repo = _handler()

        await handler.handle(
            ListRestaurants(page_number=1, page_size=5, search_phrase="   ")
        )

        assert repo.search.call_args.kwargs["search_phrase"] is None

    async def test_sort_column_and_direction_forwarded(self):
        handler, repo = _handler()

        await handler.handle(
            ListRestaurants(
                page_number=1,
                page_size=5,
                sort_by="Category",
                sort_direction=SortDirection.DESC,
            )
        )

        kwargs = repo.search.call_args.kwargs
        assert kwargs["sort_by"] == RestaurantSortColumn.CATEGORY
        assert kwargs["sort_direction"] == SortDirection.DESC

    async def test_no_sort_column_passes_none(self):
        handler, repo = _handler()

        await handler.handle(ListRestaurants(page_number=1, page_size=5))

        assert repo.search.call_args.kwargs["sort_by"] is None


@pytest.mark.unit
class TestListRestaurantsResult:
    async def test_totals_reflect_filtered_count_before_paging(self):
        restaurants = [make_restaurant(name=f"R{i}") for i in range(5)]
        handler, _ = _handler(restaurants, total=12)

        result = await handler.handle(ListRestaurants(page_number=2, page_size=5))

        assert isinstance(result, Success)
        page = result.value
        assert len(page.items) == 5
        assert page.total_items_count == 12
        assert page.total_pages == 3
        assert page.items_from == 6
        assert page.items_to == 10

    async def test_items_flatten_address_and_dishes(self):
        restaurant = make_restaurant()
        restaurant.dishes = [make_dish(restaurant.id)]
        handler, _ = _handler([restaurant], total=1)

        result = await handler.handle(ListRestaurants(page_number=1, page_size=5))

        assert isinstance(result, Success)
        item = result.value.items[0]
        assert item.city == "Kraków"
        assert item.street == "Długa 5"
        assert item.postal_code == "30-001"
        assert [dish.name for dish in item.dishes] == ["Nuggets"]

    async def test_empty_store_gives_zero_pages(self):
        handler, _ = _handler([], total=0)

        result = await handler.handle(ListRestaurants(page_number=1, page_size=10))

        assert isinstance(result, Success)
        assert result.value.items == []
        assert result.value.total_pages == 0
