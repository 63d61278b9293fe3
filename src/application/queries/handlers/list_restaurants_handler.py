"""ListRestaurants query handler (the listing engine).

Steps:
1. Validate the query (page number, page size, sort column)
2. Filter by search phrase (name or category, case-insensitive)
3. Sort by the requested column, or by id when none is given
4. Skip ``(page_number - 1) * page_size`` and take ``page_size``
5. Map to RestaurantResult with flattened address

The total count is the size of the filtered set before paging.

Queries are side-effect free and emit no domain events.
"""

from src.application.dtos.restaurant_dtos import PagedResult, RestaurantResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.restaurant_queries import ListRestaurants
from src.application.validators import validate_restaurant_query
from src.core.result import Failure, Result, Success
from src.domain.enums import RestaurantSortColumn
from src.domain.protocols.restaurant_repository import RestaurantRepository


class ListRestaurantsHandler:
    """Handler for ListRestaurants query.

    Dependencies (injected via constructor):
        - RestaurantRepository: filtering, ordering and paging in the store

    Returns:
        Result[PagedResult[RestaurantResult], ApplicationError]
    """

    def __init__(self, restaurant_repo: RestaurantRepository) -> None:
        self._restaurant_repo = restaurant_repo

    async def handle(
        self, query: ListRestaurants
    ) -> Result[PagedResult[RestaurantResult], ApplicationError]:
        errors = validate_restaurant_query(query)
        if errors:
            return Failure(
                error=ApplicationError.validation_failed(
                    errors, code=ApplicationErrorCode.QUERY_VALIDATION_FAILED
                )
            )

        search_phrase = query.search_phrase.strip() if query.search_phrase else None
        sort_by = RestaurantSortColumn(query.sort_by) if query.sort_by else None

        restaurants, total_count = await self._restaurant_repo.search(
            search_phrase=search_phrase or None,
            sort_by=sort_by,
            sort_direction=query.sort_direction,
            offset=(query.page_number - 1) * query.page_size,
            limit=query.page_size,
        )

        return Success(
            value=PagedResult.build(
                items=[RestaurantResult.from_entity(r) for r in restaurants],
                total_items_count=total_count,
                page_size=query.page_size,
                page_number=query.page_number,
            )
        )
