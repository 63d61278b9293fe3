"""Restaurant queries (CQRS read operations).

Queries represent requests for restaurant data. They are immutable
dataclasses and NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import SortDirection


@dataclass(frozen=True, kw_only=True)
class GetRestaurant:
    """Get a single restaurant by ID."""

    restaurant_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListRestaurants:
    """Search, sort and page through restaurants.

    A zero page number or page size (what an empty query string binds to)
    is rejected by validation rather than defaulted.

    Attributes:
        search_phrase: Case-insensitive substring of name or category.
        page_number: 1-based page number.
        page_size: One of 5, 10, 15.
        sort_by: Optional column name (``Name``, ``Description``, ``Category``).
        sort_direction: ASC or DESC (ignored without ``sort_by``).

    Example:
        >>> query = ListRestaurants(page_number=1, page_size=10, sort_by="Name")
        >>> result = await handler.handle(query)
    """

    page_number: int = 0
    page_size: int = 0
    search_phrase: str | None = None
    sort_by: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
