"""Validation functions for restaurant inputs.

Each function returns the list of failing fields (empty list = valid).
"""

from src.application.commands.restaurant_commands import (
    CreateRestaurant,
    UpdateRestaurant,
)
from src.application.queries.restaurant_queries import ListRestaurants
from src.core.constants import (
    ADDRESS_FIELD_MAX_LENGTH,
    ALLOWED_PAGE_SIZES,
    CONTACT_EMAIL_MAX_LENGTH,
    CONTACT_NUMBER_MAX_LENGTH,
    POSTAL_CODE_MAX_LENGTH,
    RESTAURANT_CATEGORY_MAX_LENGTH,
    RESTAURANT_NAME_MAX_LENGTH,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    collect_errors,
    validate_email,
    validate_max_length,
    validate_not_empty,
)
from src.domain.enums import RestaurantSortColumn

def _validate_page_number(page_number: int) -> Result[int, ValidationError]:
    if page_number < 1:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PAGE_NUMBER,
                message="PageNumber must be greater than or equal to 1",
                field="pageNumber",
            )
        )
    return Success(value=page_number)


def _validate_page_size(page_size: int) -> Result[int, ValidationError]:
    if page_size not in ALLOWED_PAGE_SIZES:
        allowed = ",".join(str(size) for size in ALLOWED_PAGE_SIZES)
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PAGE_SIZE,
                message=f"PageSize must in [{allowed}]",
                field="pageSize",
            )
        )
    return Success(value=page_size)


def _validate_sort_by(sort_by: str | None) -> Result[str | None, ValidationError]:
    if sort_by and sort_by not in RestaurantSortColumn.values():
        allowed = ",".join(RestaurantSortColumn.values())
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_SORT_COLUMN,
                message=f"SortBy is optional, or must be in [{allowed}]",
                field="sortBy",
            )
        )
    return Success(value=sort_by)


def validate_restaurant_query(query: ListRestaurants) -> list[ValidationError]:
    """Validate listing parameters.

    Rules:
        - page number >= 1
        - page size in {5, 10, 15}
        - sort column, when given, on the allow-list (case-sensitive)

    There are no defaults: an empty query string binds page number and page
    size to 0, which fails both rules.

    Example:
        >>> validate_restaurant_query(ListRestaurants(page_number=1, page_size=10))
        []
    """
    return collect_errors(
        _validate_page_number(query.page_number),
        _validate_page_size(query.page_size),
        _validate_sort_by(query.sort_by),
    )


def validate_create_restaurant(command: CreateRestaurant) -> list[ValidationError]:
    """Validate a new restaurant: name, category and address are required."""
    return collect_errors(
        validate_not_empty(command.name, "name"),
        validate_max_length(command.name, RESTAURANT_NAME_MAX_LENGTH, "name"),
        validate_not_empty(command.category, "category"),
        validate_max_length(
            command.category, RESTAURANT_CATEGORY_MAX_LENGTH, "category"
        ),
        validate_not_empty(command.city, "city"),
        validate_max_length(command.city, ADDRESS_FIELD_MAX_LENGTH, "city"),
        validate_not_empty(command.street, "street"),
        validate_max_length(command.street, ADDRESS_FIELD_MAX_LENGTH, "street"),
        validate_max_length(
            command.postal_code, POSTAL_CODE_MAX_LENGTH, "postal_code"
        ),
        validate_email(command.contact_email or None, "contact_email"),
        validate_max_length(
            command.contact_email, CONTACT_EMAIL_MAX_LENGTH, "contact_email"
        ),
        validate_max_length(
            command.contact_number, CONTACT_NUMBER_MAX_LENGTH, "contact_number"
        ),
    )


def validate_update_restaurant(command: UpdateRestaurant) -> list[ValidationError]:
    return collect_errors(
        validate_not_empty(command.name, "name"),
        validate_max_length(command.name, RESTAURANT_NAME_MAX_LENGTH, "name"),
    )
