"""Sortable restaurant columns.

Only these columns may be named by ``sortBy``. Columns that exist on the
restaurant but are not listed here (ContactEmail, ContactNumber, ...) are
rejected by the query validator.
"""

from enum import Enum


class RestaurantSortColumn(str, Enum):
    """Allow-list of columns a restaurant listing can be ordered by."""

    NAME = "Name"
    DESCRIPTION = "Description"
    CATEGORY = "Category"

    @classmethod
    def values(cls) -> list[str]:
        """Get all column names as strings.

        Returns:
            list[str]: ['Name', 'Description', 'Category'].
        """
        return [column.value for column in cls]
