"""Sort direction for restaurant listings."""

from enum import Enum


class SortDirection(str, Enum):
    """Ordering applied to the ``sortBy`` column.

    Values match the query string (``sortDirection=ASC``).
    """

    ASC = "ASC"
    DESC = "DESC"
