"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Registration errors (EMAIL_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS)
- Authorization errors (RESOURCE_NOT_OWNED, POLICY_NOT_SATISFIED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    PASSWORD_MISMATCH = "password_mismatch"
    INVALID_PAGE_NUMBER = "invalid_page_number"
    INVALID_PAGE_SIZE = "invalid_page_size"
    INVALID_SORT_COLUMN = "invalid_sort_column"
    INVALID_PRICE = "invalid_price"
    INVALID_TEMPERATURE_RANGE = "invalid_temperature_range"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    RESTAURANT_NOT_FOUND = "restaurant_not_found"
    DISH_NOT_FOUND = "dish_not_found"
    POLICY_NOT_FOUND = "policy_not_found"

    # Registration errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"

    # Authorization errors
    RESOURCE_NOT_OWNED = "resource_not_owned"
    POLICY_NOT_SATISFIED = "policy_not_satisfied"
