"""Centralized constants for internal implementation details.

Not environment-specific configuration: for that, use ``src/core/config.py``.

Categories:
- Column lengths: shared by the SQLAlchemy models and the input validators,
  so an overlong value is rejected as a 400 before it reaches the database
- Listing: allowed page sizes
- Passwords: bcrypt input limit

Example:
    >>> from src.core.constants import RESTAURANT_NAME_MAX_LENGTH
    >>> mapped_column(String(RESTAURANT_NAME_MAX_LENGTH))
"""

# =============================================================================
# Column Lengths
# =============================================================================

RESTAURANT_NAME_MAX_LENGTH: int = 25
RESTAURANT_CATEGORY_MAX_LENGTH: int = 100
CONTACT_EMAIL_MAX_LENGTH: int = 255
CONTACT_NUMBER_MAX_LENGTH: int = 50

ADDRESS_FIELD_MAX_LENGTH: int = 50
"""City and street."""

POSTAL_CODE_MAX_LENGTH: int = 20

DISH_NAME_MAX_LENGTH: int = 100

# =============================================================================
# Listing
# =============================================================================

ALLOWED_PAGE_SIZES: tuple[int, ...] = (5, 10, 15)

# =============================================================================
# Passwords
# =============================================================================

BCRYPT_MAX_PASSWORD_BYTES: int = 72
"""bcrypt ignores input past 72 bytes."""
