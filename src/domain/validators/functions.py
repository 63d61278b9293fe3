"""Centralized validation functions (DRY principle).

Validation logic defined once, reused via Annotated types in
``src/domain/types.py``. Validators are pure functions that raise ValueError
on validation failure; Pydantic turns that into a request validation error.
Business rules that need to be reported together with other field errors
(dish price, lengths) live in ``src/application/validators``.
"""


def normalize_email(v: str) -> str:
    """Normalize email for storage and lookup.

    Format checks happen in the register validator so that a malformed
    address is reported with the other field errors.

    Example:
        >>> normalize_email("  User@Example.COM ")
        'user@example.com'
    """
    return v.strip().lower()


def normalize_nationality(v: str | None) -> str | None:
    """Normalize nationality to the capitalised form used by policies.

    Example:
        >>> normalize_nationality("  german ")
        'German'
    """
    if v is None:
        return None
    stripped = v.strip()
    return stripped.capitalize() if stripped else None
