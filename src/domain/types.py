"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.

Usage:
    from src.domain.types import Nationality, Price

    class CreateDishRequest(BaseModel):
        price: Price
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    normalize_email,
    normalize_nationality,
)

EmailAddress = Annotated[
    str,
    Field(
        max_length=255,
        description="Email address (normalized to lowercase)",
        examples=["user@example.com"],
    ),
    AfterValidator(normalize_email),
]
"""Email address normalized to lowercase. Format is checked by the
register validator."""

Price = Annotated[
    Decimal,
    Field(
        max_digits=12,
        decimal_places=2,
        description="Price, two decimal places",
        examples=["10.30"],
    ),
]
"""Dish price. A negative value is reported by the dish validator
together with the other field errors."""

Nationality = Annotated[
    str | None,
    Field(
        max_length=50,
        description="Nationality claim (capitalised)",
        examples=["German"],
    ),
    AfterValidator(normalize_nationality),
]
