"""Validation functions for dish inputs."""

from decimal import Decimal

from src.application.commands.dish_commands import CreateDish
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import collect_errors, validate_not_empty


def _validate_price(price: Decimal) -> Result[Decimal, ValidationError]:
    if price < 0:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PRICE,
                message="price must be greater than or equal to 0",
                field="price",
            )
        )
    return Success(value=price)


def validate_create_dish(command: CreateDish) -> list[ValidationError]:
    """Name is required and price must be non-negative."""
    return collect_errors(
        validate_not_empty(command.name, "name"),
        _validate_price(command.price),
    )
