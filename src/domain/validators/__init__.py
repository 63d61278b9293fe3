"""Validators package exports."""

from src.domain.validators.functions import (
    normalize_email,
    normalize_nationality,
)

__all__ = [
    "normalize_email",
    "normalize_nationality",
]
