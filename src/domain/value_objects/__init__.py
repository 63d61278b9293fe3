"""Domain value objects.

Immutable value objects without identity.
"""

from src.domain.value_objects.address import Address

__all__ = [
    "Address",
]
