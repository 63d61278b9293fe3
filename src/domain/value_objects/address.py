"""Restaurant address value object.

An address has no identity or lifecycle of its own: it is created with its
restaurant and removed with it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Address:
    """Postal address of a restaurant.

    Attributes:
        city: City name.
        street: Street and number.
        postal_code: Postal code (free-form, country formats differ).
    """

    city: str
    street: str
    postal_code: str | None = None
