"""Restaurant and dish DTOs.

Read models returned by the restaurant and dish query handlers. Address
fields are flattened onto the restaurant.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar
from uuid import UUID

from src.domain.entities import Dish, Restaurant

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class DishResult:
    """Single dish."""

    id: UUID
    restaurant_id: UUID
    name: str
    description: str | None
    price: Decimal

    @classmethod
    def from_entity(cls, dish: Dish) -> "DishResult":
        return cls(
            id=dish.id,
            restaurant_id=dish.restaurant_id,
            name=dish.name,
            description=dish.description,
            price=dish.price,
        )


@dataclass(frozen=True, kw_only=True)
class RestaurantResult:
    """Restaurant with its address flattened and its dishes.

    Attributes:
        city: Address city.
        street: Address street.
        postal_code: Address postal code (optional).
        dishes: Dish summaries, ordered by name.
    """

    id: UUID
    name: str
    description: str | None
    category: str
    has_delivery: bool
    contact_email: str | None
    contact_number: str | None
    city: str
    street: str
    postal_code: str | None
    created_by_id: UUID | None
    dishes: list[DishResult]

    @classmethod
    def from_entity(cls, restaurant: Restaurant) -> "RestaurantResult":
        address = restaurant.address
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            description=restaurant.description,
            category=restaurant.category,
            has_delivery=restaurant.has_delivery,
            contact_email=restaurant.contact_email,
            contact_number=restaurant.contact_number,
            city=address.city,
            street=address.street,
            postal_code=address.postal_code,
            created_by_id=restaurant.created_by_id,
            dishes=[DishResult.from_entity(dish) for dish in restaurant.dishes],
        )


@dataclass(frozen=True, kw_only=True)
class PagedResult(Generic[T]):
    """One page of a listing plus the numbers a client needs to page on.

    Attributes:
        items: Records on this page.
        total_items_count: Size of the filtered set before pagination.
        total_pages: ``ceil(total_items_count / page_size)``.
        items_from: 1-based position of the first record of this page.
        items_to: 1-based position of the last slot of this page.
    """

    items: list[T]
    total_items_count: int
    total_pages: int
    items_from: int
    items_to: int

    @classmethod
    def build(
        cls,
        items: list[T],
        total_items_count: int,
        page_size: int,
        page_number: int,
    ) -> "PagedResult[T]":
        items_from = page_size * (page_number - 1) + 1
        return cls(
            items=items,
            total_items_count=total_items_count,
            total_pages=math.ceil(total_items_count / page_size),
            items_from=items_from,
            items_to=items_from + page_size - 1,
        )
