"""Restaurant and dish request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    GET    /api/restaurant                      - List (search, sort, page)
    GET    /api/restaurant/{id}                 - Get one
    POST   /api/restaurant                      - Create
    PUT    /api/restaurant/{id}                 - Update
    DELETE /api/restaurant/{id}                 - Delete
    GET    /api/restaurant/{id}/dish            - List dishes
    GET    /api/restaurant/{id}/dish/{dishId}   - Get dish
    POST   /api/restaurant/{id}/dish            - Create dish
    DELETE /api/restaurant/{id}/dish            - Delete all dishes
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import DishResult, PagedResult, RestaurantResult
from src.core.constants import DISH_NAME_MAX_LENGTH
from src.domain.types import Price


# =============================================================================
# Dish
# =============================================================================


class DishCreateRequest(BaseModel):
    """Request schema for dish creation.

    POST /api/restaurant/{id}/dish
    Returns: 201 Created + Location
    """

    name: str | None = Field(None, max_length=DISH_NAME_MAX_LENGTH, description="Dish name")
    description: str | None = Field(None, description="Dish description")
    price: Price = Field(..., description="Non-negative price")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Nashville Hot Chicken",
                "description": "Spicy fried chicken",
                "price": "10.30",
            }
        }
    )


class DishResponse(BaseModel):
    """Single dish."""

    id: UUID = Field(..., description="Dish ID")
    name: str = Field(..., description="Dish name")
    description: str | None = Field(None, description="Dish description")
    price: Decimal = Field(..., description="Price")

    @classmethod
    def from_dto(cls, dto: DishResult) -> "DishResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=dto.price,
        )


# =============================================================================
# Restaurant
# =============================================================================


class RestaurantCreateRequest(BaseModel):
    """Request schema for restaurant creation.

    Field rules (name length, required address parts, contact email format)
    are enforced by the application validator so every failing field is
    reported together.

    POST /api/restaurant
    Returns: 201 Created + Location
    """

    name: str | None = Field(None, description="Restaurant name (max 25 chars)")
    description: str | None = Field(None, description="Free-text description")
    category: str | None = Field(None, description="Category, e.g. Fast Food")
    has_delivery: bool = Field(False, description="Whether the restaurant delivers")
    contact_email: str | None = Field(None, description="Contact email")
    contact_number: str | None = Field(None, description="Contact phone number")
    city: str | None = Field(None, description="Address city (max 50 chars)")
    street: str | None = Field(None, description="Address street (max 50 chars)")
    postal_code: str | None = Field(None, description="Address postal code")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "KFC",
                "description": "Kentucky Fried Chicken",
                "category": "Fast Food",
                "has_delivery": True,
                "contact_email": "contact@kfc.com",
                "contact_number": "+48 123 456 789",
                "city": "Kraków",
                "street": "Długa 5",
                "postal_code": "30-001",
            }
        }
    )


class RestaurantUpdateRequest(BaseModel):
    """Request schema for restaurant update.

    PUT /api/restaurant/{id}
    Returns: 200 OK
    """

    name: str | None = Field(None, description="Restaurant name (max 25 chars)")
    description: str | None = Field(None, description="Free-text description")
    has_delivery: bool = Field(False, description="Whether the restaurant delivers")


class RestaurantResponse(BaseModel):
    """Restaurant with flattened address and its dishes."""

    id: UUID = Field(..., description="Restaurant ID")
    name: str = Field(..., description="Restaurant name")
    description: str | None = Field(None, description="Description")
    category: str = Field(..., description="Category")
    has_delivery: bool = Field(..., description="Whether the restaurant delivers")
    city: str = Field(..., description="Address city")
    street: str = Field(..., description="Address street")
    postal_code: str | None = Field(None, description="Address postal code")
    dishes: list[DishResponse] = Field(default_factory=list, description="Menu")

    @classmethod
    def from_dto(cls, dto: RestaurantResult) -> "RestaurantResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            category=dto.category,
            has_delivery=dto.has_delivery,
            city=dto.city,
            street=dto.street,
            postal_code=dto.postal_code,
            dishes=[DishResponse.from_dto(dish) for dish in dto.dishes],
        )


class RestaurantListResponse(BaseModel):
    """One page of restaurants.

    GET /api/restaurant
    """

    items: list[RestaurantResponse] = Field(..., description="Restaurants on this page")
    total_pages: int = Field(..., description="Number of pages for this page size")
    items_from: int = Field(..., description="1-based index of the first item")
    items_to: int = Field(..., description="1-based index of the last slot")
    total_items_count: int = Field(..., description="Matches before paging")

    @classmethod
    def from_dto(cls, dto: PagedResult[RestaurantResult]) -> "RestaurantListResponse":
        return cls(
            items=[RestaurantResponse.from_dto(item) for item in dto.items],
            total_pages=dto.total_pages,
            items_from=dto.items_from,
            items_to=dto.items_to,
            total_items_count=dto.total_items_count,
        )
